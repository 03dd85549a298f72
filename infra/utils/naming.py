"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass

from infra.configs.environment import EnvironmentName


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment
    """
    project: str
    environment: EnvironmentName

    def name(self, resource: str = "") -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'private-subnet-0');
                empty for the base name

        Returns:
            Formatted resource name
        """
        base = f"{self.project}-{self.environment.value}"
        return f"{base}-{resource}" if resource else base

    def az_name(self, region: str, index: int) -> str:
        """
        Generate an availability zone name from its index in the region.

        Args:
            region: AWS region (e.g. 'us-east-1')
            index: Zero-based zone index

        Returns:
            Zone name (e.g. 'us-east-1a')
        """
        return f"{region}{chr(ord('a') + index)}"
