"""
Tag factory for AWS resources.

Provides consistent tagging for cost allocation and resource management.
"""

from collections.abc import Mapping


def create_tags(
    base_tags: Mapping[str, str],
    resource_name: str,
    project: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        base_tags: Environment tags from the resolved configuration
        resource_name: Name of the resource
        project: Project identifier, same prefix as resource names
        **extra_tags: Additional tags to include

    Returns:
        Dictionary of tags
    """
    return merge_tags(
        {"Project": project},
        base_tags,
        {"Name": resource_name},
        extra_tags,
    )


def merge_tags(
    base_tags: Mapping[str, str],
    *additional_tags: Mapping[str, str],
) -> dict[str, str]:
    """
    Merge multiple tag dictionaries.

    Args:
        base_tags: Base tag dictionary
        *additional_tags: Additional tag dictionaries to merge

    Returns:
        Merged tag dictionary
    """
    result = dict(base_tags)
    for tags in additional_tags:
        result.update(tags)
    return result
