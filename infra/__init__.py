"""
Environment-scoped infrastructure configuration for my-app.

This package resolves and validates per-environment configuration:
- configs: environment enum, configuration registry, validation, loader
- flags: per-environment feature flags
- components: Pulumi resources built from a validated configuration
- stack: stack factory wiring the components together
"""
