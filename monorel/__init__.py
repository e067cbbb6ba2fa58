"""monorel: release orchestration for package monorepos."""

__version__ = "0.1.0"
