"""Parse command lines against a command tree described in YAML."""

__version__ = "0.1.0"
__all__ = ["__version__"]