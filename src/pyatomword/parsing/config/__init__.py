"""YAML run configuration parsing."""

from .config_parser import RunConfigParser

__all__ = [
    "RunConfigParser"
]
