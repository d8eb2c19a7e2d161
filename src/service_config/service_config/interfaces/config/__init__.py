# ABOUTME: Configuration interfaces
# ABOUTME: Includes the hierarchical configuration source contract

from .config_source import AbstractConfigSource

__all__ = [
    "AbstractConfigSource",
]
