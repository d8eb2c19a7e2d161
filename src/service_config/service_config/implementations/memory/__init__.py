# ABOUTME: In-memory implementations package
# ABOUTME: Zero-dependency implementations using Python standard library only

from .config.config_source import InMemoryConfigSource

__all__ = [
    "InMemoryConfigSource",
]
