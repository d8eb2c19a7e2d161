# ABOUTME: Memory implementations for configuration interfaces
# ABOUTME: Provides the dictionary-backed configuration source and merge helpers

from .config_source import InMemoryConfigSource, deep_merge, expand_dotted_keys

__all__ = ["InMemoryConfigSource", "deep_merge", "expand_dotted_keys"]
