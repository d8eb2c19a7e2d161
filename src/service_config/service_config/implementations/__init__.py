# ABOUTME: Implementations package
# ABOUTME: Concrete configuration sources for the resolver

from .memory import InMemoryConfigSource
from .layered import LayeredConfigSource

__all__ = [
    "InMemoryConfigSource",
    "LayeredConfigSource",
]
