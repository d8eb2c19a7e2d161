# ABOUTME: Interfaces package exports
# ABOUTME: Exports the abstract contracts consumed by the configuration resolver

# Configuration interfaces
from .config import AbstractConfigSource

__all__ = [
    "AbstractConfigSource",
]
