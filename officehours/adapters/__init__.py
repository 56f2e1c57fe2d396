"""
Adapters layer - Lecturer persistence.
"""

from .memory_repository import InMemoryLecturerRepository
from .yaml_repository import YamlLecturerRepository

__all__ = ["InMemoryLecturerRepository", "YamlLecturerRepository"]
