"""Factory for creating the configured repository."""

from __future__ import annotations

from ..config import ConfigurationError, Settings
from .base import Repository
from .memory import MemoryRepository
from .mongo import MongoRepository


def create_repository(settings: Settings) -> Repository:
    """Create (but do not connect) the repository selected by ``database_backend``."""
    backend = settings.database_backend.lower()

    if backend == "memory":
        return MemoryRepository()

    elif backend == "mongo":
        return MongoRepository(uri=settings.mongo_uri(), database=settings.mongo_db)

    else:
        raise ConfigurationError(f"Unsupported database backend: {settings.database_backend}")
