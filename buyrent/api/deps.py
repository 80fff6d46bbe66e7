"""FastAPI dependency injection."""

from functools import lru_cache
from typing import Callable

from buyrent.config import settings
from buyrent.engine.projection import project
from buyrent.models.inputs import ProjectionInputs
from buyrent.models.results import ProjectionResult

# ProjectionInputs is frozen and hashable, so whole configurations key the cache
cached_project = lru_cache(maxsize=settings.projection_cache_size)(project)


def get_projector() -> Callable[[ProjectionInputs], ProjectionResult]:
    return cached_project
