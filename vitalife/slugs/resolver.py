import logging
from typing import AbstractSet, Any, Callable, Optional

from vitalife.infrastructure.time import epoch_millis
from vitalife.slugs.models import ExhaustedFallback, Resolution, Unique
from vitalife.slugs.normalize import SLUG_MAX_LENGTH, with_suffix
from vitalife.slugs.repositories import CatalogRepository

logger = logging.getLogger(__name__)


class SlugResolver:
    """Finds a slug no other catalog entry holds.

    The base token is tried first, then ``base-1``, ``base-2`` and so on, one
    store lookup per candidate. After ``max_attempts`` lookups the resolver
    gives up probing and returns ``base-<epoch millis>`` unchecked.
    """

    def __init__(
        self,
        repository: CatalogRepository,
        max_attempts: int = 100,
        clock: Callable[[], int] = epoch_millis,
        max_length: int = SLUG_MAX_LENGTH,
    ) -> None:
        self.repository = repository
        self.max_attempts = max_attempts
        self.clock = clock
        self.max_length = max_length

    def resolve(
        self,
        base: str,
        exclude_id: Any = None,
        reserved: Optional[AbstractSet[str]] = None,
    ) -> Resolution:
        reserved = reserved or frozenset()
        candidate = base
        for attempt in range(1, self.max_attempts + 1):
            if candidate not in reserved and not self.repository.slug_exists(
                candidate, exclude_id
            ):
                return Unique(candidate)
            candidate = with_suffix(base, str(attempt), self.max_length)

        fallback = with_suffix(base, str(self.clock()), self.max_length)
        logger.warning(
            "%s: no free slug for %r after %s attempts, using %s",
            self.repository.table_name,
            base,
            self.max_attempts,
            fallback,
        )
        return ExhaustedFallback(fallback)
