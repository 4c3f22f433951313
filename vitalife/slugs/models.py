from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass
class CatalogEntry:
    id: Any
    name: Optional[str]
    slug: Optional[str] = None

    @property
    def has_slug(self) -> bool:
        return bool(self.slug and self.slug.strip())


@dataclass(frozen=True)
class Unique:
    """The token was confirmed absent from the store."""

    token: str


@dataclass(frozen=True)
class ExhaustedFallback:
    """Every suffix up to the retry cap collided; the token carries a timestamp."""

    token: str


Resolution = Union[Unique, ExhaustedFallback]


@dataclass
class SlugAssignment:
    entry_id: Any
    name: Optional[str]
    slug: str
    fallback: bool = False
    placeholder: bool = False


@dataclass
class MigrationReport:
    catalog: str
    updated_count: int = 0
    skipped_count: int = 0
    dry_run: bool = False
    assignments: List[SlugAssignment] = field(default_factory=list)


@dataclass
class SlugIssue:
    entry_id: Any
    slug: Optional[str]
    problem: str
