import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from vitalife.core.exceptions import StoreError
from vitalife.infrastructure.database import Store
from vitalife.slugs.models import CatalogEntry

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Slug-related reads and writes against one catalog table."""

    def __init__(self, store: Store, table: str, name_column: str = "name") -> None:
        self.store = store
        self.table_name = table
        self.name_column = name_column

    def _execute(self, operation: str, sql: str, params: Optional[Dict[str, Any]] = None):
        try:
            with self.store.connection() as conn:
                result = conn.execute(text(sql), params or {})
                if result.returns_rows:
                    return result.fetchall()
                return result.rowcount
        except SQLAlchemyError as exc:
            raise StoreError(
                f"{operation} failed on table {self.table_name}: {exc}"
            ) from exc

    def list_entries(self) -> List[CatalogEntry]:
        rows = self._execute(
            "list entries",
            f"""
                SELECT id, {self.name_column} AS name, slug
                FROM {self.table_name}
                ORDER BY id
            """,
        )
        return [CatalogEntry(id=row.id, name=row.name, slug=row.slug) for row in rows]

    def slug_exists(self, slug: str, exclude_id: Any = None) -> bool:
        """Point lookup for ``slug`` held by any entry other than ``exclude_id``."""
        sql = f"SELECT id FROM {self.table_name} WHERE slug = :slug"
        params: Dict[str, Any] = {"slug": slug}
        if exclude_id is not None:
            sql += " AND id <> :exclude_id"
            params["exclude_id"] = exclude_id
        rows = self._execute("slug lookup", sql + " LIMIT 1", params)
        return bool(rows)

    def update_slug(self, entry_id: Any, slug: str) -> int:
        updated = self._execute(
            "slug update",
            f"UPDATE {self.table_name} SET slug = :slug WHERE id = :id",
            {"slug": slug, "id": entry_id},
        )
        logger.debug("%s: entry %s slug set to %s", self.table_name, entry_id, slug)
        return updated

    def duplicate_slugs(self) -> Dict[str, List[Any]]:
        rows = self._execute(
            "duplicate scan",
            f"""
                SELECT slug, id
                FROM {self.table_name}
                WHERE slug IN (
                    SELECT slug FROM {self.table_name}
                    WHERE slug IS NOT NULL AND slug <> ''
                    GROUP BY slug
                    HAVING COUNT(*) > 1
                )
                ORDER BY slug, id
            """,
        )
        duplicates: Dict[str, List[Any]] = {}
        for row in rows:
            duplicates.setdefault(row.slug, []).append(row.id)
        return duplicates
