import os
from dataclasses import dataclass
from typing import List, Optional

from vitalife.slugs.normalize import is_valid_slug


@dataclass
class DatabaseSettings:
    host: str
    name: str
    user: str
    password: str
    url: Optional[str] = None

    def get_url(self) -> str:
        """Return the SQLAlchemy URL, preferring an explicit DATABASE_URL."""
        if self.url:
            return self.url
        return f"mysql+mysqlconnector://{self.user}:{self.password}@{self.host}/{self.name}"


class Settings:
    """Django-inspired settings container with explicit configuration."""

    def __init__(self) -> None:
        self.environment = os.environ.get("VITALIFE_ENV", "base")
        self.log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        self.database = DatabaseSettings(
            host=os.environ.get("MYSQL_HOST", ""),
            name=os.environ.get("MYSQL_DB", ""),
            user=os.environ.get("MYSQL_USER", ""),
            password=os.environ.get("MYSQL_PASSWORD", ""),
            url=os.environ.get("DATABASE_URL") or None,
        )

        # Explicit catalog enablement (empty list = enable all installed catalogs)
        enabled_catalogs = os.environ.get("ENABLED_CATALOGS", "")
        self.enabled_catalogs: List[str] = [
            catalog.strip().lower()
            for catalog in enabled_catalogs.split(",")
            if catalog.strip()
        ]

        self.slugs = {
            "max_length": 100,
            "max_attempts": int(os.environ.get("SLUG_MAX_ATTEMPTS", "100")),
        }

        # Per-catalog storage layout; the slug column is always "slug".
        self.products = {
            "table": os.environ.get("PRODUCTS_TABLE", "products"),
            "name_column": "name",
            "placeholder": os.environ.get("SLUG_PLACEHOLDER_PRODUCTS", "producto"),
        }
        self.posts = {
            "table": os.environ.get("POSTS_TABLE", "posts"),
            "name_column": "title",
            "placeholder": os.environ.get("SLUG_PLACEHOLDER_POSTS", "articulo"),
        }
        self.blog_categories = {
            "table": os.environ.get("BLOG_CATEGORIES_TABLE", "blog_categories"),
            "name_column": "name",
            "placeholder": os.environ.get("SLUG_PLACEHOLDER_BLOG_CATEGORIES", "categoria"),
        }

        # Catalogs must be declared explicitly; no dynamic discovery.
        self.INSTALLED_CATALOGS = [
            "vitalife.catalogs.products.apps.ProductsConfig",
            "vitalife.catalogs.posts.apps.PostsConfig",
            "vitalife.catalogs.blog_categories.apps.BlogCategoriesConfig",
        ]

    def is_catalog_enabled(self, label: str) -> bool:
        """Return whether the catalog is enabled by configuration."""
        return not self.enabled_catalogs or label in self.enabled_catalogs

    def validate(self) -> dict:
        """Validate configuration and return any errors."""
        errors = {}

        if not self.database.url and not all(
            [
                self.database.host,
                self.database.name,
                self.database.user,
                self.database.password,
            ]
        ):
            errors["database"] = (
                "Missing database configuration (DATABASE_URL or MYSQL_HOST, MYSQL_DB, MYSQL_USER, MYSQL_PASSWORD)"
            )

        if self.slugs["max_attempts"] < 1:
            errors["slugs"] = "SLUG_MAX_ATTEMPTS must be at least 1"

        for label in ("products", "posts", "blog_categories"):
            placeholder = getattr(self, label)["placeholder"]
            if not is_valid_slug(placeholder):
                errors[label] = (
                    f"Invalid slug placeholder for {label}: {placeholder!r}"
                )

        return errors


settings = Settings()
