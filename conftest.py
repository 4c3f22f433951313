import pytest
from sqlalchemy import text

from vitalife.catalogs.posts.apps import PostsConfig
from vitalife.catalogs.products.apps import ProductsConfig
from vitalife.infrastructure.database import open_store
from vitalife.settings.base import DatabaseSettings, Settings

TABLES = {
    "products": "name",
    "posts": "title",
    "blog_categories": "name",
}


class DummySettings(Settings):
    def __init__(self, url: str) -> None:
        super().__init__()
        self.environment = "test"
        self.log_level = "INFO"
        self.enabled_catalogs = []
        self.database = DatabaseSettings(host="", name="", user="", password="", url=url)
        self.slugs = {"max_length": 100, "max_attempts": 100}
        self.products = {"table": "products", "name_column": "name", "placeholder": "producto"}
        self.posts = {"table": "posts", "name_column": "title", "placeholder": "articulo"}
        self.blog_categories = {
            "table": "blog_categories",
            "name_column": "name",
            "placeholder": "categoria",
        }


@pytest.fixture
def database_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'catalog.db'}"
    with open_store(url) as store:
        with store.connection() as conn:
            for table, name_column in TABLES.items():
                conn.execute(
                    text(
                        f"CREATE TABLE {table} (id INTEGER PRIMARY KEY, {name_column} TEXT, slug TEXT)"
                    )
                )
                conn.execute(text(f"CREATE INDEX ix_{table}_slug ON {table} (slug)"))
    return url


@pytest.fixture
def project_settings(database_url):
    return DummySettings(database_url)


@pytest.fixture
def store(database_url):
    with open_store(database_url) as handle:
        yield handle


@pytest.fixture
def products(project_settings):
    return ProductsConfig(project_settings)


@pytest.fixture
def posts(project_settings):
    return PostsConfig(project_settings)


def add_entry(store, table, entry_id, name, slug=None):
    name_column = TABLES[table]
    with store.connection() as conn:
        conn.execute(
            text(f"INSERT INTO {table} (id, {name_column}, slug) VALUES (:id, :name, :slug)"),
            {"id": entry_id, "name": name, "slug": slug},
        )


def slugs_by_id(store, table):
    with store.connection() as conn:
        rows = conn.execute(text(f"SELECT id, slug FROM {table} ORDER BY id")).fetchall()
    return {row.id: row.slug for row in rows}


@pytest.fixture
def insert_entry(store):
    def _insert(table, entry_id, name, slug=None):
        add_entry(store, table, entry_id, name, slug)

    return _insert


@pytest.fixture
def stored_slugs(store):
    def _read(table="products"):
        return slugs_by_id(store, table)

    return _read
