import pytest

from vitalife.core.apps import CatalogRegistry
from vitalife.core.exceptions import CatalogLoadError


def test_registry_loads_installed_catalogs(project_settings):
    registry = CatalogRegistry(project_settings)
    registry.load_catalogs()

    names = [config.name for config in registry.get_catalog_configs()]
    assert names == ["products", "posts", "blog_categories"]
    assert registry.get_catalog("posts").name_column == "title"
    assert registry.get_catalog("blog_categories").placeholder == "categoria"


def test_registry_honours_enabled_catalogs(project_settings):
    project_settings.enabled_catalogs = ["posts"]
    registry = CatalogRegistry(project_settings)
    registry.load_catalogs()

    assert [config.name for config in registry.get_catalog_configs()] == ["posts"]
    assert registry.get_catalog("products") is None


def test_registry_rejects_bad_dotted_path(project_settings):
    project_settings.INSTALLED_CATALOGS = ["vitalife.catalogs.reviews.apps.ReviewsConfig"]
    with pytest.raises(CatalogLoadError):
        CatalogRegistry(project_settings).load_catalogs()


def test_settings_validation(project_settings):
    assert project_settings.validate() == {}

    project_settings.products["placeholder"] = "-bad-"
    project_settings.slugs["max_attempts"] = 0
    errors = project_settings.validate()
    assert set(errors) == {"products", "slugs"}


def test_database_url_prefers_explicit_url(project_settings):
    database = project_settings.database
    assert database.get_url().startswith("sqlite:///")

    database.url = None
    database.host, database.name, database.user, database.password = "db", "vitalife", "app", "secret"
    assert database.get_url() == "mysql+mysqlconnector://app:secret@db/vitalife"
