import importlib
from typing import Dict, List, Optional, Type

from vitalife.core import signals
from vitalife.core.exceptions import CatalogLoadError
from vitalife.infrastructure.database import Store
from vitalife.settings import settings


class CatalogConfig:
    """Django-style AppConfig analogue for one sluggable table."""

    name: str
    verbose_name: str
    enabled: bool = True
    service_class_path: str = "vitalife.slugs.services.SlugMigrationService"

    def __init__(self, project_settings=None) -> None:
        self.settings = project_settings or settings
        self.enabled = self.enabled and self.settings.is_catalog_enabled(self.name)
        layout = getattr(self.settings, self.name, None)
        if not layout:
            raise CatalogLoadError(f"No settings section for catalog {self.name}")
        self.table: str = layout["table"]
        self.name_column: str = layout.get("name_column", "name")
        self.placeholder: str = layout["placeholder"]

    def ready(self) -> None:
        """Hook executed once after registry is ready."""

    def create_service(self, store: Store):
        """Instantiate the configured service bound to ``store``."""
        module_path, class_name = self.service_class_path.rsplit(".", 1)
        module = importlib.import_module(module_path)
        service_cls: Type = getattr(module, class_name)
        return service_cls(self, store, self.settings)


class CatalogRegistry:
    """Loads and manages all configured catalogs."""

    def __init__(self, project_settings=None) -> None:
        self.settings = project_settings or settings
        self.catalogs: Dict[str, CatalogConfig] = {}

    def load_catalogs(self) -> None:
        for dotted_path in self.settings.INSTALLED_CATALOGS:
            config = self._load_catalog_config(dotted_path)
            if not config.enabled:
                continue
            self.catalogs[config.name] = config

        for config in self.catalogs.values():
            config.ready()
            signals.catalog_ready.send(sender=config)

    def _load_catalog_config(self, dotted_path: str) -> CatalogConfig:
        module_path, class_name = dotted_path.rsplit(".", 1)
        try:
            module = importlib.import_module(module_path)
            config_cls: Type[CatalogConfig] = getattr(module, class_name)
        except (ImportError, AttributeError) as exc:
            raise CatalogLoadError(f"Cannot load catalog {dotted_path}: {exc}") from exc
        return config_cls(self.settings)

    def get_catalog(self, name: str) -> Optional[CatalogConfig]:
        return self.catalogs.get(name)

    def get_catalog_configs(self) -> List[CatalogConfig]:
        return list(self.catalogs.values())
