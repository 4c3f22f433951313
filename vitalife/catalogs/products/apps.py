from vitalife.core.apps import CatalogConfig


class ProductsConfig(CatalogConfig):
    name = "products"
    verbose_name = "Products"
