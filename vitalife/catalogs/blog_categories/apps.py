from vitalife.core.apps import CatalogConfig


class BlogCategoriesConfig(CatalogConfig):
    name = "blog_categories"
    verbose_name = "Blog categories"
