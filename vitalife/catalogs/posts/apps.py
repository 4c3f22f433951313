from vitalife.core.apps import CatalogConfig


class PostsConfig(CatalogConfig):
    name = "posts"
    verbose_name = "Blog posts"
