import sys

import pytest

import manage
from vitalife.core.exceptions import CommandError, ConfigurationError
from vitalife.core.management import execute_from_command_line


def test_migrate_slugs_writes_and_prints_summary(project_settings, insert_entry, stored_slugs, capsys):
    insert_entry("products", 1, "Whey Protein", "whey-protein")
    insert_entry("products", 2, "Batido Fresa", None)
    insert_entry("posts", 1, "Recetas con avena", None)

    code = execute_from_command_line("migrate_slugs", [], project_settings)

    assert code == 0
    out = capsys.readouterr().out
    assert "products: Updated 1, Skipped 1" in out
    assert "posts: Updated 1, Skipped 0" in out
    assert "blog_categories: Updated 0, Skipped 0" in out
    assert stored_slugs("products")[2] == "batido-fresa"
    assert stored_slugs("posts")[1] == "recetas-con-avena"


def test_migrate_slugs_for_selected_catalog_dry_run(project_settings, insert_entry, stored_slugs, capsys):
    insert_entry("products", 1, "Batido Fresa", None)
    insert_entry("posts", 1, "Recetas con avena", None)

    code = execute_from_command_line("migrate_slugs", ["products", "--dry-run"], project_settings)

    assert code == 0
    out = capsys.readouterr().out
    assert "products: Would update 1, Skipped 0" in out
    assert "posts" not in out
    assert stored_slugs("products") == {1: None}


def test_check_slugs_exit_code(project_settings, insert_entry, capsys):
    insert_entry("products", 1, "Batido Fresa", None)
    assert execute_from_command_line("check_slugs", ["products"], project_settings) == 1
    assert "1 slug issues" in capsys.readouterr().out

    execute_from_command_line("migrate_slugs", ["products"], project_settings)
    assert execute_from_command_line("check_slugs", ["products"], project_settings) == 0


def test_debug_lists_catalogs(project_settings, capsys):
    assert execute_from_command_line("debug", [], project_settings) == 0
    assert capsys.readouterr().out.split() == ["products", "posts", "blog_categories"]


def test_unknown_command(project_settings):
    with pytest.raises(CommandError):
        execute_from_command_line("runserver", [], project_settings)


def test_unknown_catalog(project_settings):
    with pytest.raises(CommandError):
        execute_from_command_line("migrate_slugs", ["reviews"], project_settings)


def test_missing_database_configuration(project_settings):
    project_settings.database.url = None
    with pytest.raises(ConfigurationError):
        execute_from_command_line("migrate_slugs", [], project_settings)


def test_manage_exits_non_zero_on_failure(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["manage.py", "runserver"])
    assert manage.main() == 1
