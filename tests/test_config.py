import pytest

from yarncomp.commands import YARN_TABLE
from yarncomp.config import Configuration, coerce_to_bool
from yarncomp.config_loader import ConfigLoader, resolve_config_path
from yarncomp.models import CompletionError
from yarncomp.schema import SETTINGS_SCHEMA
from yarncomp.settings import Settings, load_settings, settings_from_config


def test_config_access(test_logger):
    conf = Configuration({"a": 1, "b": "test"}, logger=test_logger)
    assert conf["a"] == 1
    assert conf.get("b") == "test"
    assert conf.get("c", 3) == 3


def test_schema_defaults(test_logger):
    conf = Configuration({"manifest": "other.json"}, logger=test_logger, schema=SETTINGS_SCHEMA)
    assert conf.get("manifest") == "other.json"
    assert conf.get("invocation_names") == ["yarn"]
    assert conf.get_bool("search_parents") is False


def test_coerce_to_bool():
    assert coerce_to_bool(None, default=True) is True
    assert coerce_to_bool("") is False
    assert coerce_to_bool("no") is False
    assert coerce_to_bool("Off ") is False
    assert coerce_to_bool("yes") is True
    assert coerce_to_bool("whatever") is True
    assert coerce_to_bool(0) is False


def test_get_str(test_logger):
    conf = Configuration({"a": "text", "b": 123}, logger=test_logger)
    assert conf.get_str("a") == "text"
    assert conf.get_str("b") == ""
    assert conf.get_str("b", "default") == "default"
    assert conf.get_str("missing", "default") == "default"


def test_get_list(test_logger):
    conf = Configuration({"a": ["x", "y"], "b": "single", "c": [1, 2], "d": 3}, logger=test_logger)
    assert conf.get_list("a") == ["x", "y"]
    assert conf.get_list("b") == ["single"]
    assert conf.get_list("missing") == []
    assert conf.get_list("missing", ["z"]) == ["z"]
    assert conf.get_list("c", ["fallback"]) == ["fallback"]
    assert conf.get_list("d") == []


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_missing_default_file(self, test_logger):
        assert ConfigLoader(test_logger).load() == {}

    def test_missing_explicit_file(self, test_logger, tmp_path):
        with pytest.raises(CompletionError):
            ConfigLoader(test_logger).load(tmp_path / "nope.toml")

    def test_load(self, test_logger, write_config):
        path = write_config('[yarncomp]\nmanifest = "pkg.json"\n')
        assert ConfigLoader(test_logger).load(path) == {"yarncomp": {"manifest": "pkg.json"}}

    def test_syntax_error(self, test_logger, write_config):
        path = write_config("[yarncomp\n")
        with pytest.raises(CompletionError):
            ConfigLoader(test_logger).load(path)

    def test_resolve_config_path(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CONF_DIR", str(tmp_path))
        assert resolve_config_path("$CONF_DIR/a.toml") == tmp_path / "a.toml"
        assert resolve_config_path("") == resolve_config_path()


class TestSettings:
    """Tests for the effective settings."""

    def test_defaults(self):
        settings = settings_from_config({})
        assert settings == Settings()
        assert settings.table.entries == YARN_TABLE.entries

    def test_overrides(self):
        settings = settings_from_config(
            {
                "yarncomp": {
                    "invocation_names": ["yarn", "yarnpkg"],
                    "manifest": "pkg.json",
                    "search_parents": True,
                    "dependency_fields": ["dependencies"],
                    "run_command": "exec",
                    "package_commands": ["workspaces focus"],
                },
                "commands": {"my-plugin sync": ["--force"]},
            }
        )
        assert settings.invocation_names == ("yarn", "yarnpkg")
        assert settings.manifest == "pkg.json"
        assert settings.search_parents is True
        assert settings.dependency_fields == ("dependencies",)
        assert settings.table.is_run_command(("exec",))
        assert settings.table.takes_package_names(("workspaces", "focus"))
        assert settings.table.takes_package_names(("why",))
        assert settings.table.lookup(("my-plugin", "sync")) == ("--force",)

    def test_single_invocation_name(self):
        assert settings_from_config({"yarncomp": {"invocation_names": "yarnpkg"}}).invocation_names == ("yarnpkg",)

    def test_invalid_values_fall_back(self, test_logger):
        settings = settings_from_config(
            {
                "yarncomp": {"invocation_names": [], "manifest": "a/b.json", "dependency_fields": 3},
                "commands": {"good": ["--ok"], "bad": "--nope", "worse": [1]},
            },
            log=test_logger,
        )
        assert settings.invocation_names == ("yarn",)
        assert settings.manifest == "package.json"
        assert settings.dependency_fields == ("dependencies", "devDependencies")
        assert settings.table.lookup(("good",)) == ("--ok",)
        assert ("bad",) not in settings.table
        assert ("worse",) not in settings.table

    @pytest.mark.parametrize("value", [["exec"], 3, "  "])
    def test_invalid_strings_fall_back(self, test_logger, value):
        settings = settings_from_config({"yarncomp": {"run_command": value, "manifest": value}}, log=test_logger)
        assert settings.table.run_command == ("run",)
        assert settings.table.is_run_command(("run",))
        assert settings.manifest == "package.json"

    def test_sections_of_wrong_type(self):
        settings = settings_from_config({"yarncomp": "oops", "commands": ["x"]})
        assert settings == Settings()

    def test_load_settings(self, write_config):
        path = write_config('[yarncomp]\nsearch_parents = "yes"\n\n[commands]\n"npm ping" = []\n')
        settings = load_settings(path)
        assert settings.search_parents is True
        assert settings.table.lookup(("npm", "ping")) == ()

    def test_load_settings_default_location(self):
        assert load_settings() == Settings()
