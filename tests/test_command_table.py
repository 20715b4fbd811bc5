"""Tests for the command table."""

import pytest

from yarncomp.commands import PACKAGE_COMMANDS, YARN_COMMANDS, YARN_TABLE, CommandTable, join_path, split_path
from yarncomp.commands.parsing import is_path_prefix
from yarncomp.models import CompletionError


class TestParsing:
    """Tests for path helpers."""

    def test_split_path(self):
        assert split_path("config set") == ("config", "set")
        assert split_path("  npm   tag  add ") == ("npm", "tag", "add")
        assert split_path("") == ()

    def test_join_path(self):
        assert join_path(("plugin", "import", "from", "sources")) == "plugin import from sources"

    def test_is_path_prefix(self):
        assert is_path_prefix(("config",), ("config", "set"))
        assert is_path_prefix(("config", "set"), ("config", "set"))
        assert is_path_prefix((), ("config",))
        assert not is_path_prefix(("config", "set"), ("config",))
        assert not is_path_prefix(("conf",), ("config",))


class TestCommandTable:
    """Tests for CommandTable."""

    def test_lookup_is_exact(self):
        table = CommandTable.from_mapping({"config": ["--json"], "config set": ["--home"]})
        assert table.lookup(("config",)) == ("--json",)
        assert table.lookup(("config", "set")) == ("--home",)
        assert table.lookup(("config", "se")) is None
        assert table.lookup(("conf",)) is None

    def test_all_paths(self):
        table = CommandTable.from_mapping({"config": [], "config set": [], "add": []})
        assert table.all_paths() == {("config",), ("config", "set"), ("add",)}
        assert table.paths() == (("config",), ("config", "set"), ("add",))
        assert len(table) == 3
        assert ("add",) in table

    def test_option_order_is_kept(self):
        assert YARN_TABLE.lookup(("version",))[:4] == ("--deferred", "--immediate", "major", "minor")

    def test_entries_are_read_only(self):
        with pytest.raises(TypeError):
            YARN_TABLE.entries[("new",)] = ()

    def test_duplicate_paths_rejected(self):
        with pytest.raises(CompletionError):
            CommandTable.from_mapping({"config set": [], "config  set": []})

    def test_blank_name_rejected(self):
        with pytest.raises(CompletionError):
            CommandTable.from_mapping({" ": []})

    def test_run_and_package_commands(self):
        assert YARN_TABLE.is_run_command(("run",))
        assert not YARN_TABLE.is_run_command(("run", "x"))
        for cmd in PACKAGE_COMMANDS:
            assert YARN_TABLE.takes_package_names(split_path(cmd))
        assert YARN_TABLE.takes_package_names(("npm", "info"))
        assert not YARN_TABLE.takes_package_names(("npm",))
        assert not YARN_TABLE.takes_package_names(("add",))

    def test_extended(self):
        table = YARN_TABLE.extended(
            {"config set": ["--home", "--custom"], "my-plugin sync": ["--force"]},
            package_commands=["my-plugin sync"],
            run_command="exec",
        )
        assert table.lookup(("config", "set")) == ("--home", "--custom")
        assert table.lookup(("my-plugin", "sync")) == ("--force",)
        assert table.paths()[-1] == ("my-plugin", "sync")
        assert table.takes_package_names(("my-plugin", "sync"))
        assert table.takes_package_names(("why",))
        assert table.is_run_command(("exec",))
        # the shared table is left untouched
        assert YARN_TABLE.lookup(("config", "set")) == ("--json", "--home")
        assert ("my-plugin", "sync") not in YARN_TABLE

    def test_builtin_table_matches_data(self):
        assert len(YARN_TABLE) == len(YARN_COMMANDS)
        for name, options in YARN_COMMANDS.items():
            assert YARN_TABLE.lookup(split_path(name)) == tuple(options)
