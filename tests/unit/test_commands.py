"""Tests for bundled command shapes."""

from pathlib import Path

import pytest

from cmdparts.commands import (
    COMMANDS,
    ChmodCommand,
    ColorWhen,
    CopyCommand,
    FileCommand,
    KillCommand,
    ListCommand,
    SortKey,
    get_command,
)
from cmdparts.errors import InvalidFieldValueError, UnknownCommandError


class TestKillCommand:
    """Test KillCommand."""

    def test_force_and_pids(self):
        parts = KillCommand.new().with_force().with_pids([12, 34]).to_parts()
        assert parts == ["kill", "--force", "12", "34"]

    def test_signal_prefix(self):
        parts = KillCommand.new().with_signal("KILL").push_pid(1).to_parts()
        assert parts == ["kill", "-KILL", "1"]

    def test_pids_converted(self):
        assert KillCommand.new().with_pids(["7", 8]).pids == [7, 8]

    def test_bad_pid(self):
        with pytest.raises(InvalidFieldValueError, match="pids"):
            KillCommand.new().push_pid("init")


class TestCopyCommand:
    """Test CopyCommand."""

    def test_output_example(self):
        assert CopyCommand.new().with_output("out.txt").to_parts() == [
            "cp",
            "--output",
            "out.txt",
        ]

    def test_full_order(self):
        parts = (
            CopyCommand.new()
            .with_sources(["a.txt", Path("dir")])
            .with_output("dest")
            .with_recursive()
            .with_force()
            .to_parts()
        )
        assert parts == ["cp", "-f", "-r", "--output", "dest", "a.txt", "dir"]

    def test_output_is_path(self):
        assert CopyCommand.new().with_output("x").output == Path("x")


class TestFileCommand:
    """Test FileCommand."""

    def test_sort_key(self):
        parts = FileCommand.new().with_sort_key("name").to_parts()
        assert parts == ["file", "--sort-key", "name"]

    def test_full_order(self):
        parts = (
            FileCommand.new()
            .with_path("notes.md")
            .with_separator("|")
            .with_mime()
            .with_brief()
            .to_parts()
        )
        assert parts == ["file", "--brief", "--mime", "--separator=|", "notes.md"]


class TestListCommand:
    """Test ListCommand."""

    def test_enums_render_values(self):
        parts = (
            ListCommand.new()
            .with_sort("size")
            .with_color(ColorWhen.NEVER)
            .with_long()
            .to_parts()
        )
        assert parts == ["ls", "-l", "--sort", "size", "--color=never"]

    def test_sort_converted_to_enum(self):
        assert ListCommand.new().with_sort("time").sort is SortKey.TIME

    def test_invalid_sort(self):
        with pytest.raises(InvalidFieldValueError, match="sort"):
            ListCommand.new().with_sort("colour")

    def test_paths_mapped(self):
        parts = ListCommand.new().with_all().with_paths(["src", "tests"]).push_path("docs").to_parts()
        assert parts == ["ls", "-a", "src", "tests", "docs"]


class TestChmodCommand:
    """Test ChmodCommand."""

    def test_default_emits_mode(self):
        """Test that the required mode is always emitted."""
        assert ChmodCommand.new().to_parts() == ["chmod", "644"]

    def test_full_order(self):
        parts = (
            ChmodCommand.new()
            .with_paths(["bin/run"])
            .with_mode("755")
            .with_reference("ref.txt")
            .with_recursive()
            .to_parts()
        )
        assert parts == ["chmod", "-R", "--reference=ref.txt", "755", "bin/run"]

    def test_integer_mode(self):
        assert ChmodCommand.new().with_mode(0o700).to_parts() == ["chmod", "700"]

    def test_invalid_mode(self):
        with pytest.raises(InvalidFieldValueError, match="mode"):
            ChmodCommand.new().with_mode("rwx")


class TestRegistry:
    """Test command registry."""

    def test_all_shapes_default_to_seed(self):
        """Test that default shapes without positionals emit only the seed."""
        for name, shape in COMMANDS.items():
            if shape is ChmodCommand:
                continue
            assert shape.new().to_parts() == [name]

    def test_registry_names_match_seeds(self):
        for name, shape in COMMANDS.items():
            assert shape.assembler.command == name

    def test_get_command(self):
        assert get_command("kill") is KillCommand

    def test_unknown_command(self):
        with pytest.raises(UnknownCommandError, match="Available"):
            get_command("rm")


class TestFromMappingConversions:
    """Test that mapped documents go through each shape's setter conversions."""

    def test_chmod_integer_mode_read_as_digits(self):
        config = ChmodCommand.from_mapping({"mode": 755, "paths": ["x"]})
        assert config.mode == 0o755
        assert config.to_parts() == ["chmod", "755", "x"]

    def test_chmod_string_mode(self):
        config = ChmodCommand.from_mapping({"mode": "0750", "reference": "ref"})
        assert config.to_parts() == ["chmod", "--reference=ref", "750"]

    @pytest.mark.parametrize("mode", [789, "rwx", "17777", True])
    def test_chmod_invalid_mode(self, mode):
        with pytest.raises(InvalidFieldValueError) as exc_info:
            ChmodCommand.from_mapping({"mode": mode})

        assert exc_info.value.field == "mode"

    def test_chmod_fluent_numeric_mode_unchanged(self):
        """Test that fluent calls keep treating integers as numeric modes."""
        assert ChmodCommand.new().with_mode(0o755).to_parts() == ["chmod", "755"]

    def test_chmod_mode_out_of_range(self):
        with pytest.raises(InvalidFieldValueError, match="out of range"):
            ChmodCommand.new().with_mode(0o10000)

    def test_chmod_string_mode_assigned_directly(self):
        """Test that bypassing the setter gives a field error, not a crash."""
        with pytest.raises(InvalidFieldValueError, match="mode: expected int"):
            ChmodCommand(mode="755").to_parts()

    def test_kill_pids_converted(self):
        config = KillCommand.from_mapping({"pids": ["12", 34], "signal": 9})
        assert config.pids == [12, 34]
        assert config.to_parts() == ["kill", "-9", "12", "34"]

    def test_kill_bad_pid(self):
        with pytest.raises(InvalidFieldValueError, match="pids"):
            KillCommand.from_mapping({"pids": ["abc"]})

    def test_kill_flag_requires_bool(self):
        with pytest.raises(InvalidFieldValueError, match="force: expected bool"):
            KillCommand.from_mapping({"force": "yes"})

    def test_ls_sort_converted_to_enum(self):
        config = ListCommand.from_mapping({"sort": "size", "color": "auto"})
        assert config.sort is SortKey.SIZE
        assert config.color is ColorWhen.AUTO

    def test_ls_bad_sort(self):
        with pytest.raises(InvalidFieldValueError, match="sort"):
            ListCommand.from_mapping({"sort": "bogus"})

    def test_cp_paths_converted(self):
        config = CopyCommand.from_mapping({"output": "out", "sources": "a.txt"})
        assert config.output == Path("out")
        assert config.sources == [Path("a.txt")]

    def test_null_optional_is_absent(self):
        assert FileCommand.from_mapping({"sort_key": None}).to_parts() == ["file"]
