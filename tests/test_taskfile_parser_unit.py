"""Unit tests for Taskfile discovery and decoding."""

import pytest

from core import TaskRecord
from core.errors import EmptyRegistryError, StartupError, TaskfileError, TaskfileNotFoundError
from infrastructure import taskfile_parser
from infrastructure.taskfile_parser import find_taskfile, load_registry, parse_taskfile, parse_tasks

TASKFILE = """\
version: '3'

tasks:
  build:
    desc: Build the binary
    summary: Long build summary
    cmds:
      - go build ./...
      - task: lint
      - cmd: echo mapped
  lint:
    summary: Run linters
    cmds:
      - golangci-lint run
  clean:
    - rm -rf dist
  test:
    desc: 42
    summary: Run tests
    cmds: [go test ./...]
  1:
    desc: numeric name
"""


def write(path, content=TASKFILE):
    path.write_text(content, encoding="utf-8")
    return path


class TestFindTaskfile:
    def test_in_start_directory(self, tmp_path):
        target = write(tmp_path / "Taskfile.yml")
        assert find_taskfile(tmp_path) == target.resolve()

    def test_yml_preferred_over_yaml(self, tmp_path):
        write(tmp_path / "Taskfile.yaml")
        yml = write(tmp_path / "Taskfile.yml")
        assert find_taskfile(tmp_path) == yml.resolve()

    def test_walks_up_to_parents(self, tmp_path):
        target = write(tmp_path / "Taskfile.yaml")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_taskfile(nested) == target.resolve()

    def test_nearest_wins(self, tmp_path):
        write(tmp_path / "Taskfile.yml")
        nested = tmp_path / "sub"
        nested.mkdir()
        inner = write(nested / "Taskfile.yml")
        assert find_taskfile(nested) == inner.resolve()

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        target = write(tmp_path / "Taskfile.yml")
        monkeypatch.chdir(tmp_path)
        assert find_taskfile() == target.resolve()

    def test_not_found(self, tmp_path, monkeypatch):
        monkeypatch.setattr(taskfile_parser, "TASKFILE_NAMES", ("Taskfile.gt-missing.yml",))
        with pytest.raises(TaskfileNotFoundError, match="no Taskfile.yml or Taskfile.yaml found"):
            find_taskfile(tmp_path)


class TestParseTaskfile:
    def test_records_in_document_order(self, tmp_path):
        records = parse_taskfile(write(tmp_path / "Taskfile.yml"))
        assert [r.name for r in records] == ["build", "lint", "clean", "test", "1"]

    def test_desc_preferred_then_summary(self, tmp_path):
        records = {r.name: r for r in parse_taskfile(write(tmp_path / "Taskfile.yml"))}
        assert records["build"].description == "Build the binary"
        assert records["lint"].description == "Run linters"
        # non-string desc falls back to summary
        assert records["test"].description == "Run tests"

    def test_only_string_commands_kept(self, tmp_path):
        records = {r.name: r for r in parse_taskfile(write(tmp_path / "Taskfile.yml"))}
        assert records["build"].commands == ("go build ./...",)
        assert records["test"].commands == ("go test ./...",)

    def test_non_mapping_task_body(self, tmp_path):
        records = {r.name: r for r in parse_taskfile(write(tmp_path / "Taskfile.yml"))}
        assert records["clean"].description == ""
        assert records["clean"].commands == ()

    def test_invalid_yaml(self, tmp_path):
        path = write(tmp_path / "Taskfile.yml", "tasks: [unclosed\n")
        with pytest.raises(TaskfileError):
            parse_taskfile(path)

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(TaskfileError):
            parse_taskfile(tmp_path / "missing.yml")

    def test_binary_file(self, tmp_path):
        path = tmp_path / "Taskfile.yml"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(TaskfileError):
            parse_taskfile(path)

    @pytest.mark.parametrize("document", [None, [], "text", {"version": "3"}, {"tasks": ["a"]}, {"tasks": None}])
    def test_parse_tasks_without_task_mapping(self, document):
        assert parse_tasks(document) == []

    def test_null_key_is_not_a_task(self):
        assert parse_tasks({"tasks": {None: {}, "build": {}}}) == [TaskRecord("build")]


class TestLoadRegistry:
    def test_loads_registry(self, tmp_path):
        write(tmp_path / "Taskfile.yml")
        registry = load_registry(tmp_path)
        assert isinstance(registry, tuple)
        assert registry[0].name == "build"

    def test_zero_tasks_is_fatal(self, tmp_path):
        write(tmp_path / "Taskfile.yml", "version: '3'\ntasks: {}\n")
        with pytest.raises(EmptyRegistryError):
            load_registry(tmp_path)

    def test_empty_file_is_fatal(self, tmp_path):
        write(tmp_path / "Taskfile.yml", "")
        with pytest.raises(StartupError):
            load_registry(tmp_path)

    def test_non_string_names_are_skipped(self, tmp_path):
        write(tmp_path / "Taskfile.yml", "tasks:\n  null: {}\n  1: {}\n  true: {}\n  real: {}\n")
        assert [r.name for r in load_registry(tmp_path)] == ["real"]

    def test_only_non_string_names_is_fatal(self, tmp_path):
        write(tmp_path / "Taskfile.yml", "tasks:\n  null: {}\n")
        with pytest.raises(EmptyRegistryError):
            load_registry(tmp_path)
