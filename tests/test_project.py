"""Tests for project file tools."""

import pytest
from pathlib import Path
from wmproject.tools.project import (
    create_project,
    load_project,
    describe_project,
    add_entry,
    remove_entry,
    set_entry_option,
    set_entry_save,
    hide_items,
    get_comparison,
    register,
    TOOLS,
)
from wmproject.xml.parser import parse_project


def test_create_project(temp_dir):
    """Test creating a new project file."""
    project_path = str(temp_dir / "new.WinMerge")
    result = create_project(path=project_path, left="/a", right="/b", recursive=True)

    assert result["status"] == "created"
    assert Path(project_path).exists()
    assert result["entry_count"] == 1

    entry = parse_project(project_path).entries[0]
    assert entry.get_left() == ("/a", False)
    assert entry.subfolders.value == 1


def test_load_project(sample_project):
    """Test loading an existing project."""
    result = load_project(path=str(sample_project))

    assert result["entry_count"] == 2
    assert result["three_way_count"] == 1
    assert result["entries"][0]["options"]["filter"] == "*.py;*.txt"


def test_describe_project(sample_project):
    info = describe_project(path=str(sample_project))
    assert "Project: 2 comparison(s)" in info["description"]
    assert info["summary"]["entry_count"] == 2


def test_add_entry(sample_project):
    result = add_entry(
        path=str(sample_project),
        left="/x",
        middle="/y",
        right="/z",
        middle_read_only=True,
        filter="*.md",
    )

    assert result["status"] == "added"
    assert result["index"] == 2

    entries = parse_project(sample_project).entries
    assert len(entries) == 3
    assert entries[2].get_middle() == ("/y", True)
    assert entries[2].filter.value == "*.md"
    # Existing entries keep their order
    assert entries[0].get_left()[0] == "C:\\work\\old"


def test_remove_entry(sample_project):
    result = remove_entry(path=str(sample_project), index=0)

    assert result["status"] == "removed"
    assert result["entry_count"] == 1
    entries = parse_project(sample_project).entries
    assert entries[0].get_left()[0] == "/src/base.c"


def test_remove_missing_entry(sample_project):
    with pytest.raises(ValueError):
        remove_entry(path=str(sample_project), index=7)


def test_set_entry_option(sample_project):
    result = set_entry_option(path=str(sample_project), index=1, option="ignore_case", value=1)
    assert result["entry"]["options"]["ignore_case"] is True

    set_entry_option(path=str(sample_project), index=1, option="compare_method", value="3")
    set_entry_option(path=str(sample_project), index=1, option="filter", value="*.c")

    entry = parse_project(sample_project).entries[1]
    assert entry.ignore_case.value is True
    assert entry.compare_method.value == 3
    assert entry.filter.value == "*.c"


def test_set_unknown_option(sample_project):
    with pytest.raises(ValueError):
        set_entry_option(path=str(sample_project), index=0, option="colour", value="red")


def test_set_entry_save(sample_project):
    set_entry_save(path=str(sample_project), index=0, option="filter", save=False)
    entry = parse_project(sample_project).entries[0]
    assert not entry.filter.has

    set_entry_save(path=str(sample_project), index=0, option="all", save=False)
    entry = parse_project(sample_project).entries[0]
    assert not entry.ignore_case.has
    assert not entry.hidden_items.has
    assert entry.get_left() == ("C:\\work\\old", True)


def test_hide_items(sample_project):
    result = hide_items(path=str(sample_project), index=0, items=["tmp"])
    assert result["hidden_items"] == ["build", "dist\\cache", "tmp"]

    entry = parse_project(sample_project).entries[0]
    assert entry.hidden_items.value == ["build", "dist\\cache", "tmp"]


def test_get_comparison(sample_project):
    folders = get_comparison(path=str(sample_project), index=0, recursive=False)
    assert folders["files"] == ["C:\\work\\old", "C:\\work\\new"]
    assert folders["recursive"] is True
    assert folders["read_only"] == [True, False]

    merge = get_comparison(path=str(sample_project), index=1, recursive=True)
    assert merge["three_way"] is True
    assert merge["files"] == ["/src/base.c", "/src/mine.c", "/src/theirs.c"]
    # Subfolders unset in memory is saved as 0
    assert merge["recursive"] is False
    assert merge["read_only"] == [False, True, False]


def test_register_tools():
    registered = []

    class FakeServer:
        def tool(self):
            def decorator(fn):
                registered.append(fn.__name__)
                return fn
            return decorator

    register(FakeServer())
    assert registered == [tool.__name__ for tool in TOOLS]
    assert "get_comparison" in registered
