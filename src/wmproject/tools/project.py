"""Project file tools for comparison projects."""

from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from wmproject.models.document import ProjectDocument
from wmproject.models.entry import ProjectEntry
from wmproject.xml.parser import parse_project
from wmproject.xml.writer import write_project


def _load_entry(path: str, index: int) -> tuple[ProjectDocument, ProjectEntry]:
    document = parse_project(Path(path))
    entry = document.get_entry(index)
    if entry is None:
        raise ValueError(f"No entry {index} in {path} ({len(document.entries)} entries)")
    return document, entry


def _build_entry(
    left: str,
    right: str,
    middle: str | None = None,
    left_read_only: bool = False,
    middle_read_only: bool = False,
    right_read_only: bool = False,
    filter: str | None = None,
    recursive: bool | None = None,
) -> ProjectEntry:
    entry = ProjectEntry()
    entry.set_left(left, left_read_only)
    if middle:
        entry.set_middle(middle, middle_read_only)
    entry.set_right(right, right_read_only)
    if filter:
        entry.filter.assign(filter)
    if recursive is not None:
        entry.subfolders.assign(1 if recursive else 0)
    return entry


def create_project(
    path: str,
    left: str,
    right: str,
    middle: str | None = None,
    filter: str | None = None,
    recursive: bool | None = None,
) -> dict[str, Any]:
    """Create a new project file with a single comparison.

    Args:
        path: Path to save the project file
        left: Left path
        right: Right path
        middle: Middle path for a 3-way comparison (optional)
        filter: File filter expression (optional)
        recursive: Include subfolders (optional, left to the application if None)

    Returns:
        Project info dict with path and entry count
    """
    document = ProjectDocument()
    document.add_entry(_build_entry(left, right, middle, filter=filter, recursive=recursive))
    filepath = Path(path)
    write_project(document, filepath)
    return {
        "status": "created",
        "path": str(filepath),
        "entry_count": len(document.entries),
    }


def load_project(path: str) -> dict[str, Any]:
    """Load an existing project file and return its summary.

    Args:
        path: Path to the project file

    Returns:
        Project summary with every entry's paths and explicit options
    """
    return parse_project(Path(path)).describe()


def describe_project(path: str) -> dict[str, Any]:
    """Get a human-readable description of a project file."""
    document = parse_project(Path(path))
    return {
        "description": document.to_description(),
        "summary": document.describe(),
    }


def add_entry(
    path: str,
    left: str,
    right: str,
    middle: str | None = None,
    left_read_only: bool = False,
    middle_read_only: bool = False,
    right_read_only: bool = False,
    filter: str | None = None,
    recursive: bool | None = None,
) -> dict[str, Any]:
    """Append a comparison to an existing project file.

    Returns:
        Index of the new entry and the new entry count
    """
    filepath = Path(path)
    document = parse_project(filepath)
    document.add_entry(_build_entry(
        left, right, middle,
        left_read_only=left_read_only,
        middle_read_only=middle_read_only,
        right_read_only=right_read_only,
        filter=filter,
        recursive=recursive,
    ))
    write_project(document, filepath)
    return {
        "status": "added",
        "index": len(document.entries) - 1,
        "entry_count": len(document.entries),
    }


def remove_entry(path: str, index: int) -> dict[str, Any]:
    """Remove a comparison from a project file by position."""
    filepath = Path(path)
    document = parse_project(filepath)
    removed = document.remove_entry(index)
    if removed is None:
        raise ValueError(f"No entry {index} in {path} ({len(document.entries)} entries)")
    write_project(document, filepath)
    return {
        "status": "removed",
        "removed": removed.describe(),
        "entry_count": len(document.entries),
    }


def set_entry_option(path: str, index: int, option: str, value: Any) -> dict[str, Any]:
    """Set a compare option on one entry.

    Args:
        path: Path to the project file
        index: Entry position
        option: Option name, e.g. "ignore_case", "compare_method", "filter"
        value: New value (string, integer or boolean depending on the option)

    Returns:
        Updated entry description
    """
    document, entry = _load_entry(path, index)
    setting = entry.get_setting(option)
    current = setting.value
    if isinstance(current, bool):
        value = bool(value)
    elif isinstance(current, int):
        value = int(value)
    elif isinstance(current, list):
        value = [str(v) for v in value]
    else:
        value = str(value)
    setting.assign(value)
    write_project(document, Path(path))
    return {"status": "updated", "entry": entry.describe()}


def set_entry_save(path: str, index: int, option: str, save: bool) -> dict[str, Any]:
    """Choose whether an option of one entry is written to the file.

    Use option "all" to change every option at once.
    """
    document, entry = _load_entry(path, index)
    if option == "all":
        entry.set_save_all(save)
    else:
        entry.get_setting(option).save = save
    write_project(document, Path(path))
    return {"status": "updated", "entry": entry.describe()}


def hide_items(path: str, index: int, items: list[str]) -> dict[str, Any]:
    """Append items to an entry's hidden item list."""
    document, entry = _load_entry(path, index)
    entry.hidden_items.assign(entry.hidden_items.value + list(items))
    write_project(document, Path(path))
    return {
        "status": "updated",
        "hidden_items": entry.hidden_items.value,
    }


def get_comparison(path: str, index: int = 0, recursive: bool = False) -> dict[str, Any]:
    """Resolve the paths and recursion setting of an entry.

    Args:
        path: Path to the project file
        index: Entry position
        recursive: Default used when the entry does not specify subfolders

    Returns:
        Files to compare and whether to recurse
    """
    _, entry = _load_entry(path, index)
    paths, recurse = entry.get_paths_and_recurse(recursive)
    return {
        "files": paths.files,
        "three_way": paths.is_three_way,
        "recursive": recurse,
        "read_only": [entry.left_read_only, entry.middle_read_only, entry.right_read_only]
        if paths.is_three_way
        else [entry.left_read_only, entry.right_read_only],
    }


TOOLS = (
    create_project,
    load_project,
    describe_project,
    add_entry,
    remove_entry,
    set_entry_option,
    set_entry_save,
    hide_items,
    get_comparison,
)


def register(mcp: FastMCP) -> None:
    """Register project tools with the MCP server."""
    for tool in TOOLS:
        mcp.tool()(tool)
