#!/usr/bin/env python3
"""Create a demo project file with a folder compare and a 3-way merge."""

from pathlib import Path

from wmproject.models.document import ProjectDocument, PROJECT_FILE_EXT
from wmproject.models.entry import ProjectEntry
from wmproject.xml.parser import parse_project
from wmproject.xml.writer import write_project


def create_demo_project(output_path: Path) -> None:
    """Create a demo project with two comparisons."""
    project = ProjectDocument()

    # Recursive folder compare, old release kept read-only
    folders = ProjectEntry()
    folders.set_left("releases/1.0", True)
    folders.set_right("releases/1.1")
    folders.filter.assign("*.py;*.cfg")
    folders.subfolders.assign(1)
    folders.ignore_eol.assign(True)
    folders.hidden_items.assign(["__pycache__", "build"])
    project.add_entry(folders)

    # 3-way merge of a config file
    merge = ProjectEntry()
    merge.set_left("base/settings.ini")
    merge.set_middle("mine/settings.ini", True)
    merge.set_right("theirs/settings.ini")
    merge.ignore_white.assign(1)
    # Used for this session only, not written out
    merge.ignore_case.assign(True)
    merge.ignore_case.save = False
    project.add_entry(merge)

    write_project(project, output_path)


if __name__ == "__main__":
    output = Path(f"demo{PROJECT_FILE_EXT}")
    create_demo_project(output)
    print(f"Created {output}")
    print(parse_project(output).to_description())
