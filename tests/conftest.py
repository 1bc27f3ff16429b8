"""Pytest fixtures for project file tests."""

import tempfile
from pathlib import Path
import pytest
from wmproject.models.document import ProjectDocument
from wmproject.models.entry import ProjectEntry
from wmproject.xml.writer import write_project


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_document():
    """A two-entry document: a 2-way folder compare and a 3-way merge."""
    document = ProjectDocument()

    folders = ProjectEntry()
    folders.set_left("C:\\work\\old", True)
    folders.set_right("C:\\work\\new")
    folders.filter.assign("*.py;*.txt")
    folders.subfolders.assign(1)
    folders.ignore_case.assign(True)
    folders.compare_method.assign(2)
    folders.hidden_items.assign(["build", "dist\\cache"])
    document.add_entry(folders)

    merge = ProjectEntry()
    merge.set_left("/src/base.c")
    merge.set_middle("/src/mine.c", True)
    merge.set_right("/src/theirs.c")
    merge.unpacker.assign("CompressedArchive")
    merge.prediffer.assign("IgnoreComments")
    merge.ignore_white.assign(2)
    document.add_entry(merge)

    return document


@pytest.fixture
def sample_project(temp_dir, sample_document):
    """Write the sample document to a project file."""
    project_path = temp_dir / "sample.WinMerge"
    write_project(sample_document, project_path)
    return project_path
