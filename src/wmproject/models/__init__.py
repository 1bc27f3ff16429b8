"""Pydantic models for comparison project files."""

from wmproject.models.setting import Setting
from wmproject.models.entry import PathTriple, ProjectEntry
from wmproject.models.document import ProjectDocument, PROJECT_FILE_EXT

__all__ = [
    "Setting",
    "PathTriple",
    "ProjectEntry",
    "ProjectDocument",
    "PROJECT_FILE_EXT",
]
