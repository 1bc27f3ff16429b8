"""XML reading and writing for comparison project files."""

from wmproject.xml.parser import parse_project
from wmproject.xml.writer import write_project, project_to_bytes

__all__ = ["parse_project", "write_project", "project_to_bytes"]
