"""Project document model: an ordered list of comparison entries."""

from pydantic import BaseModel, Field
from typing import Any

from wmproject.models.entry import ProjectEntry


# File extension used for project documents
PROJECT_FILE_EXT = ".WinMerge"


class ProjectDocument(BaseModel):
    """A comparison project file. Entry order is significant."""

    entries: list[ProjectEntry] = Field(default_factory=list, description="Comparisons in document order")

    def __len__(self) -> int:
        return len(self.entries)

    def add_entry(self, entry: ProjectEntry | None = None) -> ProjectEntry:
        """Append an entry (a fresh default one if none given) and return it."""
        if entry is None:
            entry = ProjectEntry()
        self.entries.append(entry)
        return entry

    def get_entry(self, index: int) -> ProjectEntry | None:
        """Get entry by position."""
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def remove_entry(self, index: int) -> ProjectEntry | None:
        """Remove entry by position."""
        if 0 <= index < len(self.entries):
            return self.entries.pop(index)
        return None

    def describe(self) -> dict[str, Any]:
        """Return a summary dict."""
        return {
            "entry_count": len(self.entries),
            "three_way_count": sum(1 for e in self.entries if e.paths.is_three_way),
            "entries": [e.describe() for e in self.entries],
        }

    def to_description(self) -> str:
        """Human-readable description of the project."""
        lines = [f"Project: {len(self.entries)} comparison(s)"]
        for i, entry in enumerate(self.entries):
            lines.append(f"  [{i}] {entry.to_description()}")
        return "\n".join(lines)
