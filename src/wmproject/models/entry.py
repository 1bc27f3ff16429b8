"""Project entry model: one comparison unit in a project file."""

from pydantic import BaseModel, Field
from typing import Any

from wmproject.models.setting import Setting


# Subfolders value meaning "not specified, use the caller's default"
SUBFOLDERS_UNSET = -1

# Option names accepted by ProjectEntry.get_setting()
SETTING_NAMES = (
    "filter",
    "subfolders",
    "unpacker",
    "prediffer",
    "ignore_white",
    "ignore_blank_lines",
    "ignore_case",
    "ignore_eol",
    "ignore_numbers",
    "ignore_codepage",
    "filter_comments_lines",
    "compare_method",
    "hidden_items",
)


class PathTriple(BaseModel):
    """Left, middle and right paths of a comparison.

    An empty string means the path is absent; an empty middle path makes
    the comparison two-way.
    """

    left: str = Field(default="", description="Left path")
    middle: str = Field(default="", description="Middle path (3-way only)")
    right: str = Field(default="", description="Right path")

    @property
    def files(self) -> list[str]:
        """Non-empty paths in left, middle, right order."""
        return [p for p in (self.left, self.middle, self.right) if p]

    @property
    def is_three_way(self) -> bool:
        return bool(self.middle)


def _str_setting() -> Any:
    return Field(default_factory=lambda: Setting[str](value=""))


def _bool_setting() -> Any:
    return Field(default_factory=lambda: Setting[bool](value=False))


def _int_setting(default: int = 0) -> Any:
    return Field(default_factory=lambda: Setting[int](value=default))


class ProjectEntry(BaseModel):
    """A single comparison: paths, read-only flags and compare options."""

    paths: PathTriple = Field(default_factory=PathTriple)
    has_left: bool = False
    has_middle: bool = False
    has_right: bool = False
    left_read_only: bool = False
    middle_read_only: bool = False
    right_read_only: bool = False

    filter: Setting[str] = _str_setting()
    subfolders: Setting[int] = _int_setting(SUBFOLDERS_UNSET)
    unpacker: Setting[str] = _str_setting()
    # Written whenever non-empty; its save flag is not consulted
    prediffer: Setting[str] = _str_setting()

    ignore_white: Setting[int] = _int_setting()
    ignore_blank_lines: Setting[bool] = _bool_setting()
    ignore_case: Setting[bool] = _bool_setting()
    ignore_eol: Setting[bool] = _bool_setting()
    ignore_numbers: Setting[bool] = _bool_setting()
    ignore_codepage: Setting[bool] = _bool_setting()
    filter_comments_lines: Setting[bool] = _bool_setting()
    compare_method: Setting[int] = _int_setting()

    hidden_items: Setting[list[str]] = Field(
        default_factory=lambda: Setting[list[str]](value=[]),
        description="Previously hidden item identifiers",
    )

    def get_left(self) -> tuple[str, bool]:
        """Return the left path and its read-only flag."""
        return self.paths.left, self.left_read_only

    def set_left(self, path: str, read_only: bool | None = None) -> None:
        """Set the left path; the read-only flag is kept unless given."""
        self.paths.left = path
        if read_only is not None:
            self.left_read_only = read_only

    def get_middle(self) -> tuple[str, bool]:
        """Return the middle path and its read-only flag."""
        return self.paths.middle, self.middle_read_only

    def set_middle(self, path: str, read_only: bool | None = None) -> None:
        """Set the middle path; the read-only flag is kept unless given."""
        self.paths.middle = path
        if read_only is not None:
            self.middle_read_only = read_only

    def get_right(self) -> tuple[str, bool]:
        """Return the right path and its read-only flag."""
        return self.paths.right, self.right_read_only

    def set_right(self, path: str, read_only: bool | None = None) -> None:
        """Set the right path; the read-only flag is kept unless given."""
        self.paths.right = path
        if read_only is not None:
            self.right_read_only = read_only

    def get_paths_and_recurse(self, recurse: bool) -> tuple[PathTriple, bool]:
        """Project the entry into the form the comparison engine takes.

        Args:
            recurse: Caller's default for recursive comparison

        Returns:
            A copy of the paths, and ``recurse`` overridden only when the
            subfolders option was given explicitly (recursive iff it is 1)
        """
        if self.subfolders.has:
            recurse = self.subfolders.value == 1
        return self.paths.model_copy(), recurse

    def get_setting(self, name: str) -> Setting:
        """Look up an option wrapper by name."""
        if name not in SETTING_NAMES:
            raise ValueError(f"Unknown option: {name}")
        return getattr(self, name)

    def set_save_all(self, save: bool) -> None:
        """Set every option's persist flag at once."""
        for name in SETTING_NAMES:
            getattr(self, name).save = save

    def describe(self) -> dict[str, Any]:
        """Return a description dict."""
        options = {}
        for name in SETTING_NAMES:
            setting = getattr(self, name)
            if setting.has:
                options[name] = setting.value
        return {
            "left": self.paths.left,
            "middle": self.paths.middle,
            "right": self.paths.right,
            "left_read_only": self.left_read_only,
            "middle_read_only": self.middle_read_only,
            "right_read_only": self.right_read_only,
            "options": options,
        }

    def to_description(self) -> str:
        """Human-readable description of the entry."""
        def label(path: str, read_only: bool) -> str:
            return f"{path} (read-only)" if read_only else path

        parts = [label(*self.get_left())]
        if self.paths.middle:
            parts.append(label(*self.get_middle()))
        parts.append(label(*self.get_right()))
        text = " <-> ".join(parts)

        if self.filter.has and self.filter.value:
            text += f" [filter: {self.filter.value}]"
        if self.subfolders.has:
            text += " [recursive]" if self.subfolders.value == 1 else " [flat]"
        if self.hidden_items.value:
            text += f" [{len(self.hidden_items.value)} hidden]"
        return text
