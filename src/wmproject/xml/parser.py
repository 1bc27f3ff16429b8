"""Parse comparison project files.

The reader is an lxml parser target: lxml drives it with ``start``,
``data`` and ``end`` callbacks while tokenizing, and the target fills in a
ProjectDocument as the events arrive. Only the flat
``<project><paths><field>`` shape is interpreted; anything else is tracked
for depth and otherwise ignored.
"""

import logging
import re
from pathlib import Path
from typing import BinaryIO, Callable

from lxml import etree

from wmproject.errors import MalformedDocumentError
from wmproject.models.document import ProjectDocument
from wmproject.models.entry import ProjectEntry
from wmproject.xml import elements as el

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: str) -> int:
    """Parse the leading integer of ``text``, 0 if there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def parse_bool(text: str) -> bool:
    """Nonzero leading integer means true."""
    return parse_int(text) != 0


# Field assignment per leaf element. Each receives the entry being built and
# the full text content of one leaf element.

def _append_path(side: str) -> Callable[[ProjectEntry, str], None]:
    def assign(entry: ProjectEntry, text: str) -> None:
        setattr(entry.paths, side, getattr(entry.paths, side) + text)
        setattr(entry, f"has_{side}", True)
    return assign


def _append_text(name: str) -> Callable[[ProjectEntry, str], None]:
    def assign(entry: ProjectEntry, text: str) -> None:
        setting = getattr(entry, name)
        setting.assign(setting.value + text)
    return assign


def _store_int(name: str) -> Callable[[ProjectEntry, str], None]:
    def assign(entry: ProjectEntry, text: str) -> None:
        getattr(entry, name).assign(parse_int(text))
    return assign


def _store_bool(name: str) -> Callable[[ProjectEntry, str], None]:
    def assign(entry: ProjectEntry, text: str) -> None:
        getattr(entry, name).assign(parse_bool(text))
    return assign


def _store_read_only(side: str) -> Callable[[ProjectEntry, str], None]:
    def assign(entry: ProjectEntry, text: str) -> None:
        setattr(entry, f"{side}_read_only", parse_bool(text))
    return assign


def _add_hidden_item(entry: ProjectEntry, text: str) -> None:
    entry.hidden_items.value.append(text)
    entry.hidden_items.has = True


FIELD_HANDLERS: dict[str, Callable[[ProjectEntry, str], None]] = {
    el.LEFT: _append_path("left"),
    el.MIDDLE: _append_path("middle"),
    el.RIGHT: _append_path("right"),
    el.FILTER: _append_text("filter"),
    el.SUBFOLDERS: _store_int("subfolders"),
    el.LEFT_READONLY: _store_read_only("left"),
    el.MIDDLE_READONLY: _store_read_only("middle"),
    el.RIGHT_READONLY: _store_read_only("right"),
    el.UNPACKER: _append_text("unpacker"),
    el.PREDIFFER: _append_text("prediffer"),
    el.WHITE_SPACES: _store_int("ignore_white"),
    el.IGNORE_BLANK_LINES: _store_bool("ignore_blank_lines"),
    el.IGNORE_CASE: _store_bool("ignore_case"),
    el.IGNORE_CR_DIFF: _store_bool("ignore_eol"),
    el.IGNORE_NUMBERS: _store_bool("ignore_numbers"),
    el.IGNORE_CODEPAGE_DIFF: _store_bool("ignore_codepage"),
    el.IGNORE_COMMENT_DIFF: _store_bool("filter_comments_lines"),
    el.COMPARE_METHOD: _store_int("compare_method"),
    # Lives inside <hidden-list>, one level below the other fields
    el.HIDDEN_ITEM: _add_hidden_item,
}


class ProjectFileTarget:
    """lxml parser target that builds a ProjectDocument.

    Keeps a stack of open elements, each with the text collected for it so
    far. Text is handed to the field handler when the element closes, so
    fragmented text is joined and an empty element still counts as present.
    """

    def __init__(self, document: ProjectDocument | None = None):
        self.document = document if document is not None else ProjectDocument()
        self.current: ProjectEntry | None = None
        self._stack: list[tuple[str, list[str]]] = []
        self._unknown: set[str] = set()

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _in_field(self) -> bool:
        if self.current is None or not self._stack:
            return False
        name = self._stack[-1][0]
        return self.depth == el.LEAF_DEPTH or name == el.HIDDEN_ITEM

    def start(self, tag: str, attrib: dict, nsmap: dict | None = None) -> None:
        name = etree.QName(tag).localname
        if name == el.PATHS:
            self.current = self.document.add_entry()
        self._stack.append((name, []))

    def data(self, text: str) -> None:
        if self._in_field():
            self._stack[-1][1].append(text)

    def end(self, tag: str) -> None:
        if self._in_field():
            name, chunks = self._stack[-1]
            handler = FIELD_HANDLERS.get(name)
            if handler is not None:
                handler(self.current, "".join(chunks))
            elif name != el.HIDDEN_LIST and name not in self._unknown:
                self._unknown.add(name)
                logger.debug("Ignoring unrecognized element <%s>", name)
        self._stack.pop()

    def close(self) -> ProjectDocument:
        return self.document


def _make_parser(target: ProjectFileTarget) -> etree.XMLParser:
    return etree.XMLParser(target=target, resolve_entities=False, no_network=True)


def parse_project_bytes(data: bytes) -> ProjectDocument:
    """Parse project XML held in memory.

    Raises:
        MalformedDocumentError: The data is not well-formed XML
    """
    target = ProjectFileTarget()
    try:
        document = etree.fromstring(data, _make_parser(target))
    except etree.XMLSyntaxError as e:
        raise MalformedDocumentError(f"Malformed project document: {e}") from e
    logger.debug("Parsed %d project entries", len(document.entries))
    return document


def parse_project(source: Path | str | bytes | BinaryIO) -> ProjectDocument:
    """Parse a comparison project file.

    Args:
        source: Path to the project file, its raw bytes, or a binary stream

    Returns:
        Parsed ProjectDocument

    Raises:
        MalformedDocumentError: The document is not well-formed XML
        OSError: The file cannot be read
    """
    if isinstance(source, bytes):
        return parse_project_bytes(source)
    if isinstance(source, (str, Path)):
        path = Path(source)
        logger.debug("Reading project file %s", path)
        return parse_project_bytes(path.read_bytes())
    return parse_project_bytes(source.read())
