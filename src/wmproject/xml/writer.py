"""Write comparison project files."""

import logging
from pathlib import Path
from typing import BinaryIO

from lxml import etree

from wmproject.models.document import ProjectDocument
from wmproject.models.entry import ProjectEntry
from wmproject.xml import elements as el

logger = logging.getLogger(__name__)


def write_project(document: ProjectDocument, sink: Path | str | BinaryIO) -> None:
    """Write a project document as UTF-8 XML.

    Args:
        document: Project to write
        sink: Output path, or a binary stream opened for writing

    Raises:
        OSError: The output cannot be written
    """
    xml_bytes = project_to_bytes(document)

    if isinstance(sink, (str, Path)):
        path = Path(sink)
        logger.debug("Writing %d project entries to %s", len(document.entries), path)
        path.write_bytes(xml_bytes)
    else:
        sink.write(xml_bytes)


def project_to_bytes(document: ProjectDocument) -> bytes:
    """Serialize a project document to pretty-printed UTF-8 XML."""
    return etree.tostring(
        create_xml(document),
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=True,
    )


def create_xml(document: ProjectDocument) -> etree._Element:
    """Create the XML tree for a project, one <paths> group per entry."""
    root = etree.Element(el.ROOT)
    for entry in document.entries:
        root.append(create_entry_xml(entry))
    return root


def _bool_text(value: bool) -> str:
    return "1" if value else "0"


def _add_field(parent: etree._Element, name: str, text: str) -> etree._Element:
    elem = etree.SubElement(parent, name)
    elem.text = text
    return elem


def create_entry_xml(entry: ProjectEntry) -> etree._Element:
    """Create a <paths> element for one entry.

    Fields are written in a fixed order and only when their gate allows:
    paths when non-empty, most options when their save flag is set. Note
    that left/right read-only flags are always written, middle read-only
    only for a 3-way entry, and the prediffer ignores its save flag.
    """
    group = etree.Element(el.PATHS)
    paths = entry.paths

    if paths.left:
        _add_field(group, el.LEFT, paths.left)
    if paths.middle:
        _add_field(group, el.MIDDLE, paths.middle)
    if paths.right:
        _add_field(group, el.RIGHT, paths.right)
    if entry.filter.save and entry.filter.value:
        _add_field(group, el.FILTER, entry.filter.value)
    if entry.subfolders.save:
        # Unset (-1) is written as 0
        _add_field(group, el.SUBFOLDERS, _bool_text(entry.subfolders.value != 0))

    _add_field(group, el.LEFT_READONLY, _bool_text(entry.left_read_only))
    if paths.middle:
        _add_field(group, el.MIDDLE_READONLY, _bool_text(entry.middle_read_only))
    _add_field(group, el.RIGHT_READONLY, _bool_text(entry.right_read_only))

    if entry.unpacker.save and entry.unpacker.value:
        _add_field(group, el.UNPACKER, entry.unpacker.value)
    if entry.prediffer.value:
        _add_field(group, el.PREDIFFER, entry.prediffer.value)

    if entry.ignore_white.save:
        _add_field(group, el.WHITE_SPACES, str(entry.ignore_white.value))
    for name, setting in (
        (el.IGNORE_BLANK_LINES, entry.ignore_blank_lines),
        (el.IGNORE_CASE, entry.ignore_case),
        (el.IGNORE_CR_DIFF, entry.ignore_eol),
        (el.IGNORE_NUMBERS, entry.ignore_numbers),
        (el.IGNORE_CODEPAGE_DIFF, entry.ignore_codepage),
        (el.IGNORE_COMMENT_DIFF, entry.filter_comments_lines),
    ):
        if setting.save:
            _add_field(group, name, _bool_text(setting.value))
    if entry.compare_method.save:
        _add_field(group, el.COMPARE_METHOD, str(entry.compare_method.value))

    if entry.hidden_items.save and entry.hidden_items.value:
        hidden_list = etree.SubElement(group, el.HIDDEN_LIST)
        for item in entry.hidden_items.value:
            _add_field(hidden_list, el.HIDDEN_ITEM, item)

    return group
