"""Parse and serialize payload XML. The parser is hardened for untrusted input."""

from __future__ import annotations

from lxml import etree

from federation.errors import InvalidStructureError


def _parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
        remove_blank_text=True,
    )


def parse_xml(data: bytes | str) -> etree._Element:
    """Parse XML text into its root element.

    Args:
        data: Raw XML document.

    Returns:
        Root element of the document.

    Raises:
        InvalidStructureError: If the document is not well-formed XML.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else data
    try:
        return etree.fromstring(raw, _parser())
    except etree.XMLSyntaxError as exc:
        raise InvalidStructureError(f"Malformed XML: {exc}") from exc


def to_xml_bytes(element: etree._Element, *, pretty: bool = False) -> bytes:
    """Serialize element (and its subtree) as UTF-8 without an XML declaration."""
    return etree.tostring(
        element, encoding="utf-8", xml_declaration=False, pretty_print=pretty
    )
