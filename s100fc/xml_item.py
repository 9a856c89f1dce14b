"""Basic XML building blocks shared by the feature catalogue model."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from xml.parsers import expat

_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(text: str) -> int:
    """Read the leading integer of ``text`` (trailing text is ignored)."""
    match = _INT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


def parse_element(text: str | bytes) -> ET.Element:
    """Parse an XML document and return its root element.

    Tags and attribute names keep their prefixes exactly as written
    (for example ``S100FC:name``); namespace declarations are not resolved.
    """
    builder = ET.TreeBuilder()
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    try:
        parser.Parse(text, True)
    except expat.ExpatError as exc:
        raise ValueError(f"malformed XML: {exc}") from exc
    return builder.close()


def child_elements(node: ET.Element) -> Iterator[ET.Element]:
    """Yield the child elements of ``node`` in document order."""
    yield from node


def child_value(node: ET.Element) -> str:
    """Return the first non-blank text chunk directly inside ``node``, or ''."""
    chunks = [node.text, *(child.tail for child in node)]
    for chunk in chunks:
        if chunk and not chunk.isspace():
            return chunk
    return ""


@dataclass
class XmlAttribute:
    """A name/value pair taken from an XML attribute."""

    name: str = ""
    value: str = ""


@dataclass
class XmlItem:
    """An element value together with the attributes recorded for it."""

    attributes: list[XmlAttribute] = field(default_factory=list)
    value: str = ""

    def add_attribute(self, name: str, value: str) -> None:
        """Record an attribute."""
        self.attributes.append(XmlAttribute(name, value))

    def attribute_value(self, name: str) -> str | None:
        """Return the value of the first attribute called ``name``, if any."""
        return next(
            (attr.value for attr in self.attributes if attr.name == name), None
        )

    def reference(self) -> str:
        """Return the referenced code: the value, else the ``ref`` attribute."""
        if self.value:
            return self.value
        ref = self.attribute_value("ref")
        return self.value if ref is None else ref

    def set_reference(self, value: str) -> None:
        """Point this item at ``value`` and record it as a ``ref`` attribute."""
        self.value = value
        self.add_attribute("ref", value)


@dataclass
class Reference(XmlItem):
    """An element that refers to another catalogue entry by ``ref``."""

    def load(self, node: ET.Element) -> None:
        """Read the ``ref`` attribute of ``node``."""
        ref = node.get("ref")
        if ref is not None:
            self.add_attribute("ref", ref)


@dataclass
class UnlimitedInteger(XmlItem):
    """An upper bound that may be marked infinite or nil."""

    def load(self, node: ET.Element) -> None:
        """Read the ``infinite`` and ``xsi:nil`` attributes and the text."""
        infinite = node.get("infinite")
        if infinite is not None:
            self.add_attribute("infinite", infinite)
        nil = node.get("xsi:nil")
        if nil is not None:
            self.add_attribute("nil", nil)
        self.value = child_value(node)


@dataclass
class ValueList(XmlItem):
    """A list of permitted integer values."""

    values: list[int] = field(default_factory=list)

    def load(self, node: ET.Element) -> None:
        """Append each ``S100FC:value`` child as an integer."""
        self.values.extend(
            _parse_int(child_value(child))
            for child in child_elements(node)
            if child.tag == "S100FC:value"
        )