"""Multiplicities, numeric ranges, attribute constraints and units of measure."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from s100fc.codes import IntervalType
from s100fc.xml_item import (
    UnlimitedInteger,
    XmlItem,
    _parse_int,
    child_elements,
    child_value,
)

_FLOAT_PATTERN = re.compile(
    r"\s*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    """Read the leading real number of ``text`` (trailing text is ignored)."""
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


@dataclass
class Multiplicity(XmlItem):
    """Lower and upper bound on how often something may occur."""

    lower: int = 0
    upper: UnlimitedInteger = field(default_factory=UnlimitedInteger)

    def load(self, node: ET.Element) -> None:
        """Read the lower bound and the (possibly unlimited) upper bound."""
        for child in child_elements(node):
            if child.tag == "S100Base:lower":
                self.lower = _parse_int(child_value(child))
            elif child.tag == "S100Base:upper":
                self.upper.load(child)


@dataclass
class NumericRange(XmlItem):
    """A range of real numbers with the kind of interval it forms."""

    lower_bound: float = 0.0
    upper_bound: float = 0.0
    interval_type: IntervalType = field(default_factory=IntervalType)

    def load(self, node: ET.Element) -> None:
        """Read the bounds and the interval type."""
        for child in child_elements(node):
            if child.tag == "S100Base:lowerBound":
                self.lower_bound = _parse_float(child_value(child))
            elif child.tag == "S100Base:upperBound":
                self.upper_bound = _parse_float(child_value(child))
            elif child.tag == "S100Base:intervalType":
                self.interval_type.load(child)


@dataclass
class AttributeConstraints(XmlItem):
    """Limits placed on the values of a simple attribute."""

    string_length: int = 0
    text_pattern: str = ""
    range: NumericRange = field(default_factory=NumericRange)
    precision: int = 0

    def load(self, node: ET.Element) -> None:
        """Read length, pattern, range and precision constraints."""
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100FD:stringLength":
                self.string_length = _parse_int(child_value(child))
            elif tag == "S100FD:textPattern":
                self.text_pattern = child_value(child)
            elif tag == "S100FD:range":
                self.range.load(child)
            elif tag == "S100FD:precision":
                self.precision = _parse_int(child_value(child))


@dataclass
class UnitOfMeasure(XmlItem):
    """A unit of measure; definition and symbol are absent until given."""

    name: str = ""
    definition: str | None = None
    symbol: str | None = None

    def load(self, node: ET.Element) -> None:
        """Read the unit's name, definition and symbol."""
        for child in child_elements(node):
            if child.tag == "S100Base:name":
                self.name = child_value(child)
            elif child.tag == "S100Base:definition":
                self.definition = child_value(child)
            elif child.tag == "S100Base:symbol":
                self.symbol = child_value(child)