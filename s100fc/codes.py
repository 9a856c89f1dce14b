"""Restricted code values: enumerated code lists and simple codes."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import ClassVar

from s100fc.xml_item import XmlItem, _parse_int, child_value


@dataclass
class RestrictionItem(XmlItem):
    """A value drawn from a set of permitted values."""

    _DEFAULTS: ClassVar[tuple[str, ...]] = ()

    permitted_values: dict[str, str] = field(default_factory=dict)
    pattern: str = ""
    max_exclusive: str = ""
    value_string: str = ""
    value_integer: int = 0

    def __post_init__(self) -> None:
        for value in self._DEFAULTS:
            self.insert_value(value)

    def insert_value(self, value: str) -> None:
        """Add ``value`` to the permitted values."""
        self.permitted_values[value] = value

    def load(self, node: ET.Element) -> None:
        """Take the element's text as the code value."""
        self.value_string = child_value(node)


class DateTypeCode(RestrictionItem):
    """Kind of date in a citation."""

    _DEFAULTS = ("creation", "publication", "revision")


class FeatureUseType(RestrictionItem):
    """Use of a feature type."""

    _DEFAULTS = ("geographic", "meta", "cartographic", "aggregation", "theme")


class IntervalType(RestrictionItem):
    """Kind of numeric interval."""

    _DEFAULTS = (
        "openInterval",
        "geLtInterval",
        "gtLeInterval",
        "closedInterval",
        "gtSemiInterval",
        "geSemiInterval",
        "ltSemiInterval",
        "leSemiInterval",
    )


class IntegerCode(RestrictionItem):
    """A code given as an integer."""

    def load(self, node: ET.Element) -> None:
        """Take the element's text as an integer code."""
        self.value_integer = _parse_int(child_value(node))


class OnlineFunctionCode(RestrictionItem):
    """Function performed by an online resource."""

    _DEFAULTS = ("download", "information", "offlineAccess", "order", "search")


class PresentationFormCode(RestrictionItem):
    """Form in which a resource is presented."""

    _DEFAULTS = (
        "documentDigital",
        "documentHardcopy",
        "imageDigital",
        "mapDigital",
        "mapHardcopy",
        "modelDigital",
        "modelHardcopy",
        "profileDigital",
        "profileHardcopy",
        "tableDigital",
        "tableHardcopy",
        "videoDigital",
        "videoHardcopy",
    )


class RoleCode(RestrictionItem):
    """Role of a responsible party."""

    _DEFAULTS = (
        "resourceProvider",
        "custodian",
        "owner",
        "user",
        "distributer",
        "originator",
        "pointOfContact",
        "principalInvestigator",
        "processor",
        "publisher",
    )


class RoleType(RestrictionItem):
    """Kind of association role."""

    _DEFAULTS = ("association", "aggregation", "composition")


class SpatialPrimitiveType(RestrictionItem):
    """Geometry permitted for a feature type."""

    _DEFAULTS = (
        "noGeometry",
        "point",
        "pointSet",
        "curve",
        "surface",
        "coverage",
        "arcByCenterPoint",
        "circleByCenterPoint",
    )


class StringCode(RestrictionItem):
    """A code given as free text."""