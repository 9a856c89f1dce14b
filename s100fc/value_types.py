"""Attribute value types and quantity specifications of the concept dictionary."""

from __future__ import annotations

from enum import Enum, IntEnum


class AttributeValueType(Enum):
    """Value type of a simple attribute."""

    NONE = 0
    BOOLEAN = 1
    ENUMERATION = 2
    INTEGER = 3
    REAL = 4
    DATE = 5
    TEXT = 6
    TIME = 7
    DATE_TIME = 8
    URI = 9
    URL = 10
    URN = 11
    S100_CODE_LIST = 12
    S100_TRUNCATED_DATE = 13


_VALUE_TYPE_NAMES: dict[AttributeValueType, str] = {
    AttributeValueType.BOOLEAN: "boolean",
    AttributeValueType.ENUMERATION: "enumeration",
    AttributeValueType.INTEGER: "integer",
    AttributeValueType.REAL: "real",
    AttributeValueType.DATE: "date",
    AttributeValueType.TEXT: "text",
    AttributeValueType.TIME: "time",
    AttributeValueType.DATE_TIME: "dateTime",
    AttributeValueType.URI: "URI",
    AttributeValueType.URL: "URL",
    AttributeValueType.URN: "URN",
    AttributeValueType.S100_CODE_LIST: "S100_CodeList",
    AttributeValueType.S100_TRUNCATED_DATE: "S100_TruncatedDate",
}
_VALUE_TYPES_BY_NAME = {name: kind for kind, name in _VALUE_TYPE_NAMES.items()}


class QuantitySpecification(IntEnum):
    """Physical quantity measured by an attribute."""

    NONE = 0
    ANGULAR_VELOCITY = 1
    AREA = 2
    DENSITY = 3
    DURATION = 4
    FREQUENCY = 5
    LENGTH = 6
    MASS = 7
    PLANE_ANGLE = 8
    POWER = 9
    PRESSURE = 10
    SALINITY = 11
    SPEED = 12
    TEMPERATURE = 13
    VOLUME = 14
    WEIGHT = 15
    OTHER_QUANTITY = 16


_QUANTITY_NAMES = (
    "none",
    "angularVelocity",
    "area",
    "density",
    "duration",
    "frequency",
    "length",
    "mass",
    "planeAngle",
    "power",
    "pressure",
    "salinity",
    "speed",
    "temperature",
    "volume",
    "weight",
    "otherQuantity",
)


def attribute_value_type_from_string(value: str) -> AttributeValueType:
    """Return the value type named ``value``; unknown names give NONE."""
    return _VALUE_TYPES_BY_NAME.get(value, AttributeValueType.NONE)


def attribute_value_type_to_string(value: AttributeValueType) -> str:
    """Return the catalogue name of ``value``; NONE gives ''."""
    return _VALUE_TYPE_NAMES.get(value, "")


def quantity_specification_from_string(value: str) -> QuantitySpecification:
    """Return the quantity named ``value``; unknown names give NONE."""
    try:
        return QuantitySpecification(_QUANTITY_NAMES.index(value))
    except ValueError:
        return QuantitySpecification.NONE


def quantity_specification_to_string(value: QuantitySpecification | int) -> str:
    """Return the catalogue name of ``value``; out-of-range numbers give ''."""
    try:
        return _QUANTITY_NAMES[QuantitySpecification(value)]
    except ValueError:
        return ""