import pytest

from s100fc.value_types import (
    AttributeValueType,
    QuantitySpecification,
    attribute_value_type_from_string,
    attribute_value_type_to_string,
    quantity_specification_from_string,
    quantity_specification_to_string,
)


@pytest.mark.parametrize(
    "kind", [k for k in AttributeValueType if k is not AttributeValueType.NONE]
)
def test_attribute_value_type_round_trip(kind):
    assert attribute_value_type_from_string(attribute_value_type_to_string(kind)) is kind


def test_attribute_value_type_names_from_source():
    assert attribute_value_type_from_string("dateTime") is AttributeValueType.DATE_TIME
    assert attribute_value_type_from_string("S100_CodeList") is AttributeValueType.S100_CODE_LIST
    assert attribute_value_type_to_string(AttributeValueType.URN) == "URN"


def test_attribute_value_type_none_and_unknown():
    assert attribute_value_type_to_string(AttributeValueType.NONE) == ""
    assert attribute_value_type_from_string("none") is AttributeValueType.NONE
    assert attribute_value_type_from_string("Boolean") is AttributeValueType.NONE


@pytest.mark.parametrize("quantity", list(QuantitySpecification))
def test_quantity_round_trip(quantity):
    assert quantity_specification_from_string(quantity_specification_to_string(quantity)) is quantity


def test_quantity_names_from_source():
    assert quantity_specification_from_string("planeAngle") is QuantitySpecification.PLANE_ANGLE
    assert quantity_specification_to_string(QuantitySpecification.OTHER_QUANTITY) == "otherQuantity"
    assert quantity_specification_to_string(QuantitySpecification.NONE) == "none"


def test_quantity_unknown_and_out_of_range():
    assert quantity_specification_from_string("distance") is QuantitySpecification.NONE
    assert quantity_specification_to_string(17) == ""
    assert quantity_specification_to_string(-1) == ""


def test_quantity_accepts_plain_int():
    assert quantity_specification_to_string(int(QuantitySpecification.SPEED)) == "speed"