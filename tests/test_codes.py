import pytest

from s100fc.codes import (
    DateTypeCode,
    FeatureUseType,
    IntegerCode,
    IntervalType,
    OnlineFunctionCode,
    PresentationFormCode,
    RestrictionItem,
    RoleCode,
    RoleType,
    SpatialPrimitiveType,
    StringCode,
)
from s100fc.xml_item import parse_element


@pytest.mark.parametrize(
    ("cls", "expected"),
    [
        (DateTypeCode, {"creation", "publication", "revision"}),
        (FeatureUseType, {"geographic", "meta", "cartographic", "aggregation", "theme"}),
        (RoleType, {"association", "aggregation", "composition"}),
        (OnlineFunctionCode, {"download", "information", "offlineAccess", "order", "search"}),
    ],
)
def test_permitted_values(cls, expected):
    code = cls()
    assert set(code.permitted_values) == expected
    assert all(key == value for key, value in code.permitted_values.items())


def test_larger_code_lists():
    assert len(PresentationFormCode().permitted_values) == 13
    assert len(RoleCode().permitted_values) == 10
    assert len(IntervalType().permitted_values) == 8
    assert "circleByCenterPoint" in SpatialPrimitiveType().permitted_values


def test_plain_codes_start_empty():
    assert StringCode().permitted_values == {}
    assert IntegerCode().permitted_values == {}
    assert RestrictionItem().value_string == ""


def test_insert_value():
    code = StringCode()
    code.insert_value("custom")
    assert code.permitted_values == {"custom": "custom"}


def test_instances_do_not_share_values():
    first = RoleType()
    first.insert_value("extra")
    assert "extra" not in RoleType().permitted_values


@pytest.mark.parametrize(
    "cls", [DateTypeCode, FeatureUseType, SpatialPrimitiveType, StringCode, RoleCode]
)
def test_load_sets_value_string(cls):
    node = parse_element("<S100FC:code>geographic</S100FC:code>")
    code = cls()
    code.load(node)
    assert code.value_string == "geographic"


def test_integer_code_load():
    node = parse_element("<S100FC:code>42</S100FC:code>")
    code = IntegerCode()
    code.load(node)
    assert code.value_integer == 42
    assert code.value_string == ""


def test_integer_code_load_rejects_text():
    node = parse_element("<S100FC:code>none</S100FC:code>")
    with pytest.raises(ValueError):
        IntegerCode().load(node)