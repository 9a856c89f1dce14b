import pytest

from s100fc.measures import (
    AttributeConstraints,
    Multiplicity,
    NumericRange,
    UnitOfMeasure,
)
from s100fc.xml_item import parse_element


def _load(cls, text):
    obj = cls()
    obj.load(parse_element(text))
    return obj


def test_multiplicity_reads_lower_and_unlimited_upper():
    mult = _load(
        Multiplicity,
        '<S100FC:multiplicity><S100Base:lower>1</S100Base:lower>'
        '<S100Base:upper infinite="true" xsi:nil="true"/></S100FC:multiplicity>',
    )
    assert mult.lower == 1
    assert mult.upper.attribute_value("infinite") == "true"
    assert mult.upper.attribute_value("nil") == "true"
    assert mult.upper.value == ""


def test_multiplicity_finite_upper_value():
    mult = _load(
        Multiplicity,
        '<m><S100Base:lower>0</S100Base:lower>'
        '<S100Base:upper infinite="false">7</S100Base:upper></m>',
    )
    assert mult.lower == 0
    assert mult.upper.value == "7"
    assert mult.upper.attribute_value("nil") is None


def test_multiplicity_rejects_non_integer_lower():
    with pytest.raises(ValueError):
        _load(Multiplicity, "<m><S100Base:lower>many</S100Base:lower></m>")


def test_numeric_range_reads_bounds_and_interval():
    rng = _load(
        NumericRange,
        "<r><S100Base:lowerBound>0.5</S100Base:lowerBound>"
        "<S100Base:upperBound>10</S100Base:upperBound>"
        "<S100Base:intervalType>closedInterval</S100Base:intervalType></r>",
    )
    assert rng.lower_bound == 0.5
    assert rng.upper_bound == 10.0
    assert rng.interval_type.value_string == "closedInterval"
    assert "closedInterval" in rng.interval_type.permitted_values


def test_numeric_range_ignores_trailing_text_after_number():
    rng = _load(
        NumericRange, "<r><S100Base:lowerBound> -2.5e1m</S100Base:lowerBound></r>"
    )
    assert rng.lower_bound == -25.0


def test_numeric_range_rejects_text_bound():
    with pytest.raises(ValueError):
        _load(NumericRange, "<r><S100Base:upperBound>high</S100Base:upperBound></r>")


def test_attribute_constraints_reads_all_parts():
    constraints = _load(
        AttributeConstraints,
        "<c><S100FD:stringLength>5</S100FD:stringLength>"
        "<S100FD:textPattern>[A-Z]+</S100FD:textPattern>"
        "<S100FD:range><S100Base:lowerBound>1</S100Base:lowerBound>"
        "<S100Base:upperBound>9</S100Base:upperBound></S100FD:range>"
        "<S100FD:precision>2</S100FD:precision></c>",
    )
    assert constraints.string_length == 5
    assert constraints.text_pattern == "[A-Z]+"
    assert constraints.range.lower_bound == 1.0
    assert constraints.range.upper_bound == 9.0
    assert constraints.precision == 2


def test_attribute_constraints_defaults_when_empty():
    constraints = _load(AttributeConstraints, "<c><other>3</other></c>")
    assert constraints.string_length == 0
    assert constraints.text_pattern == ""
    assert constraints.precision == 0


def test_attribute_constraints_rejects_bad_precision():
    with pytest.raises(ValueError):
        _load(AttributeConstraints, "<c><S100FD:precision>x</S100FD:precision></c>")


def test_unit_of_measure_absent_definition_and_symbol():
    uom = _load(UnitOfMeasure, "<u><S100Base:name>metre</S100Base:name></u>")
    assert uom.name == "metre"
    assert uom.definition is None
    assert uom.symbol is None


def test_unit_of_measure_reads_definition_and_symbol():
    uom = _load(
        UnitOfMeasure,
        "<u><S100Base:name>metre</S100Base:name>"
        "<S100Base:definition>unit of length</S100Base:definition>"
        "<S100Base:symbol>m</S100Base:symbol></u>",
    )
    assert uom.definition == "unit of length"
    assert uom.symbol == "m"