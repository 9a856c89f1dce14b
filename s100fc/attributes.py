"""Attribute bindings, listed values and simple and complex attributes."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import ClassVar

from s100fc.codes import IntegerCode
from s100fc.definitions import DefinitionReference
from s100fc.item import Attribute, Item
from s100fc.measures import AttributeConstraints, Multiplicity, UnitOfMeasure
from s100fc.value_types import (
    AttributeValueType,
    QuantitySpecification,
    attribute_value_type_from_string,
    quantity_specification_from_string,
)
from s100fc.xml_item import (
    Reference,
    ValueList,
    XmlItem,
    child_elements,
    child_value,
)


@dataclass
class AttributeBinding(XmlItem):
    """The binding of an attribute to a type, with its multiplicity."""

    multiplicity: Multiplicity = field(default_factory=Multiplicity)
    permitted_values: ValueList = field(default_factory=ValueList)
    attribute: Reference = field(default_factory=Reference)

    def load(self, node: ET.Element) -> None:
        """Read the ``sequential`` flag, multiplicity, values and attribute."""
        sequential = node.get("sequential")
        if sequential is not None:
            self.add_attribute("sequential", sequential)
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100FC:multiplicity":
                self.multiplicity.load(child)
            elif tag == "S100FC:permittedValues":
                self.permitted_values.load(child)
            elif tag == "S100FC:attribute":
                self.attribute.load(child)


@dataclass
class ListedValue(XmlItem):
    """One value of an enumeration, identified by an integer code."""

    _TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "S100FC:label": "label",
        "S100FC:definition": "definition",
        "S100FC:remarks": "remarks",
    }

    label: str = ""
    definition: str = ""
    code: IntegerCode = field(default_factory=IntegerCode)
    remarks: str = ""
    aliases: list[str] = field(default_factory=list)
    definition_reference: DefinitionReference = field(
        default_factory=DefinitionReference
    )

    def load(self, node: ET.Element) -> None:
        """Read the listed value from the children of ``node``."""
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100FC:code":
                self.code.load(child)
            elif tag == "S100FC:alias":
                self.aliases.append(child_value(child))
            elif tag == "S100FC:definitionReference":
                self.definition_reference.load(child)
            else:
                attr = self._TEXT_FIELDS.get(tag)
                if attr is not None:
                    setattr(self, attr, child_value(child))


@dataclass
class ListedValues(XmlItem):
    """Listed values keyed by their integer code."""

    values: dict[int, ListedValue] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read each listed value; the first with a given code is kept."""
        for child in child_elements(node):
            if child.tag == "S100FC:listedValue":
                listed = ListedValue()
                listed.load(child)
                self.values.setdefault(listed.code.value_integer, listed)


@dataclass
class SimpleAttribute(Attribute):
    """An attribute holding a single value of a given type."""

    value_type: AttributeValueType = AttributeValueType.NONE
    uom: UnitOfMeasure = field(default_factory=UnitOfMeasure)
    quantity_specification: QuantitySpecification = QuantitySpecification.NONE
    constraints: AttributeConstraints = field(default_factory=AttributeConstraints)
    listed_values: list[ListedValues] = field(default_factory=list)

    def load(self, node: ET.Element) -> None:
        """Read the common item fields and the value description."""
        super().load(node)
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100FC:valueType":
                self.value_type = attribute_value_type_from_string(
                    child_value(child)
                )
            elif tag == "S100FC:uom":
                self.uom.load(child)
            elif tag == "S100FC:quantitySpecification":
                self.quantity_specification = quantity_specification_from_string(
                    child_value(child)
                )
            elif tag == "S100FC:constraints":
                self.constraints.load(child)
            elif tag == "S100FC:listedValues":
                listed = ListedValues()
                listed.load(child)
                self.listed_values.append(listed)


@dataclass
class SimpleAttributes(XmlItem):
    """The simple attributes of a catalogue, keyed by code."""

    attributes_by_code: dict[str, SimpleAttribute] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read each simple attribute; the first with a given code is kept."""
        for child in child_elements(node):
            if child.tag == "S100FC:S100_FC_SimpleAttribute":
                attribute = SimpleAttribute()
                attribute.load(child)
                self.attributes_by_code.setdefault(attribute.code, attribute)


@dataclass
class ComplexAttribute(Item):
    """An attribute made up of bound sub-attributes."""

    sub_attribute_bindings: list[AttributeBinding] = field(default_factory=list)

    def load(self, node: ET.Element) -> None:
        """Read the common item fields and each sub-attribute binding."""
        super().load(node)
        for child in child_elements(node):
            if child.tag == "S100FC:subAttributeBinding":
                binding = AttributeBinding()
                binding.load(child)
                self.sub_attribute_bindings.append(binding)


@dataclass
class ComplexAttributes(XmlItem):
    """The complex attributes of a catalogue, keyed by code."""

    attributes_by_code: dict[str, ComplexAttribute] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read each complex attribute; a later one replaces an earlier one."""
        for child in child_elements(node):
            if child.tag == "S100FC:S100_FC_ComplexAttribute":
                attribute = ComplexAttribute()
                attribute.load(child)
                self.attributes_by_code[attribute.code] = attribute

    def add(self, key: str, value: ComplexAttribute) -> None:
        """Add ``value`` under ``key`` unless the key is already taken."""
        self.attributes_by_code.setdefault(key, value)