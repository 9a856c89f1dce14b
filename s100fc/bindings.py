"""Named types, feature and information bindings, and object types."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from s100fc.attributes import AttributeBinding
from s100fc.item import Item
from s100fc.measures import Multiplicity
from s100fc.xml_item import Reference, XmlItem, child_elements


def _binding_key(target: Reference) -> str:
    """Return the code a binding points at: its value, else its last ``ref``."""
    if target.value:
        return target.value
    refs = [attr.value for attr in target.attributes if attr.name == "ref"]
    return refs[-1] if refs else ""


@dataclass
class NamedType(Item):
    """A catalogue item that carries attribute bindings."""

    attribute_bindings: list[AttributeBinding] = field(default_factory=list)

    def load(self, node: ET.Element) -> None:
        """Read the item fields, the ``isAbstract`` flag and attribute bindings."""
        super().load(node)
        abstract = node.get("isAbstract")
        if abstract is not None:
            self.add_attribute("isAbstract", abstract)
        for child in child_elements(node):
            if child.tag == "S100FC:attributeBinding":
                binding = AttributeBinding()
                binding.load(child)
                self.attribute_bindings.append(binding)


@dataclass
class _Binding(XmlItem):
    """Common part of feature and information bindings."""

    multiplicity: Multiplicity = field(default_factory=Multiplicity)
    association: Reference = field(default_factory=Reference)
    role: Reference = field(default_factory=Reference)

    def _load_binding(
        self, node: ET.Element, target_tag: str, target: Reference
    ) -> None:
        """Read the ``roleType`` flag, multiplicity, association, role and target."""
        role_type = node.get("roleType")
        if role_type is not None:
            self.add_attribute("roleType", role_type)
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100FC:multiplicity":
                self.multiplicity.load(child)
            elif tag == "S100FC:association":
                self.association.load(child)
            elif tag == "S100FC:role":
                self.role.load(child)
            elif tag == target_tag:
                target.load(child)


@dataclass
class FeatureBinding(_Binding):
    """The binding of a feature type to another feature type."""

    feature_type: Reference = field(default_factory=Reference)

    def load(self, node: ET.Element) -> None:
        """Read the binding and the feature type it points at."""
        self._load_binding(node, "S100FC:featureType", self.feature_type)


@dataclass
class InformationBinding(_Binding):
    """The binding of a type to an information type."""

    information_type: Reference = field(default_factory=Reference)

    def load(self, node: ET.Element) -> None:
        """Read the binding and the information type it points at."""
        self._load_binding(node, "S100FC:informationType", self.information_type)


@dataclass
class ObjectType(NamedType):
    """A named type that may be bound to information types."""

    information_bindings: dict[str, InformationBinding] = field(
        default_factory=dict
    )

    def load(self, node: ET.Element) -> None:
        """Read the named-type fields and the information bindings by target."""
        super().load(node)
        for child in child_elements(node):
            if child.tag == "S100FC:informationBinding":
                binding = InformationBinding()
                binding.load(child)
                self.information_bindings[
                    _binding_key(binding.information_type)
                ] = binding