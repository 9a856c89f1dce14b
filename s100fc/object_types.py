"""Feature types, information types and the associations between them."""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from s100fc.bindings import FeatureBinding, NamedType, ObjectType, _binding_key
from s100fc.codes import FeatureUseType, SpatialPrimitiveType
from s100fc.xml_item import Reference, XmlItem, child_elements, child_value


def _load_entries(
    owner: XmlItem,
    node: ET.Element,
    tag: str,
    factory: Callable[[], Any],
    store: dict[str, Any],
    *,
    record_abstract: bool = True,
) -> None:
    """Load each ``tag`` child into ``store`` by code; later codes replace earlier."""
    for child in child_elements(node):
        if child.tag != tag:
            continue
        entry = factory()
        entry.load(child)
        store[entry.code] = entry
        abstract = child.get("isAbstract")
        if record_abstract and abstract is not None:
            owner.add_attribute("isAbstract", abstract)


@dataclass
class FeatureType(ObjectType):
    """A kind of real-world feature."""

    super_type: str = ""
    sub_types: list[str] = field(default_factory=list)
    feature_use_type: FeatureUseType = field(default_factory=FeatureUseType)
    feature_bindings: dict[str, FeatureBinding] = field(default_factory=dict)
    permitted_primitives: list[SpatialPrimitiveType] = field(default_factory=list)

    def load(self, node: ET.Element) -> None:
        """Read the object-type fields, bindings, primitives and type hierarchy."""
        super().load(node)
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100FC:featureUseType":
                self.feature_use_type.load(child)
            elif tag == "S100FC:featureBinding":
                binding = FeatureBinding()
                binding.load(child)
                self.feature_bindings[_binding_key(binding.feature_type)] = binding
            elif tag == "S100FC:permittedPrimitives":
                primitive = SpatialPrimitiveType()
                primitive.load(child)
                self.permitted_primitives.append(primitive)
            elif tag == "S100FC:superType":
                self.super_type = child_value(child)
            elif tag == "S100FC:subType":
                self.sub_types.append(child_value(child))


@dataclass
class FeatureTypes(XmlItem):
    """The feature types of a catalogue, keyed by code."""

    feature_types: dict[str, FeatureType] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read each feature type, then pass inherited bindings down."""
        _load_entries(
            self, node, "S100FC:S100_FC_FeatureType", FeatureType, self.feature_types
        )
        self.apply_super_type()

    def apply_super_type(self) -> None:
        """Give every feature type the bindings of its super types."""
        for feature_type in self.feature_types.values():
            self.set_attribute_from_super_type(feature_type)
            self.set_association_from_super_type(feature_type)

    def set_attribute_from_super_type(self, feature_type: FeatureType) -> bool:
        """Prepend the super type's attribute bindings; False if it is unknown."""
        if not feature_type.super_type:
            return True
        parent = self.feature_types.get(feature_type.super_type)
        if parent is None:
            return False
        if self.set_attribute_from_super_type(parent):
            feature_type.attribute_bindings[:0] = copy.deepcopy(
                parent.attribute_bindings
            )
        return True

    def set_association_from_super_type(self, feature_type: FeatureType) -> bool:
        """Add the super type's feature and information bindings not yet present."""
        if not feature_type.super_type:
            return True
        parent = self.feature_types.get(feature_type.super_type)
        if parent is None:
            return False
        if self.set_association_from_super_type(parent):
            for key, binding in parent.feature_bindings.items():
                feature_type.feature_bindings.setdefault(key, copy.deepcopy(binding))
            for key, binding in parent.information_bindings.items():
                feature_type.information_bindings.setdefault(
                    key, copy.deepcopy(binding)
                )
        return True


@dataclass
class InformationType(ObjectType):
    """A kind of information that can be attached to features."""

    super_type: str = ""
    sub_types: list[str] = field(default_factory=list)

    def load(self, node: ET.Element) -> None:
        """Read the object-type fields and the type hierarchy."""
        super().load(node)
        for child in child_elements(node):
            if child.tag == "S100FC:superType":
                self.super_type = child_value(child)
            elif child.tag == "S100FC:subType":
                self.sub_types.append(child_value(child))


@dataclass
class InformationTypes(XmlItem):
    """The information types of a catalogue, keyed by code."""

    information_types: dict[str, InformationType] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read each information type."""
        _load_entries(
            self,
            node,
            "S100FC:S100_FC_InformationType",
            InformationType,
            self.information_types,
        )

    def set_association_from_super_type(
        self, information_type: InformationType
    ) -> bool:
        """Add the super type's information bindings; False if it is unknown."""
        if not information_type.super_type:
            return True
        parent = self.information_types.get(information_type.super_type)
        if parent is None:
            return False
        if self.set_association_from_super_type(parent):
            for key, binding in parent.information_bindings.items():
                information_type.information_bindings.setdefault(
                    key, copy.deepcopy(binding)
                )
        return True


def _two_references() -> list[Reference]:
    return [Reference(), Reference()]


@dataclass
class _Association(NamedType):
    """Common part of feature and information associations."""

    super_type: str = ""
    sub_types: list[str] = field(default_factory=list)
    roles: list[Reference] = field(default_factory=_two_references)

    def _load_association(self, node: ET.Element) -> None:
        """Read the named-type fields, the two roles and the type hierarchy."""
        NamedType.load(self, node)
        count = 0
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100FC:role":
                if count >= len(self.roles):
                    raise ValueError(
                        f"association {self.code!r} has more than two roles"
                    )
                role = Reference()
                role.load(child)
                self.roles[count] = role
                count += 1
            elif tag == "S100FC:superType":
                self.super_type = child_value(child)
            elif tag == "S100FC:subType":
                self.sub_types.append(child_value(child))


@dataclass
class FeatureAssociation(_Association):
    """An association between feature types."""

    def load(self, node: ET.Element) -> None:
        """Read the named-type fields, the two roles and the type hierarchy."""
        self._load_association(node)


@dataclass
class FeatureAssociations(XmlItem):
    """The feature associations of a catalogue, keyed by code."""

    associations: dict[str, FeatureAssociation] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read each feature association."""
        _load_entries(
            self,
            node,
            "S100FC:S100_FC_FeatureAssociation",
            FeatureAssociation,
            self.associations,
            record_abstract=False,
        )


@dataclass
class InformationAssociation(_Association):
    """An association between a type and an information type."""

    def load(self, node: ET.Element) -> None:
        """Read the named-type fields, the two roles and the type hierarchy."""
        self._load_association(node)


@dataclass
class InformationAssociations(XmlItem):
    """The information associations of a catalogue, keyed by code."""

    associations: dict[str, InformationAssociation] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read each information association."""
        _load_entries(
            self,
            node,
            "S100FC:S100_FC_InformationAssociation",
            InformationAssociation,
            self.associations,
        )