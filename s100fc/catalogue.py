"""The feature catalogue: reading a catalogue file and looking up its entries."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import islice
from typing import TypeVar

from s100fc.attributes import (
    ComplexAttribute,
    ComplexAttributes,
    SimpleAttribute,
    SimpleAttributes,
)
from s100fc.bindings import FeatureBinding, InformationBinding, ObjectType
from s100fc.contact import ResponsibleParty
from s100fc.definitions import DefinitionSources
from s100fc.item import Item, Role, Roles
from s100fc.object_types import (
    FeatureAssociation,
    FeatureAssociations,
    FeatureType,
    FeatureTypes,
    InformationAssociation,
    InformationAssociations,
    InformationType,
    InformationTypes,
)
from s100fc.xml_item import child_elements, child_value, parse_element

ROOT_TAG = "S100FC:S100_FC_FeatureCatalogue"

_T = TypeVar("_T", bound=Item)

_TEXT_FIELDS = {
    "S100FC:name": "name",
    "S100FC:scope": "scope",
    "S100FC:fieldOfApplication": "field_of_application",
    "S100FC:versionNumber": "version_number",
    "S100FC:versionDate": "version_date",
}


def _first_named(items: Iterable[_T], name: str) -> _T | None:
    return next((item for item in items if item.name == name), None)


@dataclass
class FeatureCatalogue:
    """A feature catalogue with its attributes, roles, associations and types."""

    name: str = ""
    scope: str = ""
    field_of_application: str | None = None
    version_number: str = ""
    version_date: str = ""
    file_path: str = ""
    producer: ResponsibleParty = field(default_factory=ResponsibleParty)
    definition_sources: DefinitionSources = field(default_factory=DefinitionSources)
    simple_attributes: SimpleAttributes = field(default_factory=SimpleAttributes)
    complex_attributes: ComplexAttributes = field(default_factory=ComplexAttributes)
    roles: Roles = field(default_factory=Roles)
    information_associations: InformationAssociations = field(
        default_factory=InformationAssociations
    )
    feature_associations: FeatureAssociations = field(
        default_factory=FeatureAssociations
    )
    information_types: InformationTypes = field(default_factory=InformationTypes)
    feature_types: FeatureTypes = field(default_factory=FeatureTypes)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> FeatureCatalogue:
        """Create a catalogue and read it from ``path``."""
        catalogue = cls()
        catalogue.read(path)
        return catalogue

    def read(self, path: str | os.PathLike[str]) -> None:
        """Read the catalogue file at ``path``.

        Raises ``OSError`` if the file cannot be read and ``ValueError`` if it
        is not well-formed XML or its root is not a feature catalogue.
        """
        self.file_path = os.fspath(path)
        with open(path, "rb") as stream:
            root = parse_element(stream.read())
        if root.tag != ROOT_TAG:
            raise ValueError(
                f"{self.file_path!r} is not a feature catalogue (root {root.tag!r})"
            )
        self.load(root)

    def load(self, node: ET.Element) -> None:
        """Read the catalogue from its root element and complete the bindings."""
        sections = {
            "S100FC:producer": self.producer,
            "S100FC:S100_FC_definitionSources": self.definition_sources,
            "S100FC:S100_FC_SimpleAttributes": self.simple_attributes,
            "S100FC:S100_FC_ComplexAttributes": self.complex_attributes,
            "S100FC:S100_FC_Roles": self.roles,
            "S100FC:S100_FC_InformationAssociations": self.information_associations,
            "S100FC:S100_FC_FeatureAssociations": self.feature_associations,
            "S100FC:S100_FC_InformationTypes": self.information_types,
            "S100FC:S100_FC_FeatureTypes": self.feature_types,
        }
        for child in child_elements(node):
            attr = _TEXT_FIELDS.get(child.tag)
            if attr is not None:
                setattr(self, attr, child_value(child))
                continue
            section = sections.get(child.tag)
            if section is not None:
                section.load(child)
        self.set_full_associations()

    # Lookups by code and by name.

    def simple_attribute(self, code: str) -> SimpleAttribute | None:
        """Return the simple attribute with ``code``, if any."""
        return self.simple_attributes.attributes_by_code.get(code)

    def simple_attribute_by_name(self, name: str) -> SimpleAttribute | None:
        """Return the first simple attribute called ``name``, if any."""
        return _first_named(self.simple_attributes.attributes_by_code.values(), name)

    def complex_attribute(self, code: str) -> ComplexAttribute | None:
        """Return the complex attribute with ``code``, if any."""
        return self.complex_attributes.attributes_by_code.get(code)

    def complex_attribute_by_name(self, name: str) -> ComplexAttribute | None:
        """Return the first complex attribute called ``name``, if any."""
        return _first_named(self.complex_attributes.attributes_by_code.values(), name)

    def role(self, code: str) -> Role | None:
        """Return the role with ``code``, if any."""
        return self.roles.roles.get(code)

    def role_by_name(self, name: str) -> Role | None:
        """Return the first role called ``name``, if any."""
        return _first_named(self.roles.roles.values(), name)

    def information_association(self, code: str) -> InformationAssociation | None:
        """Return the information association with ``code``, if any."""
        return self.information_associations.associations.get(code)

    def information_association_by_name(
        self, name: str
    ) -> InformationAssociation | None:
        """Return the first information association called ``name``, if any."""
        return _first_named(self.information_associations.associations.values(), name)

    def feature_association(self, code: str) -> FeatureAssociation | None:
        """Return the feature association with ``code``, if any."""
        return self.feature_associations.associations.get(code)

    def feature_association_by_name(self, name: str) -> FeatureAssociation | None:
        """Return the first feature association called ``name``, if any."""
        return _first_named(self.feature_associations.associations.values(), name)

    def information_type(self, code: str) -> InformationType | None:
        """Return the information type with ``code``, if any."""
        return self.information_types.information_types.get(code)

    def information_type_by_name(self, name: str) -> InformationType | None:
        """Return the first information type called ``name``, if any."""
        return _first_named(self.information_types.information_types.values(), name)

    def feature_type(self, code: str) -> FeatureType | None:
        """Return the feature type with ``code``, if any."""
        return self.feature_types.feature_types.get(code)

    def feature_type_by_name(self, name: str) -> FeatureType | None:
        """Return the first feature type called ``name``, if any."""
        return _first_named(self.feature_types.feature_types.values(), name)

    def feature_type_at(self, index: int) -> FeatureType | None:
        """Return the feature type at position ``index``; None if out of range."""
        if index < 0:
            return None
        types = self.feature_types.feature_types.values()
        return next(islice(types, index, None), None)

    # Completing bindings with the sub types of bound types.

    def set_full_associations(self) -> None:
        """Bind every type also to the direct sub types of the types it binds."""
        for feature_type in self.feature_types.feature_types.values():
            for binding in list(feature_type.feature_bindings.values()):
                self._add_feature_sub_types(
                    feature_type,
                    binding.feature_type.reference(),
                    binding.role.reference(),
                    binding.association.reference(),
                )
            self._add_information_bindings(feature_type)
        for information_type in self.information_types.information_types.values():
            self._add_information_bindings(information_type)

    def _add_information_bindings(self, owner: ObjectType) -> None:
        for binding in list(owner.information_bindings.values()):
            self._add_information_sub_types(
                owner,
                binding.information_type.reference(),
                binding.role.reference(),
                binding.association.reference(),
            )

    def _add_feature_sub_types(
        self, owner: FeatureType, super_name: str, role: str, association: str
    ) -> None:
        for candidate in self.feature_types.feature_types.values():
            code = candidate.code
            if code == super_name or code in owner.feature_bindings:
                continue
            if candidate.super_type == super_name:
                binding = FeatureBinding()
                binding.feature_type.set_reference(code)
                binding.role.set_reference(role)
                binding.association.set_reference(association)
                owner.feature_bindings.setdefault(code, binding)

    def _add_information_sub_types(
        self, owner: ObjectType, super_name: str, role: str, association: str
    ) -> None:
        for candidate in self.information_types.information_types.values():
            code = candidate.code
            if code == super_name or code in owner.information_bindings:
                continue
            if candidate.super_type == super_name:
                binding = InformationBinding()
                binding.information_type.set_reference(code)
                binding.role.set_reference(role)
                binding.association.set_reference(association)
                owner.information_bindings.setdefault(code, binding)