"""Named catalogue items: the common base, attributes and roles."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import ClassVar

from s100fc.definitions import DefinitionReference
from s100fc.xml_item import XmlItem, child_elements, child_value


@dataclass
class Item(XmlItem):
    """A catalogue entry with a name, definition, code and aliases."""

    _TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "S100FC:name": "name",
        "S100FC:definition": "definition",
        "S100FC:code": "code",
        "S100FC:remarks": "remarks",
    }

    name: str = ""
    definition: str = ""
    code: str = ""
    remarks: str | None = None
    aliases: list[str] = field(default_factory=list)
    definition_reference: DefinitionReference = field(
        default_factory=DefinitionReference
    )

    def load(self, node: ET.Element) -> None:
        """Read the common item fields from the children of ``node``."""
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100FC:alias":
                self.aliases.append(child_value(child))
            elif tag == "S100FC:definitionReference":
                self.definition_reference.load(child)
            else:
                attr = self._TEXT_FIELDS.get(tag)
                if attr is not None:
                    setattr(self, attr, child_value(child))

    def compare_code(self, value: str) -> bool:
        """Return whether this item's code is exactly ``value``."""
        return self.code == value

    def has_remarks(self) -> bool:
        """Return whether non-empty remarks were given."""
        return bool(self.remarks)


@dataclass
class Attribute(Item):
    """A catalogue attribute."""


@dataclass
class Role(Item):
    """A role played in an association."""


@dataclass
class Roles(XmlItem):
    """The roles of a catalogue, keyed by code."""

    roles: dict[str, Role] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read each role; the first role with a given code is kept."""
        for child in child_elements(node):
            if child.tag == "S100FC:S100_FC_Role":
                role = Role()
                role.load(child)
                self.roles.setdefault(role.code, role)