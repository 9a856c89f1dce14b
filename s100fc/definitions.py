"""Definition references and the sources they point at."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from s100fc.citation import Citation
from s100fc.xml_item import Reference, XmlItem, child_elements, child_value


@dataclass
class DefinitionReference(XmlItem):
    """A pointer into a definition source."""

    source_identifier: str = ""
    definition_source: Reference = field(default_factory=Reference)

    def load(self, node: ET.Element) -> None:
        """Read the source identifier and the referenced definition source."""
        for child in child_elements(node):
            if child.tag == "S100FC:sourceIdentifier":
                self.source_identifier = child_value(child)
            elif child.tag == "S100FC:definitionSource":
                self.definition_source.load(child)


@dataclass
class DefinitionSource(XmlItem):
    """A cited source of definitions, optionally carrying an ``id``."""

    source: Citation = field(default_factory=Citation)

    def load(self, node: ET.Element) -> None:
        """Read the ``id`` attribute and the cited source."""
        ident = node.get("id")
        if ident is not None:
            self.add_attribute("id", ident)
        for child in child_elements(node):
            if child.tag == "S100FC:source":
                self.source.load(child)


@dataclass
class DefinitionSources(XmlItem):
    """The definition sources of a catalogue, keyed by their value."""

    source_identifier: str = ""
    definition_sources: dict[str, DefinitionSource] = field(default_factory=dict)

    def load(self, node: ET.Element) -> None:
        """Read the source identifier and each definition source."""
        for child in child_elements(node):
            if child.tag == "S100FC:S100_FC_sourceIdentifier":
                self.source_identifier = child_value(child)
            elif child.tag == "S100FC:S100_FC_definitionSource":
                source = DefinitionSource()
                source.load(child)
                self.definition_sources[source.value] = source