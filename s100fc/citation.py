"""Citations of documents, with their dates and series."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import ClassVar

from s100fc.codes import DateTypeCode, PresentationFormCode
from s100fc.contact import ResponsibleParty
from s100fc.xml_item import XmlItem, child_elements, child_value


@dataclass
class DateExt(XmlItem):
    """A full date, a year and month, or a year."""

    _DATE_TAGS: ClassVar[frozenset[str]] = frozenset(
        {"S100CI:date", "S100CI:yearMonth", "S100CI:year"}
    )

    date: str = ""

    def load(self, node: ET.Element) -> None:
        """Take the text of the last date, year-month or year child."""
        for child in child_elements(node):
            if child.tag in self._DATE_TAGS:
                self.date = child_value(child)


@dataclass
class Date(XmlItem):
    """A date together with the kind of event it records."""

    date: DateExt = field(default_factory=DateExt)
    date_type: DateTypeCode = field(default_factory=DateTypeCode)

    def load(self, node: ET.Element) -> None:
        """Read the date and its type; later ones replace earlier ones."""
        for child in child_elements(node):
            if child.tag == "S100CI:date":
                date = DateExt()
                date.load(child)
                self.date = date
            elif child.tag == "S100CI:dateType":
                date_type = DateTypeCode()
                date_type.load(child)
                self.date_type = date_type


@dataclass
class Series(XmlItem):
    """The series or aggregate publication a resource belongs to."""

    _TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "S100CI:name": "name",
        "S100CI:issueIdentification": "issue_identification",
        "S100CI:page": "page",
    }

    name: str = ""
    issue_identification: str = ""
    page: str = ""

    def load(self, node: ET.Element) -> None:
        """Read the series name, issue and page."""
        for child in child_elements(node):
            attr = self._TEXT_FIELDS.get(child.tag)
            if attr is not None:
                setattr(self, attr, child_value(child))


@dataclass
class Citation(XmlItem):
    """A standardised reference to a resource."""

    _TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "S100CI:title": "title",
        "S100CI:edition": "edition",
        "S100CI:identifier": "identifier",
        "S100CI:identifierType": "identifier_type",
        "S100CI:otherCitationDetails": "other_citation_details",
        "S100CI:collectiveTitle": "collective_title",
        "S100CI:ISBN": "isbn",
        "S100CI:ISSN": "issn",
    }

    title: str = ""
    alternate_titles: list[str] = field(default_factory=list)
    dates: list[Date] = field(default_factory=list)
    edition: str = ""
    edition_date: DateExt = field(default_factory=DateExt)
    identifier: str = ""
    identifier_type: str = ""
    cited_responsible_party: ResponsibleParty = field(
        default_factory=ResponsibleParty
    )
    presentation_form: PresentationFormCode = field(
        default_factory=PresentationFormCode
    )
    series: Series = field(default_factory=Series)
    other_citation_details: str = ""
    collective_title: str = ""
    isbn: str = ""
    issn: str = ""

    def load(self, node: ET.Element) -> None:
        """Read the citation from the children of ``node``."""
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100CI:aternateTitle":
                self.alternate_titles.append(child_value(child))
            elif tag == "S100CI:date":
                date = Date()
                date.load(child)
                self.dates.append(date)
            elif tag == "S100CI:editionDate":
                edition_date = DateExt()
                edition_date.load(child)
                self.edition_date = edition_date
            elif tag == "S100CI:citedResponsibleParty":
                party = ResponsibleParty()
                party.load(child)
                self.cited_responsible_party = party
            elif tag == "S100CI:presentationForm":
                form = PresentationFormCode()
                form.load(child)
                self.presentation_form = form
            elif tag == "S100CI:series":
                series = Series()
                series.load(child)
                self.series = series
            else:
                attr = self._TEXT_FIELDS.get(tag)
                if attr is not None:
                    setattr(self, attr, child_value(child))