"""Contact details of organisations and responsible parties."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import ClassVar

from s100fc.codes import OnlineFunctionCode, RoleCode
from s100fc.xml_item import XmlItem, child_elements, child_value


@dataclass
class Address(XmlItem):
    """A postal and electronic mail address."""

    _TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "S100CI:deliveryPoint": "delivery_point",
        "S100CI:city": "city",
        "S100CI:administrativeArea": "administrative_area",
        "S100CI:postalCode": "postal_code",
        "S100CI:country": "country",
        "S100CI:electronicMailAddress": "electronic_mail_address",
    }

    delivery_point: str = ""
    city: str = ""
    administrative_area: str = ""
    postal_code: str = ""
    country: str = ""
    electronic_mail_address: str = ""

    def load(self, node: ET.Element) -> None:
        """Read the address parts from the children of ``node``."""
        for child in child_elements(node):
            attr = self._TEXT_FIELDS.get(child.tag)
            if attr is not None:
                setattr(self, attr, child_value(child))


@dataclass
class Telephone(XmlItem):
    """Voice and facsimile numbers."""

    voice: list[str] = field(default_factory=list)
    facsimile: str = ""

    def load(self, node: ET.Element) -> None:
        """Append each voice number and take the facsimile number."""
        for child in child_elements(node):
            if child.tag == "S100CI:voice":
                self.voice.append(child_value(child))
            elif child.tag == "S100CI:facsimile":
                self.facsimile = child_value(child)


@dataclass
class OnlineResource(XmlItem):
    """An online location where a resource can be reached."""

    _TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "S100CI:url": "url",
        "S100CI:protocol": "protocol",
        "S100CI:applicationProfile": "application_profile",
        "S100CI:name": "name",
        "S100CI:description": "description",
        "S100CI:linkage": "linkage",
    }

    url: str = ""
    protocol: str = ""
    application_profile: str = ""
    name: str = ""
    description: str = ""
    function: OnlineFunctionCode = field(default_factory=OnlineFunctionCode)
    linkage: str = ""

    def load(self, node: ET.Element) -> None:
        """Read the resource description from the children of ``node``."""
        for child in child_elements(node):
            if child.tag == "S100CI:function":
                self.function.load(child)
                continue
            attr = self._TEXT_FIELDS.get(child.tag)
            if attr is not None:
                setattr(self, attr, child_value(child))


@dataclass
class ContactInfo(XmlItem):
    """Address and online resource of an organisation."""

    address: Address = field(default_factory=Address)
    online_resource: OnlineResource = field(default_factory=OnlineResource)

    def load(self, node: ET.Element) -> None:
        """Read the address and online resource; later ones replace earlier."""
        for child in child_elements(node):
            if child.tag == "S100CI:address":
                address = Address()
                address.load(child)
                self.address = address
            elif child.tag == "S100CI:onlineResource":
                resource = OnlineResource()
                resource.load(child)
                self.online_resource = resource


@dataclass
class Contact(XmlItem):
    """Full contact details of a responsible party."""

    phone: Telephone = field(default_factory=Telephone)
    address: Address = field(default_factory=Address)
    online_resource: OnlineResource = field(default_factory=OnlineResource)
    hours_of_service: str = ""
    contact_instructions: str = ""

    def load(self, node: ET.Element) -> None:
        """Read the contact details; later parts replace earlier ones."""
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100CI:phone":
                phone = Telephone()
                phone.load(child)
                self.phone = phone
            elif tag == "S100CI:address":
                address = Address()
                address.load(child)
                self.address = address
            elif tag == "S100CI:onlineResource":
                resource = OnlineResource()
                resource.load(child)
                self.online_resource = resource
            elif tag == "S100CI:hoursOfService":
                self.hours_of_service = child_value(child)
            elif tag == "S100CI:contactInstructions":
                self.contact_instructions = child_value(child)


@dataclass
class Organisation(XmlItem):
    """An organisation with its contact information."""

    name: str = ""
    contact_info: ContactInfo = field(default_factory=ContactInfo)

    def load(self, node: ET.Element) -> None:
        """Read the organisation's name and contact information."""
        for child in child_elements(node):
            if child.tag == "S100CI:name":
                self.name = child_value(child)
            elif child.tag == "S100CI:contactInfo":
                info = ContactInfo()
                info.load(child)
                self.contact_info = info


@dataclass
class Party(XmlItem):
    """A party, given as an organisation."""

    organisation: Organisation = field(default_factory=Organisation)

    def load(self, node: ET.Element) -> None:
        """Read the ``S100CI:CI_Organisation`` children into the organisation."""
        for child in child_elements(node):
            if child.tag == "S100CI:CI_Organisation":
                self.organisation.load(child)


@dataclass
class ResponsibleParty(XmlItem):
    """A person or organisation responsible for a resource, with its role."""

    _TEXT_FIELDS: ClassVar[dict[str, str]] = {
        "S100CI:individualName": "individual_name",
        "S100CI:organisationName": "organisation_name",
        "S100CI:positionName": "position_name",
    }

    individual_name: str = ""
    organisation_name: str = ""
    position_name: str = ""
    contact_info: Contact = field(default_factory=Contact)
    role: RoleCode = field(default_factory=RoleCode)
    party: Party = field(default_factory=Party)

    def load(self, node: ET.Element) -> None:
        """Read names, contact details, role and party from ``node``."""
        for child in child_elements(node):
            tag = child.tag
            if tag == "S100CI:contactInfo":
                self.contact_info.load(child)
            elif tag == "S100CI:role":
                self.role.load(child)
            elif tag == "S100CI:party":
                self.party.load(child)
            else:
                attr = self._TEXT_FIELDS.get(tag)
                if attr is not None:
                    setattr(self, attr, child_value(child))