"""Contact information published by the services."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from xml.etree import ElementTree as ET

from tilesrv.metadata import add_node


class ConfigurationError(ValueError):
    """A configuration section is malformed."""


# JSON key -> attribute name, in the order the fields are checked.
_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "individual_name"),
    ("position", "individual_position"),
    ("voice", "voice"),
    ("facsimile", "facsimile"),
    ("address_type", "address_type"),
    ("delivery_point", "delivery_point"),
    ("city", "city"),
    ("administrative_area", "administrative_area"),
    ("post_code", "post_code"),
    ("country", "country"),
    ("email", "email"),
)


@dataclass(frozen=True)
class Contact:
    """Contact details of the service provider."""

    individual_name: str = ""
    individual_position: str = ""
    voice: str = ""
    facsimile: str = ""
    address_type: str = ""
    delivery_point: str = ""
    city: str = ""
    administrative_area: str = ""
    post_code: str = ""
    country: str = ""
    email: str = ""

    @classmethod
    def from_json(cls, doc: Any) -> "Contact":
        """Build from a JSON ``contact`` section; ``None`` gives empty fields."""
        if doc is None:
            return cls()
        if not isinstance(doc, Mapping):
            raise ConfigurationError("Contact configuration: contact have to be an object")

        values: dict[str, str] = {}
        for key, attribute in _FIELDS:
            value = doc.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigurationError(f"Contact configuration: {key} have to be a string")
            values[attribute] = value
        return cls(**values)

    def add_node_wmts(self, parent: ET.Element) -> ET.Element:
        """Add the WMTS ``ows:ServiceContact`` element."""
        node = add_node(parent, "ows:ServiceContact", "")
        add_node(node, "ows:IndividualName", self.individual_name)
        add_node(node, "ows:PositionName", self.individual_position)

        add_node(node, "ows:ContactInfo.ows:Phone.ows:Voice", self.voice)
        add_node(node, "ows:ContactInfo.ows:Phone.ows:Facsimile", self.facsimile)

        add_node(node, "ows:ContactInfo.ows:Address.ows:DeliveryPoint", self.delivery_point)
        add_node(node, "ows:ContactInfo.ows:Address.ows:City", self.city)
        add_node(node, "ows:ContactInfo.ows:Address.ows:AdministrativeArea", self.administrative_area)
        add_node(node, "ows:ContactInfo.ows:Address.ows:PostalCode", self.post_code)
        add_node(node, "ows:ContactInfo.ows:Address.ows:Country", self.country)
        add_node(node, "ows:ContactInfo.ows:Address.ows:ElectronicMailAddress", self.email)
        return node

    def _add_contact_information(self, parent: ET.Element, organization: str) -> ET.Element:
        node = add_node(parent, "ContactInformation", "")
        add_node(node, "ContactPersonPrimary.ContactPerson", self.individual_name)
        add_node(node, "ContactPersonPrimary.ContactOrganization", organization)
        add_node(node, "ContactPosition", self.individual_position)

        add_node(node, "ContactAddress.AddressType", self.address_type)
        add_node(node, "ContactAddress.Address", self.delivery_point)
        add_node(node, "ContactAddress.City", self.city)
        add_node(node, "ContactAddress.StateOrProvince", self.administrative_area)
        add_node(node, "ContactAddress.PostCode", self.post_code)
        add_node(node, "ContactAddress.Country", self.country)

        add_node(node, "ContactVoiceTelephone", self.voice)
        add_node(node, "ContactFacsimileTelephone", self.facsimile)
        add_node(node, "ContactElectronicMailAddress", self.email)
        return node

    def add_node_wms(self, parent: ET.Element, organization: str) -> ET.Element:
        """Add the WMS ``ContactInformation`` element."""
        return self._add_contact_information(parent, organization)

    def add_node_tms(self, parent: ET.Element, organization: str) -> ET.Element:
        """Add the TMS ``ContactInformation`` element."""
        return self._add_contact_information(parent, organization)