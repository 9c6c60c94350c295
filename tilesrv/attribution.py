"""Attribution elements shown in capabilities documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional
from xml.etree import ElementTree as ET

from tilesrv.metadata import MissingFieldError, add_node


@dataclass(frozen=True)
class Logo:
    """The logo of an attribution."""

    width: int
    height: int
    format: str
    href: str


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Attribution:
    """An attribution link with an optional logo."""

    title: str
    href: str
    logo: Optional[Logo] = None
    format: str = ""

    @classmethod
    def from_json(cls, doc: Any) -> "Attribution":
        """Build from a JSON object holding ``title``, ``url`` and an optional ``logo``."""
        if not isinstance(doc, Mapping):
            raise MissingFieldError("title")
        title = doc.get("title")
        if not isinstance(title, str):
            raise MissingFieldError("title")
        href = doc.get("url")
        if not isinstance(href, str):
            raise MissingFieldError("url")

        logo = None
        logo_doc = doc.get("logo")
        if isinstance(logo_doc, Mapping):
            width = logo_doc.get("width")
            if not _is_number(width):
                raise MissingFieldError("logo.width")
            height = logo_doc.get("height")
            if not _is_number(height):
                raise MissingFieldError("logo.height")
            logo_format = logo_doc.get("format")
            if not isinstance(logo_format, str):
                raise MissingFieldError("logo.format")
            logo_href = logo_doc.get("url")
            if not isinstance(logo_href, str):
                raise MissingFieldError("logo.url")
            logo = Logo(int(width), int(height), logo_format, logo_href)

        return cls(title=title, href=href, logo=logo)

    def add_node_tms(self, parent: ET.Element) -> ET.Element:
        """Add the TMS element describing this attribution."""
        node = add_node(parent, "Attribution", "")
        add_node(node, "Title", self.title)
        if self.logo is not None:
            add_node(node, "Logo.<xmlattr>.width", self.logo.width)
            add_node(node, "Logo.<xmlattr>.height", self.logo.height)
            add_node(node, "Logo.<xmlattr>.href", self.href)
            add_node(node, "Logo.<xmlattr>.mime-type", self.format)
        return node

    def add_node_wms(self, parent: ET.Element) -> ET.Element:
        """Add the WMS element describing this attribution."""
        node = add_node(parent, "Attribution", "")
        add_node(node, "Title", self.title)
        add_node(node, "OnlineResource.<xmlattr>.xlink:href", self.href)
        add_node(node, "OnlineResource.<xmlattr>.xlink:type", "simple")
        if self.logo is not None:
            add_node(node, "LogoURL.<xmlattr>.width", self.logo.width)
            add_node(node, "LogoURL.<xmlattr>.height", self.logo.height)
            add_node(node, "LogoURL.OnlineResource.<xmlattr>.xlink:href", self.href)
            add_node(node, "LogoURL.OnlineResource.<xmlattr>.xlink:type", "simple")
            add_node(node, "LogoURL.Format", self.format)
        return node