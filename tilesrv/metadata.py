"""Metadata links shown in capabilities documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from xml.etree import ElementTree as ET

XMLATTR = "<xmlattr>"


class MissingFieldError(ValueError):
    """A required field is absent from a JSON description, or has the wrong type."""

    def __init__(self, field: str) -> None:
        super().__init__(f"have to own a field {field}")
        self.field = field


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _child(node: ET.Element, tag: str) -> ET.Element:
    existing = next((child for child in node if child.tag == tag), None)
    return existing if existing is not None else ET.SubElement(node, tag)


def add_node(parent: ET.Element, path: str, value: Any) -> ET.Element:
    """Add a value under ``parent`` at a dotted ``path``.

    Intermediate elements are reused when they already exist, the last one
    is always created. A ``<xmlattr>.name`` tail sets an attribute on the
    element reached so far. Returns the element that received the value.
    """
    keys = path.split(".")
    node = parent
    for position, key in enumerate(keys[:-1]):
        if key == XMLATTR:
            if position != len(keys) - 2:
                raise ValueError(f"attribute must end the path: {path}")
            node.set(keys[-1], _format_value(value))
            return node
        node = _child(node, key)

    if keys[-1] == XMLATTR:
        raise ValueError(f"attribute name missing in path: {path}")
    element = ET.SubElement(node, keys[-1])
    text = _format_value(value)
    if text:
        element.text = text
    return element


def _require_string(doc: Any, key: str, field: str) -> str:
    value = doc.get(key) if isinstance(doc, Mapping) else None
    if not isinstance(value, str):
        raise MissingFieldError(field)
    return value


@dataclass(frozen=True)
class Metadata:
    """A link to a metadata document."""

    format: str
    href: str
    type: str

    @classmethod
    def from_json(cls, doc: Any) -> "Metadata":
        """Build from a JSON object holding ``format``, ``url`` and ``type``."""
        fmt = _require_string(doc, "format", "format")
        href = _require_string(doc, "url", "url")
        kind = _require_string(doc, "type", "type")
        return cls(format=fmt, href=href, type=kind)

    def add_node_tms(self, parent: ET.Element) -> ET.Element:
        """Add the TMS element describing this link."""
        node = add_node(parent, "Metadata", "")
        add_node(node, "<xmlattr>.type", self.type)
        add_node(node, "<xmlattr>.mime-type", "text/xml")
        add_node(node, "<xmlattr>.href", self.href)
        return node

    def _add_metadata_url(self, parent: ET.Element) -> ET.Element:
        node = add_node(parent, "MetadataURL", "")
        add_node(node, "<xmlattr>.type", self.type)
        add_node(node, "Format", self.format)
        add_node(node, "OnlineResource.<xmlattr>.xlink:href", self.href)
        add_node(node, "OnlineResource.<xmlattr>.xlink:type", "simple")
        return node

    def add_node_wms(self, parent: ET.Element) -> ET.Element:
        """Add the WMS element describing this link."""
        return self._add_metadata_url(parent)

    def add_node_wmts(self, parent: ET.Element) -> ET.Element:
        """Add the WMTS element describing this link."""
        return self._add_metadata_url(parent)

    def to_json_tiles(self, title: str, rel: str) -> dict[str, str]:
        """Return the OGC API Tiles link object for this metadata."""
        return {"href": self.href, "type": self.type, "rel": rel, "title": title}