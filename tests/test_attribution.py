from xml.etree import ElementTree as ET

import pytest

from tilesrv.attribution import Attribution, Logo
from tilesrv.metadata import MissingFieldError

LOGO = {"width": 100, "height": 50, "format": "image/png", "url": "http://example.com/logo.png"}
DOC = {"title": "Provider", "url": "http://example.com/", "logo": LOGO}


def test_from_json_without_logo():
    attribution = Attribution.from_json({"title": "Provider", "url": "http://example.com/"})
    assert attribution.title == "Provider"
    assert attribution.href == "http://example.com/"
    assert attribution.logo is None


def test_from_json_with_logo():
    attribution = Attribution.from_json(DOC)
    assert attribution.logo == Logo(100, 50, "image/png", "http://example.com/logo.png")


def test_logo_not_an_object_is_ignored():
    attribution = Attribution.from_json(dict(DOC, logo="x"))
    assert attribution.logo is None


@pytest.mark.parametrize(
    "doc, field",
    [
        ({"url": "http://example.com/"}, "title"),
        ({"title": "Provider"}, "url"),
        ({"title": "Provider", "url": "u", "logo": {}}, "logo.width"),
        ({"title": "Provider", "url": "u", "logo": {"width": 1}}, "logo.height"),
        ({"title": "Provider", "url": "u", "logo": {"width": 1, "height": 2}}, "logo.format"),
        (
            {"title": "Provider", "url": "u", "logo": {"width": 1, "height": 2, "format": "image/png"}},
            "logo.url",
        ),
    ],
)
def test_missing_fields(doc, field):
    with pytest.raises(MissingFieldError) as info:
        Attribution.from_json(doc)
    assert info.value.field == field


def test_boolean_width_is_not_a_number():
    with pytest.raises(MissingFieldError) as info:
        Attribution.from_json(dict(DOC, logo=dict(LOGO, width=True)))
    assert info.value.field == "logo.width"


def test_non_object_doc():
    with pytest.raises(MissingFieldError) as info:
        Attribution.from_json("Provider")
    assert info.value.field == "title"


def test_add_node_wms_without_logo():
    root = ET.Element("Layer")
    Attribution.from_json({"title": "Provider", "url": "http://example.com/"}).add_node_wms(root)
    node = root.find("Attribution")
    assert node.find("Title").text == "Provider"
    resource = node.find("OnlineResource")
    assert resource.get("xlink:href") == "http://example.com/"
    assert resource.get("xlink:type") == "simple"
    assert node.find("LogoURL") is None


def test_add_node_wms_with_logo():
    root = ET.Element("Layer")
    attribution = Attribution.from_json(DOC)
    attribution.add_node_wms(root)
    logo = root.find("Attribution/LogoURL")
    assert logo.get("width") == "100"
    assert logo.get("height") == "50"
    assert logo.find("OnlineResource").get("xlink:href") == attribution.href
    assert logo.find("OnlineResource").get("xlink:type") == "simple"
    assert logo.find("Format").text is None


def test_add_node_tms_with_logo():
    root = ET.Element("TileMap")
    attribution = Attribution.from_json(DOC)
    attribution.add_node_tms(root)
    node = root.find("Attribution")
    assert node.find("Title").text == "Provider"
    logo = node.find("Logo")
    assert logo.get("width") == "100"
    assert logo.get("height") == "50"
    assert logo.get("href") == attribution.href
    assert logo.get("mime-type") == attribution.format


def test_add_node_tms_without_logo():
    root = ET.Element("TileMap")
    Attribution.from_json({"title": "Provider", "url": "http://example.com/"}).add_node_tms(root)
    node = root.find("Attribution")
    assert [child.tag for child in node] == ["Title"]