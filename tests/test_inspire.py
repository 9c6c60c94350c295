from dataclasses import dataclass, field
from typing import Optional

import pytest

from tilesrv.inspire import (
    INSPIRE_DEFAULT_STYLE,
    LAYER_NAMES,
    is_inspire_layer_name,
    is_inspire_wms,
    is_inspire_wmts,
)


@dataclass
class FakeStyle:
    identifier: str


@dataclass
class FakeLayer:
    id: str = "CP.CadastralParcel"
    keywords: list = field(default_factory=lambda: ["parcel"])
    metadata: list = field(default_factory=lambda: ["md"])
    default_style: Optional[FakeStyle] = field(
        default_factory=lambda: FakeStyle("inspire_common:DEFAULT")
    )


@pytest.mark.parametrize(
    "name",
    [
        "AD.Address",
        "BU.Building",
        "US. OilGasChemicalsNetwork",
        "GE.VspSurevey",
        "GE.Geophysics.3DSeismics",
        "HY.PhysicalWaters.Wetland",
        "TN.RoadTransportNetwork.RoadLink",
        "SO.ZincContent",
        "SO.ZincContentCoverage",
        "SO.SoilBody",
        "US.WaterNetwork",
    ],
)
def test_known_names(name):
    assert is_inspire_layer_name(name) is True


@pytest.mark.parametrize(
    "name",
    [
        "",
        "ad.address",
        "AD.Address ",
        "US.OilGasChemicalsNetwork",
        "ORTHO",
        "SO.SoilBodyCoverage",
        "TN.RoadLink",
    ],
)
def test_unknown_names(name):
    assert is_inspire_layer_name(name) is False


def test_every_listed_name_is_accepted():
    assert all(is_inspire_layer_name(n) for n in LAYER_NAMES)


def test_layer_built_with_default_style_constant_is_compliant():
    layer = FakeLayer(default_style=FakeStyle(INSPIRE_DEFAULT_STYLE))
    assert is_inspire_wms(layer) is True
    assert is_inspire_wmts(layer) is True


def test_compliant_layer():
    layer = FakeLayer()
    assert is_inspire_wms(layer) is True
    assert is_inspire_wmts(layer) is True


def test_bad_name():
    layer = FakeLayer(id="MY_LAYER")
    assert is_inspire_wms(layer) is False
    assert is_inspire_wmts(layer) is False


def test_no_keywords():
    layer = FakeLayer(keywords=[])
    assert is_inspire_wms(layer) is False
    assert is_inspire_wmts(layer) is False


def test_no_metadata_only_affects_wmts():
    layer = FakeLayer(metadata=[])
    assert is_inspire_wms(layer) is True
    assert is_inspire_wmts(layer) is False


def test_wrong_default_style():
    layer = FakeLayer(default_style=FakeStyle("normal"))
    assert is_inspire_wms(layer) is False
    assert is_inspire_wmts(layer) is False


def test_missing_default_style():
    layer = FakeLayer(default_style=None)
    assert is_inspire_wms(layer) is False
    assert is_inspire_wmts(layer) is False