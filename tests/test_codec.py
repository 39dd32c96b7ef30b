"""test tilejson.codec."""

import json
import os

import pytest

from tilejson import DecodeError, Scheme, TileJSON, decode, default_document, encode
from tilejson.errors import TileJSONError

osm_json = os.path.join(os.path.dirname(__file__), "fixtures", "osm.json")
invalid_json = os.path.join(os.path.dirname(__file__), "fixtures", "invalid.json")

default_str = '{"tilejson":"2.2.0","version":"1.0.0","scheme":"xyz","tiles":[],"minzoom":0,"maxzoom":30,"bounds":[-180.0,-90.0,180.0,90.0]}'

osm_str = '{"tilejson":"1.0.0","name":"OpenStreetMap","description":"A free editable map of the whole world.","version":"1.0.0","attribution":"(c) OpenStreetMap contributors, CC-BY-SA","scheme":"xyz","tiles":["https://a.tile.openstreetmap.org/{z}/{x}/{y}.png","https://b.tile.openstreetmap.org/{z}/{x}/{y}.png","https://c.tile.openstreetmap.org/{z}/{x}/{y}.png"],"minzoom":0,"maxzoom":18,"bounds":[-180.0,-85.0,180.0,85.0]}'


def osm_document() -> TileJSON:
    tj = default_document()
    tj.tilejson = "1.0.0"
    tj.name = "OpenStreetMap"
    tj.description = "A free editable map of the whole world."
    tj.attribution = "(c) OpenStreetMap contributors, CC-BY-SA"
    tj.tiles = [
        "https://a.tile.openstreetmap.org/{z}/{x}/{y}.png",
        "https://b.tile.openstreetmap.org/{z}/{x}/{y}.png",
        "https://c.tile.openstreetmap.org/{z}/{x}/{y}.png",
    ]
    tj.maxzoom = 18
    tj.bounds = [-180, -85, 180, 85]
    return tj


def test_encode_default():
    """Default document encodes to the expected bytes."""
    assert encode(default_document()) == default_str


def test_decode_default():
    """Should work as expected."""
    assert decode(default_str) == default_document()
    assert decode(encode(default_document())) == default_document()


def test_decode_empty_object():
    """Missing fields, required ones included, take their default."""
    assert decode("{}") == default_document()
    assert decode(b"{}") == default_document()
    assert decode('{"name": "tiles"}') == TileJSON(name="tiles")


def test_encode_example():
    """Populated document keeps field order."""
    assert encode(osm_document()) == osm_str


def test_decode_example():
    """Should work as expected."""
    with open(osm_json, "r") as f:
        tj = decode(f.read())

    assert tj == osm_document()
    assert decode(osm_str) == osm_document()
    assert encode(tj) == osm_str


def test_numeric_literals():
    """Integer and float literals decode to the same floats."""
    ints = decode('{"bounds": [-180, -85, 180, 85], "center": [0, 0, 2]}')
    floats = decode(
        '{"bounds": [-180.0, -85.0, 180.0, 85.0], "center": [0.0, 0.0, 2.0]}'
    )
    assert ints == floats
    assert all(isinstance(v, float) for v in ints.bounds)
    assert all(isinstance(v, float) for v in ints.center)


def test_omit_empty_lists():
    """grids and data are only written when not empty."""
    body = json.loads(encode(TileJSON(grids=[], data=[])))
    assert "grids" not in body
    assert "data" not in body
    assert body["tiles"] == []

    tj = TileJSON(
        grids=["https://grid.server/{z}/{x}/{y}.json"],
        data=["https://data.server/data.geojson"],
    )
    body = json.loads(encode(tj))
    assert body["grids"] == ["https://grid.server/{z}/{x}/{y}.json"]
    assert body["data"] == ["https://data.server/data.geojson"]
    assert list(body) == [
        "tilejson",
        "version",
        "scheme",
        "tiles",
        "grids",
        "data",
        "minzoom",
        "maxzoom",
        "bounds",
    ]


def test_omit_absent_optionals():
    """Absent optional values are never written as null."""
    text = encode(TileJSON())
    assert "null" not in text
    for field in ["name", "description", "attribution", "template", "legend", "center"]:
        assert f'"{field}"' not in text

    assert decode('{"name": null, "center": null}') == default_document()


def test_full_document():
    """Every field survives a round trip, in declaration order."""
    tj = TileJSON(
        tilejson="2.2.0",
        name="compositing",
        description="Combined base and overlay tiles",
        version="1.2.3",
        attribution="<a href='https://example.com'>Example</a>",
        template="{{#__teaser__}}{{NAME}}{{/__teaser__}}",
        legend="Dangerous zones are red, safe zones are green",
        scheme=Scheme.TMS,
        tiles=["https://tile.server/{z}/{x}/{y}.png"],
        grids=["https://tile.server/{z}/{x}/{y}.grid.json"],
        data=["https://tile.server/data.geojson"],
        minzoom=2,
        maxzoom=14,
        bounds=[-10.5, 35.25, 5, 45],
        center=[-3.7, 40.4, 6],
    )
    text = encode(tj)
    assert list(json.loads(text)) == list(TileJSON.model_fields)
    assert '"scheme":"tms"' in text
    assert '"center":[-3.7,40.4,6.0]' in text
    assert decode(text) == tj


def test_unicode_text():
    """Non-ASCII text is written as is."""
    tj = TileJSON(name="Zürich Straßenkarte")
    text = encode(tj)
    assert '"name":"Zürich Straßenkarte"' in text
    assert decode(text) == tj


def test_encode_inconsistent_document():
    """Encoding never checks the document."""
    tj = TileJSON(minzoom=12, maxzoom=3, bounds=[1, 2, 3])
    text = encode(tj)
    assert '"minzoom":12,"maxzoom":3,"bounds":[1.0,2.0,3.0]' in text
    assert decode(text) == tj


def test_unknown_fields():
    """Unknown fields are ignored."""
    tj = decode('{"tiles": ["https://tile.server/{z}/{x}/{y}.png"], "vector_layers": [], "fillzoom": 3}')
    assert tj == TileJSON(tiles=["https://tile.server/{z}/{x}/{y}.png"])
    assert "vector_layers" not in encode(tj)


@pytest.mark.parametrize(
    "text",
    [
        "{",
        "not json",
        "",
        '{"tiles": ["a",]}',
        "[]",
        '"tilejson"',
        '{"minzoom": "0"}',
        '{"minzoom": "abc"}',
        '{"maxzoom": 18.5}',
        '{"minzoom": true}',
        '{"minzoom": -1}',
        '{"maxzoom": 256}',
        '{"tiles": "https://tile.server/{z}/{x}/{y}.png"}',
        '{"tiles": [1, 2]}',
        '{"tiles": null}',
        '{"version": null}',
        '{"name": 1}',
        '{"scheme": "abc"}',
        '{"scheme": "XYZ"}',
        '{"bounds": ["-180", -90, 180, 90]}',
        '{"center": "0,0,2"}',
    ],
)
def test_decode_error(text):
    """Invalid JSON or wrong field types raise DecodeError."""
    with pytest.raises(DecodeError):
        decode(text)


def test_decode_error_details():
    """DecodeError reports the failing fields."""
    with open(invalid_json, "r") as f:
        body = f.read()

    with pytest.raises(DecodeError) as excinfo:
        decode(body)

    assert isinstance(excinfo.value, TileJSONError)
    assert "minzoom" in str(excinfo.value)
    assert [err["loc"] for err in excinfo.value.errors] == [("minzoom",)]
    assert excinfo.value.__cause__ is not None


def test_zoom_byte_range():
    """Zooms outside 0-30 decode, zooms outside an unsigned byte do not."""
    tj = decode('{"minzoom": 31, "maxzoom": 255}')
    assert tj.minzoom == 31
    assert tj.maxzoom == 255

    with pytest.raises(DecodeError) as excinfo:
        decode('{"minzoom": -1, "maxzoom": 300}')
    assert [err["loc"] for err in excinfo.value.errors] == [("minzoom",), ("maxzoom",)]


def test_non_finite_numbers():
    """Infinite bounds are written as constants and read back."""
    tj = TileJSON(bounds=[float("-inf"), -90, float("inf"), 90])
    text = encode(tj)
    assert "null" not in text
    assert '"bounds":[-Infinity,-90.0,Infinity,90.0]' in text
    assert decode(text) == tj
