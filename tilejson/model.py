"""tilejson.model TileJSON document model."""

import enum
from copy import deepcopy
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer


class Scheme(str, enum.Enum):
    """Direction of the tile Y coordinate."""

    XYZ = "xyz"
    TMS = "tms"


# Values used for any field missing from a decoded document or from the
# constructor call.
DEFAULTS: Dict[str, Any] = {
    "tilejson": "2.2.0",
    "name": None,
    "description": None,
    "version": "1.0.0",
    "attribution": None,
    "template": None,
    "legend": None,
    "scheme": Scheme.XYZ,
    "tiles": [],
    "grids": [],
    "data": [],
    "minzoom": 0,
    "maxzoom": 30,
    "bounds": [-180.0, -90.0, 180.0, 90.0],
    "center": None,
}

# Emission policy, any field not listed here is always written.
OMIT_WHEN_NONE = frozenset(
    {"name", "description", "attribution", "template", "legend", "center"}
)
OMIT_WHEN_EMPTY = frozenset({"grids", "data"})


def _default(field: str) -> Callable[[], Any]:
    """Return a factory producing a fresh copy of the field default."""
    return lambda: deepcopy(DEFAULTS[field])


class TileJSON(BaseModel, validate_assignment=True, ser_json_inf_nan="constants"):
    """TileJSON model.

    Based on https://github.com/mapbox/tilejson-spec/tree/master/2.2.0

    Only the structure is checked. Zoom ranges, `minzoom <= maxzoom`,
    bounds/center arity and a non-empty `tiles` list are left to the caller.
    Zoom levels must still fit an unsigned byte (0 to 255).

    Non-finite `bounds`/`center` values are written as the `NaN`, `Infinity`
    and `-Infinity` constants, never as `null`.

    """

    tilejson: str = Field(default_factory=_default("tilejson"))
    name: Optional[str] = Field(default_factory=_default("name"))
    description: Optional[str] = Field(default_factory=_default("description"))
    version: str = Field(default_factory=_default("version"))
    attribution: Optional[str] = Field(default_factory=_default("attribution"))
    template: Optional[str] = Field(default_factory=_default("template"))
    legend: Optional[str] = Field(default_factory=_default("legend"))
    scheme: Scheme = Field(default_factory=_default("scheme"))
    tiles: List[str] = Field(default_factory=_default("tiles"))
    grids: List[str] = Field(default_factory=_default("grids"))
    data: List[str] = Field(default_factory=_default("data"))
    minzoom: int = Field(default_factory=_default("minzoom"), ge=0, le=255)
    maxzoom: int = Field(default_factory=_default("maxzoom"), ge=0, le=255)
    bounds: List[float] = Field(default_factory=_default("bounds"))
    center: Optional[List[float]] = Field(default_factory=_default("center"))

    @model_serializer(mode="wrap")
    def apply_emission_policy(
        self, handler: SerializerFunctionWrapHandler
    ) -> Dict[str, Any]:
        """Drop absent optional values and empty grids/data."""
        serialized = handler(self)
        return {
            key: value
            for key, value in serialized.items()
            if not (key in OMIT_WHEN_NONE and value is None)
            and not (key in OMIT_WHEN_EMPTY and not value)
        }


def default_document() -> TileJSON:
    """Return a TileJSON document holding only default values."""
    return TileJSON()
