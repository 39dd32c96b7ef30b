"""tilejson: TileJSON document model and codec."""

from tilejson.codec import decode, encode  # noqa
from tilejson.errors import DecodeError  # noqa
from tilejson.model import DEFAULTS, Scheme, TileJSON, default_document  # noqa

__version__ = "0.1.0"
