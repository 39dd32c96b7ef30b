"""tilejson In-Memory backend."""

import attr

from tilejson.backends.base import BaseBackend
from tilejson.model import TileJSON, default_document


@attr.s
class MemoryBackend(BaseBackend):
    """InMemory Backend Adapter

    Examples:
        >>> with MemoryBackend(tilejson_def=doc) as backend:
                backend.tilejson_def.tiles
    """

    # We put `input` outside the init method
    input: str = attr.ib(init=False, default=":memory:")

    _backend_name = "MEM"

    def write(self, overwrite: bool = True):
        """Write TileJSON document."""
        pass

    def _read(self) -> TileJSON:
        """Nothing to read, start from an empty document."""
        return default_document()
