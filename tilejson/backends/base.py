"""tilejson.backends.base: base Backend class."""

import abc
from typing import Dict, Optional, Union

import attr

from tilejson.model import TileJSON


def _convert_to_tilejson(value: Union[Dict, TileJSON]):
    if value is not None:
        return TileJSON(**dict(value))


@attr.s
class BaseBackend(abc.ABC):
    """Base Class for TileJSON document storage.

    Attributes:
        input (str): document path or url.
        tilejson_def (TileJSON, optional): TileJSON document. Read from `input` when not provided.

    """

    input: str = attr.ib()
    tilejson_def: TileJSON = attr.ib(default=None, converter=_convert_to_tilejson)

    _backend_name: str
    _file_byte_size: Optional[int] = 0

    def __attrs_post_init__(self):
        """Post Init: if not passed in init, try to read from self.input."""
        if self.tilejson_def is None:
            self.tilejson_def = self._read()

    @abc.abstractmethod
    def _read(self) -> TileJSON:
        """Fetch TileJSON document"""

    @abc.abstractmethod
    def write(self, overwrite: bool = True):
        """Upload TileJSON document to backend."""

    def __enter__(self):
        """Support using with Context Managers."""
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Support using with Context Managers."""
        pass
