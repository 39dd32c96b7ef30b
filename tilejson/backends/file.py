"""tilejson File backend."""

import pathlib

import attr
from cachetools import TTLCache, cached
from cachetools.keys import hashkey

from tilejson.backends.base import BaseBackend
from tilejson.backends.utils import _compress_gz_json, _decompress_gz
from tilejson.cache import cache_config
from tilejson.codec import decode, encode
from tilejson.errors import _FILE_EXCEPTIONS, TileJSONError, TileJSONExistsError
from tilejson.logger import logger
from tilejson.model import TileJSON

_file_cache: TTLCache = TTLCache(maxsize=cache_config.maxsize, ttl=cache_config.ttl)


@attr.s
class FileBackend(BaseBackend):
    """Local File Backend Adapter"""

    _backend_name = "File"

    def write(self, overwrite: bool = False):
        """Write TileJSON document to a file."""
        if not overwrite and pathlib.Path(self.input).exists():
            raise TileJSONExistsError(
                "TileJSON file already exist, use `overwrite=True`."
            )

        body = encode(self.tilejson_def)
        logger.debug(f"Writing TileJSON document to {self.input}")
        try:
            with open(self.input, "wb") as f:
                if self.input.endswith(".gz"):
                    f.write(_compress_gz_json(body))
                else:
                    f.write(body.encode("utf-8"))
        except Exception as e:
            exc = _FILE_EXCEPTIONS.get(type(e), TileJSONError)
            raise exc(str(e)) from e

        _file_cache.pop(hashkey(self.input), None)

    @cached(  # type: ignore
        _file_cache,
        key=lambda self: hashkey(self.input),
    )
    def _fetch(self) -> bytes:  # type: ignore
        """Get TileJSON file content."""
        logger.debug(f"Reading TileJSON document from {self.input}")
        try:
            with open(self.input, "rb") as f:
                body = f.read()
        except Exception as e:
            exc = _FILE_EXCEPTIONS.get(type(e), TileJSONError)
            raise exc(str(e)) from e

        return body

    def _read(self) -> TileJSON:
        """Get TileJSON document."""
        body = self._fetch()
        self._file_byte_size = len(body)

        if self.input.endswith(".gz"):
            body = _decompress_gz(body)

        return decode(body)
