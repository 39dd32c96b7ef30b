"""tilejson HTTP backend.

This file is named web.py instead of http.py because http is a Python standard
lib module
"""

import attr
import httpx
from cachetools import TTLCache, cached
from cachetools.keys import hashkey

from tilejson.backends.base import BaseBackend
from tilejson.backends.utils import _decompress_gz
from tilejson.cache import cache_config
from tilejson.codec import decode
from tilejson.errors import _HTTP_EXCEPTIONS, TileJSONError
from tilejson.logger import logger
from tilejson.model import TileJSON


@attr.s
class HttpBackend(BaseBackend):
    """Http/Https Backend Adapter"""

    # Because the HttpBackend is a Read-Only backend, there is no need for
    # tilejson_def to be in the init method.
    tilejson_def: TileJSON = attr.ib(init=False, default=None)

    _backend_name = "HTTP"

    @cached(  # type: ignore
        TTLCache(maxsize=cache_config.maxsize, ttl=cache_config.ttl),
        key=lambda self: hashkey(self.input),
    )
    def _fetch(self) -> bytes:  # type: ignore
        """Get TileJSON file content."""
        logger.debug(f"Fetching TileJSON document from {self.input}")
        try:
            r = httpx.get(self.input)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            # post-flight errors
            status_code = e.response.status_code
            exc = _HTTP_EXCEPTIONS.get(status_code, TileJSONError)
            raise exc(e.response.content) from e
        except httpx.RequestError as e:
            # pre-flight errors
            raise TileJSONError(str(e)) from e

        return r.content

    def _read(self) -> TileJSON:
        """Get TileJSON document."""
        body = self._fetch()
        self._file_byte_size = len(body)

        if self.input.endswith(".gz"):
            body = _decompress_gz(body)

        return decode(body)

    def write(self, overwrite: bool = True):
        """Write TileJSON document."""
        raise NotImplementedError
