"""tilejson.backends."""

from typing import Any
from urllib.parse import urlparse

from tilejson.backends.base import BaseBackend
from tilejson.backends.file import FileBackend
from tilejson.backends.memory import MemoryBackend
from tilejson.backends.web import HttpBackend


def TileJSONBackend(input: str, *args: Any, **kwargs: Any) -> BaseBackend:
    """Select TileJSON backend for input."""
    parsed = urlparse(input)

    if not input or input == ":memory:":
        return MemoryBackend(*args, **kwargs)

    # https://{hostname}/{path}
    elif parsed.scheme in ["https", "http"]:
        return HttpBackend(input, *args, **kwargs)

    # file:///{path}
    elif parsed.scheme == "file":
        return FileBackend(parsed.path, *args, **kwargs)

    # Invalid Scheme
    elif parsed.scheme:
        raise ValueError(f"'{parsed.scheme}' is not supported")

    # fallback to FileBackend
    else:
        return FileBackend(input, *args, **kwargs)
