"""tilejson.codec: TileJSON text <-> TileJSON document."""

from typing import Union

from pydantic import ValidationError

from tilejson.errors import DecodeError
from tilejson.logger import logger
from tilejson.model import TileJSON


def decode(text: Union[str, bytes]) -> TileJSON:
    """Parse TileJSON text.

    Missing fields take their default value and unknown fields are ignored.
    Field types are checked strictly: a string is never coerced to a number
    and a float is never truncated to an integer. Integer literals are
    accepted for float fields.

    Attributes:
        text (str or bytes): JSON object text.

    Returns:
        tilejson (TileJSON): Decoded document.

    Raises:
        DecodeError: If the text is not JSON or a field has the wrong type.

    Examples:
        >>> decode('{"tiles": ["https://tile.server/{z}/{x}/{y}.png"]}')

    """
    logger.debug(f"Decoding {len(text)} bytes of TileJSON")
    try:
        return TileJSON.model_validate_json(text, strict=True)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        locations = ", ".join(
            ".".join(str(loc) for loc in err["loc"]) or "<document>" for err in errors
        )
        raise DecodeError(
            f"Invalid TileJSON ({locations}): {errors[0]['msg']}", errors
        ) from e


def encode(tilejson: TileJSON) -> str:
    """Serialize a TileJSON document to compact JSON text.

    Fields are written in declaration order. Absent optional values and
    empty `grids`/`data` lists are left out. The document is not validated.

    """
    body = tilejson.model_dump_json()
    logger.debug(f"Encoded TileJSON document ({len(body)} bytes)")
    return body
