"""tilejson.backends utility functions."""

import zlib


def _compress_gz_json(body: str) -> bytes:
    gzip_compress = zlib.compressobj(9, zlib.DEFLATED, zlib.MAX_WBITS | 16)

    return gzip_compress.compress(body.encode("utf-8")) + gzip_compress.flush()


def _decompress_gz(gzip_buffer: bytes) -> str:
    return zlib.decompress(gzip_buffer, zlib.MAX_WBITS | 16).decode()
