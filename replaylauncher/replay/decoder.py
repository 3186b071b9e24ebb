import base64
import binascii
import zlib

from replaylauncher.errors import CorruptReplayError
from replaylauncher.logging import logger


# The stream starts with the uncompressed size, written the way Qt's qCompress
# does it. We don't need it, zlib finds the end by itself.
PREFIX_SIZE = 4


def decode_base64(encoded):
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CorruptReplayError(
            "Replay corrupt - couldn't decode base64") from e


def strip_prefix(data):
    if len(data) < PREFIX_SIZE:
        raise CorruptReplayError(
            f"Replay corrupt - stream has {len(data)} bytes, "
            f"expected at least {PREFIX_SIZE}")
    return data[PREFIX_SIZE:]


def inflate(data):
    decompressor = zlib.decompressobj()
    try:
        raw = decompressor.decompress(data)
        raw += decompressor.flush()
    except zlib.error as e:
        raise CorruptReplayError(
            "Replay corrupt - couldn't decompress replay stream") from e
    if not decompressor.eof:
        raise CorruptReplayError(
            "Replay corrupt - compressed replay stream is truncated")
    return raw


def decode(encoded):
    """Turn the second line of a legacy replay into native replay bytes.

    Parameters
    ----------
    encoded: base64 text (str or bytes) of a 4-byte prefix followed by a zlib
        stream.
    """
    zipped = strip_prefix(decode_base64(encoded))
    raw = inflate(zipped)
    logger.debug(f"Inflated {len(zipped)} compressed bytes into {len(raw)}")
    return raw
