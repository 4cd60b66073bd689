"""PKCS#5 block padding: each pad byte holds the number of bytes added."""

from .errors import PaddingError

_MAX_BLOCK_SIZE = 16


def _check_block_size(block_size: int) -> None:
    if not 1 <= block_size <= _MAX_BLOCK_SIZE:
        raise ValueError("block size is too big for PKCS#5")


def pad(data: bytes, block_size: int = 16) -> bytes:
    """Pad ``data`` to a whole number of blocks; a full block is added when aligned."""
    _check_block_size(block_size)
    count = block_size - len(data) % block_size
    return bytes(data) + bytes([count]) * count


def unpad(data: bytes, block_size: int = 16) -> bytes:
    """Strip PKCS#5 padding, raising PaddingError when it is malformed."""
    _check_block_size(block_size)
    if not data or len(data) % block_size:
        raise PaddingError()
    count = data[-1]
    if count == 0 or count > block_size:
        raise PaddingError()
    if any(byte != count for byte in data[-count:]):
        raise PaddingError()
    return bytes(data[:-count])