from bin2c.errors import ArgumentError, IoReadError
from PIL import Image
import io
import re


def parsesize(s):
    m = re.fullmatch(r"(\d+)(?:[xX](\d+))?", s)
    if not m:
        raise ArgumentError(f"'{s}' is not a size like 128x128 or 128")
    w = int(m[1])
    h = int(m[2]) if m[2] else w
    if not (w and h):
        raise ArgumentError(f"size '{s}' must not be zero")
    return (w, h)


def pixelsof(infp, size):
    """Decodes an image and returns its RGBA pixels, resized, as a stream."""
    try:
        data = (
            Image.open(infp).resize(size=size).convert("RGBA").tobytes()
        )
    except (OSError, Image.DecompressionBombError) as e:
        raise IoReadError(getattr(infp, "name", repr(infp)), e) from e
    return io.BytesIO(data)
