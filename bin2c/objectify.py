from bin2c.config import CHUNKSIZE, COUNT_MAX
from bin2c.errors import CountOverflow, IoReadError, IoWriteError
from functools import partial


def _name(fp):
    return getattr(fp, "name", repr(fp))


def _chunks(infp, chunksize):
    read = partial(infp.read, chunksize)
    while True:
        try:
            chunk = read()
        except OSError as e:
            raise IoReadError(_name(infp), e) from e
        if not chunk:
            return
        yield chunk


def objectify(infp, outfp, chunksize=CHUNKSIZE, limit=COUNT_MAX):
    """Writes the bytes of infp to outfp as a C array initialiser.

    Bytes are rendered as 0xHH literals between "{ " and " }"; empty input
    gives "{ }". Returns the number of elements written. Raises CountOverflow
    rather than emit more than limit elements.
    """
    n = 0
    separator = " "

    def write(s):
        try:
            outfp.write(s)
        except OSError as e:
            raise IoWriteError(_name(outfp), e) from e

    write("{")
    for chunk in _chunks(infp, chunksize):
        if len(chunk) > limit - n:
            raise CountOverflow(
                f"more than {limit} elements in '{_name(infp)}'"
            )
        write(separator + ", ".join("0x%02X" % c for c in chunk))
        separator = ", "
        n += len(chunk)
    write(" }")
    return n
