from bin2c.errors import CountOverflow, IoReadError, IoWriteError
from bin2c.objectify import objectify
import io
import pytest
import re


def encode(data, **kwargs):
    out = io.StringIO()
    n = objectify(io.BytesIO(data), out, **kwargs)
    return (out.getvalue(), n)


def decode(text):
    m = re.fullmatch(r"\{ ?(.*?) ?\}", text)
    body = m[1]
    if not body:
        return b""
    return bytes(int(t, 16) for t in body.split(", "))


def test_example():
    assert encode(bytes([0x00, 0xFF, 0x41])) == ("{ 0x00, 0xFF, 0x41 }", 3)


def test_empty():
    assert encode(b"") == ("{ }", 0)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x00",
        bytes(range(256)),
        bytes(range(256)) * 9 + b"\x7f",
    ],
)
@pytest.mark.parametrize("chunksize", [512, 1024, 4096])
def test_round_trip(data, chunksize):
    text, n = encode(data, chunksize=chunksize)
    assert n == len(data)
    assert decode(text) == data


def test_literals_are_two_digit_uppercase():
    text, _ = encode(bytes([0x0F, 0xAB, 0x01]))
    assert re.findall(r"0x[0-9A-F]{2}", text) == ["0x0F", "0xAB", "0x01"]


class _Trickle(io.RawIOBase):
    """Returns at most a few bytes per read, like a pipe."""

    def __init__(self, data):
        self.data = data

    def readable(self):
        return True

    def read(self, n=-1):
        chunk, self.data = self.data[:3], self.data[3:]
        return chunk


def test_short_reads_are_not_the_end():
    data = bytes(range(20))
    out = io.StringIO()
    assert objectify(_Trickle(data), out, chunksize=512) == 20
    assert decode(out.getvalue()) == data


def test_count_overflow():
    with pytest.raises(CountOverflow):
        encode(b"\x01" * 600, chunksize=512, limit=599)


def test_count_at_limit():
    assert encode(b"\x01" * 600, chunksize=512, limit=600)[1] == 600


class _Broken(io.RawIOBase):
    name = "broken"

    def readable(self):
        return True

    def writable(self):
        return True

    def read(self, n=-1):
        raise OSError(5, "Input/output error")

    def write(self, b):
        raise OSError(28, "No space left on device")


def test_read_error():
    with pytest.raises(IoReadError) as e:
        objectify(_Broken(), io.StringIO())
    assert "broken" in str(e.value)
    assert isinstance(e.value.__cause__, OSError)


def test_write_error():
    with pytest.raises(IoWriteError):
        objectify(io.BytesIO(b"abc"), _Broken())
