from bin2c.config import ELEMENT_TYPE, HEADER_EXT, SOURCE_EXT
from bin2c.errors import (
    CountOverflow,
    IoFlushError,
    IoOpenError,
    IoReadError,
    IoWriteError,
    error,
)
from bin2c.objectify import objectify
from bin2c.pixels import pixelsof
from bin2c.symbols import build_macro, build_symbol
from bin2c.utils import replace_extension, stem_of
from bisect import bisect_left
from contextlib import contextmanager, suppress
from enum import Enum
from os import fsencode
from os.path import realpath, samefile
from types import SimpleNamespace

verbose = False


class Scope(Enum):
    LOCAL = "local"
    GLOBAL = "global"


# Largest count each literal form is guaranteed to hold: the minimum ranges
# of int, long and long long.
_lengthforms = [
    (2**15 - 1, "%d"),
    (2**31 - 1, "%dl"),
    (2**63 - 1, "%dll"),
]
_lengthlimits = [limit for limit, _ in _lengthforms]


def length_literal(count):
    i = bisect_left(_lengthlimits, count)
    if (count < 0) or (i == len(_lengthforms)):
        raise CountOverflow(f"{count} elements do not fit a long long")
    return _lengthforms[i][1] % count


def emit(fp, *args, end="\n"):
    try:
        fp.write(" ".join(args) + end)
    except (OSError, UnicodeError) as e:
        raise IoWriteError(fp.name, e) from e


def _printable(path):
    return fsencode(path).decode(errors="backslashreplace")


def _samefile(a, b):
    try:
        return samefile(a, b)
    except OSError:
        return realpath(a) == realpath(b)


@contextmanager
def _closing(fp, path, exception):
    try:
        yield fp
    except BaseException:
        # The first failure is the one reported.
        with suppress(OSError):
            fp.close()
        raise

    try:
        fp.flush()
    except OSError as e:
        with suppress(OSError):
            fp.close()
        raise exception(path, e) from e
    try:
        fp.close()
    except OSError as e:
        raise exception(path, e) from e


@contextmanager
def artifact(path):
    if verbose:
        print("write", _printable(path))
    try:
        fp = open(
            path,
            "wt",
            encoding="utf-8",
            errors="surrogateescape",
            newline="\n",
        )
    except OSError as e:
        raise IoOpenError(path, e) from e

    with _closing(fp, path, IoFlushError):
        yield fp


@contextmanager
def _source(inpath, size):
    try:
        fp = open(inpath, "rb")
    except OSError as e:
        raise IoOpenError(inpath, e) from e

    with _closing(fp, inpath, IoReadError):
        if size:
            yield pixelsof(fp, size)
        else:
            yield fp


def _definition(fp, scope, core, symbol, infp):
    if scope is Scope.GLOBAL:
        emit(fp, f'#include "{core}.{HEADER_EXT}"\n')
        qualifiers = []
    else:
        qualifiers = ["static"]

    emit(fp, *qualifiers, ELEMENT_TYPE, f"{symbol}[] =", end=" ")
    n = objectify(infp, fp)
    emit(fp, ";", end="\n")
    return n


def _declaration(fp, guard, symbol, lengthmacro, count):
    emit(fp, f"#if !defined ( __{guard}_H__ )\n")
    emit(fp, f"#define __{guard}_H__\n")
    emit(fp, "extern", ELEMENT_TYPE, f"{symbol}[];\n")
    emit(fp, f"#define {lengthmacro}  {length_literal(count)}\n")
    emit(fp, "#endif")


def run(inpath, prefix=None, suffix=None, length_suffix=None, size=None):
    """Writes the artifacts for one input file.

    With no length_suffix the array is static and lands alone in a .h file.
    Otherwise the definition goes to a .c file and a .h file declares it along
    with a macro, named from prefix + stem + length_suffix, holding its
    element count. Artifacts already written when a later step fails are left
    on disk.
    """
    scope = Scope.LOCAL if length_suffix is None else Scope.GLOBAL

    core = stem_of(inpath)
    if not core:
        error(f"'{inpath}' does not name a file")

    # Derive every name before anything is written.
    symbol = build_symbol(prefix, core, suffix)
    headerpath = replace_extension(inpath, HEADER_EXT)
    if scope is Scope.GLOBAL:
        guard = build_macro(None, core, None)
        lengthmacro = build_macro(prefix, core, length_suffix)
        sourcepath = replace_extension(inpath, SOURCE_EXT)
        outputs = [sourcepath, headerpath]
    else:
        outputs = [headerpath]

    for path in outputs:
        if _samefile(inpath, path):
            error(f"'{path}' would overwrite the input file")

    with _source(inpath, size) as infp:
        with artifact(outputs[0]) as fp:
            count = _definition(fp, scope, core, symbol, infp)
    if verbose:
        print(f"{count} elements in {_printable(symbol)}")

    if scope is Scope.GLOBAL:
        with artifact(headerpath) as fp:
            _declaration(fp, guard, symbol, lengthmacro, count)

    return SimpleNamespace(
        scope=scope, symbol=symbol, outputs=outputs, count=count
    )
