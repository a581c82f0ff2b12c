from bin2c.config import PATH_MAX
from bin2c.errors import PathTooLong
from os.path import splitext
import os

_separators = [s for s in (os.sep, os.altsep) if s]


def _checklength(path):
    if len(path) + 1 > PATH_MAX:
        raise PathTooLong(
            f"path of {len(path)} characters is longer than {PATH_MAX - 1}"
        )
    return path


def find_base_name(path):
    i = max(path.rfind(s) for s in _separators)
    return path[i + 1 :]


def split_extension(path):
    """Splits a path into (stem, extension).

    The extension is None when the base name has no '.', and "" when it ends
    in one. Leading dots belong to the name, so ".bin" has no extension.
    """
    stem, ext = splitext(path)
    if not ext:
        return (stem, None)
    return (stem, ext[1:])


def replace_extension(path, new_ext):
    stem, _ = split_extension(path)
    return _checklength(f"{stem}.{new_ext}")


def stem_of(path):
    return split_extension(find_base_name(path))[0]
