from bin2c.config import PATH_MAX
from bin2c.errors import NameTooLong
import string

_uppercase = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _concatenate(prefix, core, suffix):
    parts = [p for p in (prefix, core, suffix) if p is not None]

    # One character of the budget is reserved for the terminator.
    budget = PATH_MAX - 1
    for p in parts:
        if len(p) > budget:
            raise NameTooLong(
                "name '%s...' is longer than %d characters"
                % ("".join(parts)[:32], PATH_MAX - 1)
            )
        budget -= len(p)

    return "".join(parts)


def build_symbol(prefix, core, suffix):
    return _concatenate(prefix, core, suffix)


def build_macro(prefix, core, suffix):
    return _concatenate(prefix, core, suffix).translate(_uppercase)
