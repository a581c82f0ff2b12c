from bin2c import emit
from bin2c.config import VERSION
from bin2c.errors import ArgumentError, Bin2cException
from bin2c.pixels import parsesize
import argparse
import sys

_prologue = """\
Binary file to C language file converter (%(prog)s), version {version}.

This program extracts data in unaltered binary form from the given input file
and outputs that data as an array of unsigned characters ("unsigned char
const", specifically) into C language file(s)."""

_inputhelp = """\
the source of binary data. The output file(s) have the input file's path and
name with the ".h" extension{globalnote}. The input file's name, without its
extension, is the core of the name of the array."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


class _Once(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            raise ArgumentError(f"option {option_string} given more than once")
        setattr(namespace, self.dest, values)


def _option(parser, letter, dest, metavar, help):
    parser.add_argument(
        "-" + letter,
        "-" + letter.upper(),
        dest=dest,
        metavar=metavar,
        action=_Once,
        help=help,
    )


def makeparser(prog, allowglobal):
    parser = _Parser(
        prog=prog,
        description=_prologue.format(version=VERSION),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument(
        "input",
        metavar="<input_file>",
        help=_inputhelp.format(
            globalnote=' and, when "-g" is present, the ".c" extension'
            if allowglobal
            else ""
        ),
    )
    _option(
        parser,
        "p",
        "prefix",
        "<array_prefix>",
        'prepends "array_prefix" to the name of the array',
    )
    _option(
        parser,
        "s",
        "suffix",
        "<array_suffix>",
        'appends "array_suffix" to the name of the array',
    )
    if allowglobal:
        _option(
            parser,
            "g",
            "length_suffix",
            "<length_suffix>",
            "gives the name global scope and creates both header and source"
            " files, plus a capitalised macro named from array_prefix, the"
            ' input file\'s name and "length_suffix" for the number of'
            " elements",
        )
    _option(
        parser,
        "i",
        "size",
        "<size>",
        "decodes the input as an image and embeds its RGBA pixels, resized"
        " to <size> (WxH, or N for a square)",
    )
    parser.add_argument(
        "-v",
        "-V",
        dest="verbose",
        action="store_true",
        help="reports each file written",
    )
    return parser


def _main(argv, prog, allowglobal):
    parser = makeparser(prog, allowglobal)
    try:
        args = parser.parse_args(argv)
        size = parsesize(args.size) if args.size is not None else None
    except ArgumentError as e:
        print(f"ERROR: {e}\n", file=sys.stderr)
        parser.print_help(file=sys.stderr)
        return 2

    emit.verbose = args.verbose
    try:
        emit.run(
            args.input,
            prefix=args.prefix,
            suffix=args.suffix,
            length_suffix=getattr(args, "length_suffix", None),
            size=size,
        )
    except Bin2cException as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


def bin2h(argv=None):
    return _main(argv, "bin2h", allowglobal=False)


def bin2c(argv=None):
    return _main(argv, "bin2c", allowglobal=True)
