"""Command line surface for houdini."""

import argparse
import re
import sys
from typing import List, Optional

from pydantic import BaseModel

from .errors import UsageError


DESCRIPTION = "Securely erase a disk on macOS with diskutil secureErase, logging the run."

EPILOG = """\
erase levels:
  0  Single-pass zero fill erase
  1  Single-pass random fill erase
  2  Seven-pass erase (zero fills, all-ones fills, final random fill)
  3  Gutmann algorithm 35-pass erase
  4  Three-pass erase (two random fills, final zero fill)

Missing --disk and --level values are prompted for interactively.
The deprecated -o option is an alias of --skip.
"""


class CliOptions(BaseModel):
    """Options as given on the command line, before any prompting."""
    pretend: bool = False
    skip: bool = False
    nolog: bool = False
    disk: Optional[str] = None
    level: Optional[str] = None
    label: Optional[str] = None
    model: Optional[str] = None
    serial: Optional[str] = None


def _mark_seen(parser, namespace, dest: str, option_string: Optional[str]) -> None:
    seen = getattr(namespace, "_seen", None)
    if seen is None:
        seen = set()
        setattr(namespace, "_seen", seen)
    if dest in seen:
        parser.error(f"Option {option_string} specified more than once")
    seen.add(dest)


class StoreOnce(argparse.Action):
    """Store an option value, rejecting a second occurrence."""

    def __call__(self, parser, namespace, values, option_string=None):
        _mark_seen(parser, namespace, self.dest, option_string)
        setattr(namespace, self.dest, values)


class FlagOnce(argparse.Action):
    """Boolean switch that may only be given once."""

    def __init__(self, option_strings, dest, default=False, required=False, help=None):
        super().__init__(option_strings=option_strings, dest=dest, nargs=0,
                         default=default, required=required, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        _mark_seen(parser, namespace, self.dest, option_string)
        if option_string == "-o":
            print("⚠️  -o is deprecated, use -s/--skip instead")
        setattr(namespace, self.dest, True)


class HoudiniArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    _MISSING_VALUE = re.compile(r"argument (\S+): expected one argument")

    def error(self, message):
        match = self._MISSING_VALUE.search(message)
        if match:
            message = f"Missing value for option {match.group(1)}"
        raise UsageError(message)


def build_parser() -> HoudiniArgumentParser:
    parser = HoudiniArgumentParser(
        prog="houdini",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-p", "--pretend", action=FlagOnce,
                        help="simulate the unmount and erase, change nothing")
    parser.add_argument("-s", "--skip", "-o", dest="skip", action=FlagOnce,
                        help="skip the confirmation prompt")
    parser.add_argument("-nl", "--nolog", action=FlagOnce,
                        help="do not write a log file")
    parser.add_argument("-d", "--disk", action=StoreOnce, metavar="DEVICE",
                        help="device to erase, e.g. /dev/disk4")
    parser.add_argument("-lv", "--level", action=StoreOnce, metavar="LEVEL",
                        help="erase level 0 - 4")
    parser.add_argument("-la", "--label", action=StoreOnce,
                        help="label shown in the summary and log file name")
    parser.add_argument("-m", "--model", action=StoreOnce,
                        help="override the detected disk model")
    parser.add_argument("-sn", "--serial", action=StoreOnce,
                        help="override the detected serial number")
    return parser


def _join_option_values(parser: argparse.ArgumentParser, argv: List[str]) -> List[str]:
    """Attach each value to its option as ``--opt=value``.

    argparse refuses values that start with '-', so ``--label -spare`` would
    otherwise be reported as a missing value. An option given as the last
    argument is left alone and still fails as incomplete.
    """
    long_names = {}
    for action in parser._actions:
        if isinstance(action, StoreOnce):
            long_name = next(o for o in action.option_strings if o.startswith("--"))
            for option_string in action.option_strings:
                long_names[option_string] = long_name

    joined = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--":
            joined.extend(argv[i:])
            break
        if token in long_names and i + 1 < len(argv):
            joined.append(f"{long_names[token]}={argv[i + 1]}")
            i += 2
            continue
        joined.append(token)
        i += 1
    return joined


def parse_args(argv: Optional[List[str]] = None) -> CliOptions:
    """Parse command line arguments into CliOptions.

    Raises UsageError for unknown, duplicate or incomplete options. ``-h``
    prints help and exits through SystemExit as argparse does.
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_join_option_values(parser, list(argv)))
    values = {k: v for k, v in vars(args).items() if not k.startswith("_")}
    return CliOptions(**values)
