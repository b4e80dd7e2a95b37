# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, diff_options_from_args, prettyprint_config_from_args,
    )
from .diffing import diff
from .generating import generate_patch
from .log import logger
from .prettyprint import pretty_print_json_diff
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Compute the difference between two JSON documents."


class _PrintWriter:
    """File-like object writing through print().

    Output captured with pytest's capsys only sees print() calls.
    """
    def write(self, text):
        print(text, end="")


def check_files_exist(filenames):
    """Report the first filename that is missing and not the null file.

    Returns True if all files can be read.
    """
    for fn in filenames:
        if fn != EXPLICIT_MISSING_FILE and not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return False
    return True


def main_diff(args):
    """Main handler of diff CLI"""
    old_filename = args.old
    new_filename = args.new
    if not check_files_exist([old_filename, new_filename]):
        return 1

    try:
        records = diff(
            read_json(old_filename),
            read_json(new_filename),
            diff_options_from_args(args))
    except ValueError as e:
        logger.error("Could not diff %s and %s: %s", old_filename, new_filename, e)
        return 1
    logger.debug("Found %d differences", len(records))

    if args.as_patch:
        result = generate_patch(records, include_type_changes=True)
    else:
        result = records

    if args.out:
        write_json(result, args.out)
    elif args.as_patch:
        write_json(result, _PrintWriter())
    else:
        config = prettyprint_config_from_args(
            args, out=_PrintWriter(), show_same=args.include_same)
        pretty_print_json_diff(old_filename, new_filename, records, config)
    return 0


def _build_arg_parser(prog='jsondelta-diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["old", "new"])

    parser.add_argument(
        '--patch',
        dest='as_patch',
        action='store_true',
        default=False,
        help="output a patch document instead of diff records.")
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff is written to this file as JSON. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
