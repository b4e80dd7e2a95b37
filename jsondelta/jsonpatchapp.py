# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import sys

from .args import ConfigBackedParser, add_generic_args, add_filename_args
from .errors import JSONDeltaError
from .jsondiffapp import check_files_exist
from .log import logger
from .patching import apply_patch
from .utils import read_json, write_json, setup_std_streams


_description = "Apply a JSON patch document to a JSON document."


def main_patch(args):
    """Main handler of patch CLI"""
    if not check_files_exist([args.document, args.patch]):
        return 1

    # The patch is passed on as text, so malformed JSON is reported as an invalid patch
    with io.open(args.patch, encoding="utf8") as f:
        patch = f.read()

    try:
        patched = apply_patch(read_json(args.document), patch)
    except JSONDeltaError as e:
        logger.error("Could not patch %s: %s", args.document, e)
        return 1

    write_json(patched, args.output or sys.stdout, indent=args.indent)
    return 0


def _build_arg_parser(prog='jsondelta-patch'):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help="indentation of the patched document.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
