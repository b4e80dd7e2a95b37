# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import sys

from ._version import __version__

# command name -> module holding its main(args)
COMMANDS = {
    "diff": "jsondelta.jsondiffapp",
    "patch": "jsondelta.jsonpatchapp",
}

HELP_MESSAGE_VERBOSE = ("Usage: jsondelta [OPTIONS]\n\n"
                        "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                        "Examples: jsondelta --version\n"
                        "          jsondelta diff -h\n"
                        "          jsondelta diff old.json new.json --patch\n"
                        "          jsondelta patch doc.json patch.json -o out.json\n"
                        % ", ".join(COMMANDS))


def show_all_config():
    "Print every entrypoint's config options and their current values."
    from .args import print_config
    from .config import entrypoint_configurables

    print('All available config options, and their current values:\n',
          file=sys.stderr)
    for entrypoint in entrypoint_configurables:
        print_config(entrypoint)
        print('', file=sys.stderr)


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd, args = args[0], args[1:]
    if cmd in COMMANDS:
        return importlib.import_module(COMMANDS[cmd]).main(args)

    if cmd == '--version':
        sys.exit(__version__)
    elif cmd in ('-h', '--help'):
        sys.exit(HELP_MESSAGE_VERBOSE)
    elif cmd == '--config':
        show_all_config()
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s." % (cmd, HELP_MESSAGE_VERBOSE))


if __name__ == "__main__":
    # This is triggered by "python -m jsondelta <args>"
    sys.exit(main_dispatch())
