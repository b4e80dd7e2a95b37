# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Command line arguments shared by the jsondelta entry points."""

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import build_config, entrypoint_configurables
from .diffing import DiffOptions
from .log import init_logging, set_jsondelta_log_level


LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the jsondelta config.

    The entrypoint is the first word of the parser's prog. Parsers for
    entrypoints without a configurable keep their own defaults.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**build_config(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    """Apply --log-level to the jsondelta logger.

    Logging is set up with the default level as soon as the argument is
    added, since the action only runs when the option is given.
    """

    def __init__(self, option_strings, dest, default=None, **kwargs):
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsondelta_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_jsondelta_log_level(getattr(logging, values), True)


def modify_config_for_print(config):
    "Render config values as JSON text for display, keeping the nesting."
    output = {}
    for key, value in config.items():
        if isinstance(value, dict):
            output[key] = modify_config_for_print(value) or '{}'
        else:
            output[key] = json.dumps(value)
    return output


def print_config(entrypoint, out=None):
    "Print the effective config of an entrypoint under its class name, to stderr by default."
    from .prettyprint import pretty_print_dict, PrettyPrintConfig

    name = entrypoint_configurables[entrypoint].__name__
    config = build_config(entrypoint, True)
    pretty_print_dict(
        {name: modify_config_for_print(config)},
        config=PrettyPrintConfig(out=out or sys.stderr),
    )


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_config(parser.prog)
        sys.exit(1)


def add_generic_args(parser):
    """Adds the options every jsondelta command has."""
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


# (flag, help) of the boolean comparison options
_comparison_flags = [
    ('--ignore-case', "compare strings case-insensitively."),
    ('--ignore-whitespace', "strip whitespace from strings before comparing them."),
    ('--ignore-order', "compare arrays without regard to the order of their items."),
    ('--include-same', "also report values that did not change."),
]


def non_negative_int(text):
    "argparse type for counts that must be zero or more."
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid int value: %r" % text)
    if value < 0:
        raise argparse.ArgumentTypeError("must be zero or more, got %d" % value)
    return value


def add_diff_args(parser):
    """Adds the options controlling how documents are compared."""
    comparison = parser.add_argument_group(
        title='comparison',
        description='Set how values are compared.')
    for flag, help in _comparison_flags:
        comparison.add_argument(flag, action='store_true', default=False, help=help)
    comparison.add_argument(
        '--max-depth',
        type=non_negative_int, default=0, metavar='N',
        help="stop comparing below depth N. Default is 0 (unlimited).")


def diff_options_from_args(arguments):
    "Build DiffOptions from parsed diff arguments, defaulting what is absent."
    defaults = DiffOptions().as_dict()
    return DiffOptions(**{
        name: getattr(arguments, name, default)
        for name, default in defaults.items()
    })


filename_help = {
    "old": "The old JSON document filename.",
    "new": "The new JSON document filename.",
    "document": "The JSON document filename.",
    "patch": "The patch filename, a JSON array of patch operations.",
}


def add_filename_args(parser, names):
    """Add positional filename arguments with consistent help texts."""
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds the options controlling terminal output."""
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help="do not use ANSI color code escapes in text output.",
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(use_color=getattr(arguments, 'use_color', True), **kwargs)
