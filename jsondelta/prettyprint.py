# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Human readable rendering of diff records.

Each record is printed as a '## <kind> <path>:' header followed by the
old side prefixed with '-' and the new side prefixed with '+'. Values are
rendered as indented key/value trees, multiline strings are shown as a
line diff.
"""

from collections import namedtuple
import datetime
from difflib import unified_diff
import os
import pprint
import sys

import colorama

from .diff_format import DiffKind, Missing
from .values import type_name


# Indentation added per nesting level
IND = "  "

# Lists rendering wider than this are printed one item per line
MAXWIDTH = 78


Markers = namedtuple('Markers', ('KEEP', 'REMOVE', 'ADD', 'INFO', 'RESET'))

plain_markers = Markers(
    KEEP='   ',
    REMOVE='-  ',
    ADD='+  ',
    INFO='## ',
    RESET='',
)

color_markers = Markers(
    KEEP=plain_markers.KEEP,
    REMOVE=colorama.Fore.RED + plain_markers.REMOVE,
    ADD=colorama.Fore.GREEN + plain_markers.ADD,
    INFO=colorama.Fore.BLUE + colorama.Style.BRIGHT + plain_markers.INFO,
    RESET=colorama.Style.RESET_ALL,
)


class PrettyPrintConfig:
    """Where and how records are printed.

    out: stream written to.
    use_color: wrap markers in ANSI color escapes.
    show_same: print 'same' records, otherwise they are skipped.
    """

    def __init__(self, out=sys.stdout, use_color=True, show_same=True):
        self.out = out
        self.use_color = use_color
        self.show_same = show_same

    @property
    def markers(self):
        return color_markers if self.use_color else plain_markers

    def __getattr__(self, name):
        # KEEP, REMOVE, ADD, INFO and RESET come from the active markers
        if name in Markers._fields:
            return getattr(self.markers, name)
        raise AttributeError(name)

    def write(self, text):
        self.out.write(text)


DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Modification time of filename as a string."
    if not os.path.exists(filename):
        return "(no timestamp)"
    mtime = datetime.datetime.fromtimestamp(os.path.getmtime(filename))
    return mtime.isoformat(" ")


def format_value(v):
    "Strings as they are, anything else through pprint."
    return v if isinstance(v, str) else pprint.pformat(v)


def format_record(r):
    """Describe a diff record on a single line."""
    kind = r.kind
    if kind == DiffKind.ADDED:
        detail = repr(r.new_value)
    elif kind in (DiffKind.REMOVED, DiffKind.SAME):
        detail = repr(r.old_value)
    elif kind == DiffKind.MODIFIED:
        detail = "%r -> %r" % (r.old_value, r.new_value)
    elif kind == DiffKind.TYPE_CHANGED:
        detail = "%s -> %s" % (type_name(r.old_value), type_name(r.new_value))
    else:
        return "unknown difference: %s" % (r.path,)
    return "%s: %s = %s" % (_describe_kind(kind), r.path, detail)


def _describe_kind(kind):
    return kind.replace("_", " ")


def render_text_diff(a, b, config):
    "Line diff of two multiline strings, with markers instead of +/-."
    markers = {'+': config.ADD, '-': config.REMOVE, ' ': config.KEEP}
    lines = []
    for line in unified_diff(a.splitlines(False), b.splitlines(False), lineterm=''):
        if line.startswith(('+++', '---')):
            continue
        marker = markers.get(line[:1])
        if marker is None:
            # hunk headers
            lines.append(line)
        else:
            lines.append(marker + line[1:] + config.RESET)
    return '\n'.join(lines) + '\n'


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    "Write text with every line prefixed, ending with a newline."
    for line in text.splitlines(True):
        config.write(prefix + line)
    if not text.endswith("\n"):
        config.write("\n")


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, (dict, list)):
        config.write("%s%s:\n" % (prefix, k))
        if isinstance(v, dict):
            pretty_print_dict(v, prefix + IND, config)
        else:
            pretty_print_list(v, prefix + IND, config)
        return

    text = format_value(v)
    if "\n" in text:
        config.write("%s%s:\n" % (prefix, k))
        pretty_print_multiline(text, prefix + IND, config)
    else:
        config.write("%s%s: %s\n" % (prefix, k, text))


def pretty_print_list(li, prefix="", config=DefaultConfig):
    "Print a short list on one line, a long one as item[i] entries."
    text = pprint.pformat(li)
    if len(text) < MAXWIDTH - len(prefix) and "\\n" not in text:
        config.write("%s%s\n" % (prefix, text))
        return
    for i, v in enumerate(li):
        pretty_print_item("item[%d]" % i, v, prefix, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k, v in d.items():
        pretty_print_item(k, v, prefix, config)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly nested value with all lines prefixed."""
    if value and isinstance(value, dict):
        pretty_print_dict(value, prefix, config)
    elif value and isinstance(value, list):
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def _record_header(r):
    if r.kind == DiffKind.TYPE_CHANGED:
        return "type changed from %s to %s" % (
            type_name(r.old_value), type_name(r.new_value))
    return _describe_kind(r.kind)


def pretty_print_record(r, config=DefaultConfig):
    "Pretty-print a single diff record."
    if r.kind == DiffKind.SAME and not config.show_same:
        return

    config.write("%s%s %s:%s\n" % (config.INFO, _record_header(r), r.path, config.RESET))

    old, new = r.old_value, r.new_value
    if r.kind == DiffKind.SAME:
        pretty_print_value(old, config.KEEP, config)
    elif (r.kind == DiffKind.MODIFIED and isinstance(old, str)
            and ("\n" in old or "\n" in new)):
        config.write(render_text_diff(old, new, config))
    else:
        # An explicit null on the other side of an added/removed record
        # is implied by the kind and not printed
        if old is not Missing and r.kind != DiffKind.ADDED:
            pretty_print_value(old, config.REMOVE, config)
        if new is not Missing and r.kind != DiffKind.REMOVED:
            pretty_print_value(new, config.ADD, config)

    config.write('\n' + config.RESET)


def pretty_print_diff(records, config=DefaultConfig):
    "Pretty-print a list of diff records."
    for r in records:
        pretty_print_record(r, config)


json_diff_header = """\
jsondiff {afn} {bfn}
--- {afn}  {atime}
+++ {bfn}  {btime}
"""


def pretty_print_json_diff(afn, bfn, records, config=DefaultConfig):
    """Pretty-print the diff of two json files

    Parameters
    ----------

    afn: str
        Filename of the old document
    bfn: str
        Filename of the new document
    records: list
        The diff records describing the changes from old to new
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if not records:
        return
    config.write(json_diff_header.format(
        afn=afn, bfn=bfn, atime=file_timestamp(afn), btime=file_timestamp(bfn)))
    pretty_print_diff(records, config)
