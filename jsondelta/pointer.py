# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Parsing of pointer strings and resolution of pointers in documents.

A pointer is "" or "/" for the document root, otherwise a "/"-separated
list of reference tokens where "~1" stands for "/" and "~0" for "~".
A token addresses an object key or, when the container is an array, an
index: a non-negative integer without leading zeros, or "-" for the
position one past the last element.
"""

import re

from .errors import (
    InvalidPath, InvalidIndex, IndexOutOfRange, PathNotFound, InvalidType)
from .values import ValueKind, kind_of


__all__ = [
    "parse_pointer", "format_pointer", "escape_token", "unescape_token",
    "is_index_token", "parse_index", "resolve", "resolve_parent", "contains",
    ]


APPEND_MARKER = "-"

_index_re = re.compile(r"^(0|[1-9][0-9]*)$")
_bad_escape_re = re.compile(r"~(?![01])")


def escape_token(token):
    "Escape a reference token for use in a pointer."
    return str(token).replace("~", "~0").replace("/", "~1")


def unescape_token(token):
    "Undo escape_token. ~1 is processed before ~0, so ~01 becomes ~1."
    return token.replace("~1", "/").replace("~0", "~")


def parse_pointer(path):
    "Split a pointer on the form '/foo/0' into ['foo', '0']."
    if not isinstance(path, str):
        raise InvalidPath("Pointer must be a string, not {!r}.".format(path), path=path)
    if path in ("", "/"):
        return []
    if _bad_escape_re.search(path):
        raise InvalidPath("Invalid escape sequence in pointer.", path=path)
    parts = path.split("/")
    if parts[0] == "":
        parts = parts[1:]
    return [unescape_token(p) for p in parts]


def format_pointer(tokens):
    "Join tokens on the form ['foo', 0] into '/foo/0'."
    if not tokens:
        return ""
    return "".join("/" + escape_token(t) for t in tokens)


def is_index_token(token):
    return token == APPEND_MARKER or bool(_index_re.match(token))


def parse_index(token, size, allow_append=False, path=None):
    """Convert an array reference token to an integer position.

    The append marker resolves to size. Positions must be below size,
    or equal to it when allow_append is true.
    """
    if token == APPEND_MARKER:
        index = size
    elif _index_re.match(token):
        index = int(token)
    else:
        raise InvalidIndex("Invalid array index {!r}.".format(token), path=path)
    limit = size + 1 if allow_append else size
    if index >= limit:
        raise IndexOutOfRange(
            "Array index {} out of range (size {}).".format(token, size), path=path)
    return index


def _child(node, token, path):
    "Step from node to its child at token; the child must exist."
    kind = kind_of(node)
    if kind == ValueKind.OBJECT:
        if token not in node:
            raise PathNotFound("Path segment {!r} not found.".format(token), path=path)
        return node[token]
    elif kind == ValueKind.ARRAY:
        return node[parse_index(token, len(node), path=path)]
    else:
        raise InvalidType(
            "Path segment {!r} addresses into a {} value.".format(token, kind), path=path)


def resolve(doc, path):
    "Return the value at path in doc. Every segment must exist."
    node = doc
    for token in parse_pointer(path):
        node = _child(node, token, path)
    return node


def resolve_parent(doc, path, for_add=False):
    """Resolve path to the container holding its target and the final token.

    Returns (parent, key) where key is a str for object parents and an
    int position for array parents. Intermediate segments must exist.
    The final segment must exist too, unless for_add is true, in which
    case new object keys and the array append position are accepted.
    """
    tokens = parse_pointer(path)
    if not tokens:
        raise InvalidPath("The document root has no parent.", path=path)
    parent = doc
    for token in tokens[:-1]:
        parent = _child(parent, token, path)

    last = tokens[-1]
    kind = kind_of(parent)
    if kind == ValueKind.OBJECT:
        if not for_add and last not in parent:
            raise PathNotFound("Path segment {!r} not found.".format(last), path=path)
        return parent, last
    elif kind == ValueKind.ARRAY:
        return parent, parse_index(last, len(parent), allow_append=for_add, path=path)
    else:
        raise InvalidType(
            "Path segment {!r} addresses into a {} value.".format(last, kind), path=path)


def contains(doc, path):
    "Check whether path resolves in doc."
    try:
        resolve(doc, path)
    except (PathNotFound, IndexOutOfRange, InvalidIndex, InvalidType):
        return False
    return True
