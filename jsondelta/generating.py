# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import (
    DiffKind, Missing, split_record_path, op_add, op_remove, op_replace,
    )
from .diffing import diff
from .pointer import format_pointer


__all__ = ["generate_patch", "make_patch", "record_path_to_pointer"]


def record_path_to_pointer(path):
    "Convert a record path like $.a['b/c'][0] into the pointer /a/b~1c/0."
    return format_pointer(split_record_path(path))


def _record_to_operation(r, include_type_changes):
    pointer = record_path_to_pointer(r.path)
    kind = r.kind
    if kind == DiffKind.ADDED:
        # A null being replaced must not shift array items
        if r.old_value is not Missing:
            return op_replace(pointer, r.new_value)
        return op_add(pointer, r.new_value)
    elif kind == DiffKind.REMOVED:
        if r.new_value is not Missing:
            return op_replace(pointer, r.new_value)
        return op_remove(pointer)
    elif kind == DiffKind.MODIFIED:
        return op_replace(pointer, r.new_value)
    elif kind == DiffKind.TYPE_CHANGED and include_type_changes:
        return op_replace(pointer, r.new_value)
    return None


def _array_removal(r):
    """Return (parent tokens, index) if r removes an array item, else None."""
    if r.kind != DiffKind.REMOVED or r.new_value is not Missing:
        return None
    tokens = split_record_path(r.path)
    if tokens and isinstance(tokens[-1], int):
        return tokens[:-1], tokens[-1]
    return None


def _order_removals(records):
    """Reverse each run of consecutive item removals from the same array.

    diff reports removed trailing items in increasing index order, but
    removing them in that order would shift the later targets.
    """
    ordered = []
    run = []
    run_parent = None
    for r in records:
        removal = _array_removal(r)
        if removal is not None and run and removal[0] == run_parent:
            run.append(r)
            continue
        ordered.extend(reversed(run))
        if removal is not None:
            run = [r]
            run_parent = removal[0]
        else:
            run = []
            run_parent = None
            ordered.append(r)
    ordered.extend(reversed(run))
    return ordered


def generate_patch(records, include_type_changes=False):
    """Translate diff records into a list of patch operations.

    added records become add operations, removed records become remove
    operations and modified records become replace operations. A record
    where one side is an explicit null becomes a replace. same records
    never produce operations, and type_changed records only do when
    include_type_changes is true.
    """
    patch = []
    for r in _order_removals(records):
        e = _record_to_operation(r, include_type_changes)
        if e is not None:
            patch.append(e)
    return patch


def make_patch(a, b, options=None, **kwargs):
    "Compute a patch transforming a into b."
    return generate_patch(diff(a, b, options, **kwargs), include_type_changes=True)
