# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import (
    ROOT, join_record_path,
    rec_added, rec_removed, rec_modified, rec_same, rec_type_changed,
    )
from ..values import ValueKind, kind_of, deep_equal, loads

from .config import DiffOptions
from .unordered import match_unordered, equal_as_multisets

__all__ = ["diff", "diff_texts"]


def values_equal(a, b, options):
    """Compare two values the way diff compares them under options.

    Without string normalization or order-insensitivity this is plain
    deep equality.
    """
    if not options.normalizes_strings and not options.ignore_order:
        return deep_equal(a, b)
    ka = kind_of(a)
    if ka != kind_of(b):
        return False
    if ka == ValueKind.STRING:
        return options.normalize_string(a) == options.normalize_string(b)
    elif ka == ValueKind.ARRAY:
        compare = lambda x, y: values_equal(x, y, options)
        if options.ignore_order:
            return equal_as_multisets(a, b, compare)
        return len(a) == len(b) and all(compare(x, y) for x, y in zip(a, b))
    elif ka == ValueKind.OBJECT:
        if len(a) != len(b):
            return False
        return all(k in b and values_equal(v, b[k], options) for k, v in a.items())
    return deep_equal(a, b)


def diff(a, b, options=None, **kwargs):
    """Compute the differences between two json values a (old) and b (new).

    Returns a list of DiffRecord in a deterministic order: object keys
    sorted, array items in index order.

    Options can be given as a DiffOptions instance, as keyword arguments,
    or both, in which case the keyword arguments take precedence.
    """
    if options is None:
        options = DiffOptions(**kwargs)
    elif kwargs:
        options = options.replace(**kwargs)

    records = []
    diff_values(a, b, ROOT, options, records, 0)
    return records


def diff_texts(a, b, options=None, **kwargs):
    """Parse two JSON texts and diff the resulting values."""
    return diff(loads(a), loads(b), options, **kwargs)


def diff_values(a, b, path, options, records, depth):
    """Recursively append records describing the changes from a to b at path."""
    if options.depth_exceeded(depth):
        return

    ka = kind_of(a)
    kb = kind_of(b)
    if ka == ValueKind.NULL and kb == ValueKind.NULL:
        if options.include_same:
            records.append(rec_same(path, a, b))
    elif ka == ValueKind.NULL:
        records.append(rec_added(path, b, old_value=a))
    elif kb == ValueKind.NULL:
        records.append(rec_removed(path, a, new_value=b))
    elif ka != kb:
        # Atomic for diffing purposes, no recursion
        records.append(rec_type_changed(path, a, b))
    elif ka == ValueKind.ARRAY:
        if options.ignore_order:
            diff_lists_unordered(a, b, path, options, records, depth)
        else:
            diff_lists(a, b, path, options, records, depth)
    elif ka == ValueKind.OBJECT:
        diff_dicts(a, b, path, options, records, depth)
    else:
        diff_scalars(a, b, path, options, records)


def diff_scalars(a, b, path, options, records):
    if kind_of(a) == ValueKind.STRING:
        same = options.normalize_string(a) == options.normalize_string(b)
    else:
        same = a == b
    if not same:
        records.append(rec_modified(path, a, b))
    elif options.include_same:
        records.append(rec_same(path, a, b))


def diff_lists(a, b, path, options, records, depth):
    """Compare two lists index by index.

    Items at indices present in both lists are compared recursively,
    items beyond the end of the shorter list are added or removed.
    """
    for i in range(max(len(a), len(b))):
        subpath = join_record_path(path, i)
        if i >= len(a):
            records.append(rec_added(subpath, b[i]))
        elif i >= len(b):
            records.append(rec_removed(subpath, a[i]))
        else:
            diff_values(a[i], b[i], subpath, options, records, depth + 1)


def diff_lists_unordered(a, b, path, options, records, depth):
    """Compare two lists as multisets.

    Equal items are paired first wherever they are. The remaining items
    are paired up in index order and compared recursively at the lower
    of their two indices, so swapping a and b reports nested additions
    and removals at the same paths. Whatever is left over is added or
    removed.
    """
    compare = lambda x, y: values_equal(x, y, options)
    matches, unmatched_a, unmatched_b = match_unordered(a, b, compare)

    if options.include_same:
        for i, j in matches:
            diff_values(a[i], b[j], join_record_path(path, j), options, records, depth + 1)

    for i, j in zip(unmatched_a, unmatched_b):
        diff_values(a[i], b[j], join_record_path(path, min(i, j)), options, records, depth + 1)

    n = min(len(unmatched_a), len(unmatched_b))
    for i in unmatched_a[n:]:
        records.append(rec_removed(join_record_path(path, i), a[i]))
    for j in unmatched_b[n:]:
        records.append(rec_added(join_record_path(path, j), b[j]))


def diff_dicts(a, b, path, options, records, depth):
    """Compare two dicts key by key.

    Keys from both dicts are visited in sorted order to get a
    deterministic result. Keys in both are compared recursively,
    keys in only one of them are added or removed.
    """
    for key in sorted(set(a) | set(b)):
        subpath = join_record_path(path, key)
        if key not in b:
            records.append(rec_removed(subpath, a[key]))
        elif key not in a:
            records.append(rec_added(subpath, b[key]))
        else:
            diff_values(a[key], b[key], subpath, options, records, depth + 1)
