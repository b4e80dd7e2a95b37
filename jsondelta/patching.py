# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import PatchOp, validate_patch, validate_operation
from .errors import JSONDeltaError, InvalidPatch, OperationFailed, TestFailed
from .pointer import parse_pointer, resolve, resolve_parent
from .values import deep_copy, deep_equal, from_native, loads, type_name
from .log import logger


__all__ = ["apply_patch", "apply_operation"]


def _is_root(path):
    return not parse_pointer(path)


def add_value(doc, path, value):
    """Add value at path in doc and return the (possibly new) document.

    Adding at the root replaces the whole document. Adding to an object
    sets the key, overwriting any existing value. Adding to an array
    inserts before the given position, or appends at the end position.
    """
    if _is_root(path):
        return value
    parent, key = resolve_parent(doc, path, for_add=True)
    if isinstance(parent, list):
        parent.insert(key, value)
    else:
        parent[key] = value
    return doc


def remove_value(doc, path):
    """Remove the value at path from doc and return the document.

    Removing the root leaves a null document.
    """
    if _is_root(path):
        return None
    parent, key = resolve_parent(doc, path)
    del parent[key]
    return doc


def replace_value(doc, path, value):
    """Replace the existing value at path with value.

    Equivalent to removing then adding at path. The value is assigned in
    place so the position of an object key is kept.
    """
    if _is_root(path):
        return value
    parent, key = resolve_parent(doc, path)
    parent[key] = value
    return doc


def _is_proper_prefix(prefix, tokens):
    return len(prefix) < len(tokens) and tokens[:len(prefix)] == prefix


def patch_add(doc, e):
    return add_value(doc, e["path"], deep_copy(from_native(e["value"])))


def patch_remove(doc, e):
    return remove_value(doc, e["path"])


def patch_replace(doc, e):
    return replace_value(doc, e["path"], deep_copy(from_native(e["value"])))


def patch_move(doc, e):
    from_path = e["from"]
    path = e["path"]
    value = deep_copy(resolve(doc, from_path))
    if parse_pointer(from_path) == parse_pointer(path):
        return doc
    if _is_proper_prefix(parse_pointer(from_path), parse_pointer(path)):
        raise OperationFailed(
            "Cannot move a value into one of its own children.", path=path)
    doc = remove_value(doc, from_path)
    return add_value(doc, path, value)


def patch_copy(doc, e):
    value = deep_copy(resolve(doc, e["from"]))
    return add_value(doc, e["path"], value)


def patch_test(doc, e):
    path = e["path"]
    actual = resolve(doc, path)
    expected = from_native(e["value"])
    if not deep_equal(actual, expected):
        raise TestFailed(
            "Value mismatch: expected {} {!r}, found {} {!r}.".format(
                type_name(expected), expected, type_name(actual), actual),
            path=path)
    return doc


_patchers = {
    PatchOp.ADD: patch_add,
    PatchOp.REMOVE: patch_remove,
    PatchOp.REPLACE: patch_replace,
    PatchOp.MOVE: patch_move,
    PatchOp.COPY: patch_copy,
    PatchOp.TEST: patch_test,
}


def apply_operation(doc, e, index=None):
    """Apply a single patch operation to doc, in place where possible.

    Returns the resulting document, which is a different object than doc
    when the operation replaced or removed the root. Errors are raised
    with the operation and index attached.
    """
    validate_operation(e, index)
    try:
        return _patchers[e["op"]](doc, e)
    except JSONDeltaError as err:
        raise err.attach(e, index)


def apply_patch(doc, patch):
    """Produce a patched version of doc with the given list of operations.

    patch is a list of operation dicts, or the JSON text of such a list.

    The document passed in is never modified: operations are applied in
    order to a deep copy, which is returned once all of them succeeded.
    If an operation fails, the error propagates and no partially patched
    document is exposed.
    """
    if isinstance(patch, (str, bytes)):
        try:
            patch = loads(patch)
        except OperationFailed as e:
            raise InvalidPatch("Patch is not valid JSON: {}".format(e.message))
    validate_patch(patch)

    result = deep_copy(doc)
    for i, e in enumerate(patch):
        logger.debug("Applying patch operation #%d: %s %s", i, e["op"], e["path"])
        try:
            result = apply_operation(result, e, i)
        except JSONDeltaError as err:
            logger.debug("Patch operation #%d failed: %s", i, err.message)
            raise
    return result
