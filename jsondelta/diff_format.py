# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re

from .errors import InvalidPatch, InvalidPath


# Sentinel to allow None as a value
Missing = object()


class _AttrDict(dict):
    """Minimal dict subclass providing attribute access to keys."""
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DiffKind:
    "Collection of valid values for the kind field in diff records."
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    SAME = "same"
    TYPE_CHANGED = "type_changed"


class DiffRecord(_AttrDict):
    """One structural difference between two documents.

    Keys: kind, path, and old_value/new_value for the sides that have a
    value. An absent side reads as Missing through attribute access, and
    is left out of the dict so records serialize cleanly to json.
    """
    def __getattr__(self, name):
        if name in ("old_value", "new_value"):
            return self.get(name, Missing)
        return super(DiffRecord, self).__getattr__(name)


def _record(kind, path, old_value=Missing, new_value=Missing):
    r = DiffRecord(kind=kind, path=path)
    if old_value is not Missing:
        r["old_value"] = old_value
    if new_value is not Missing:
        r["new_value"] = new_value
    return r


def rec_added(path, new_value, old_value=Missing):
    "Create a record of a value appearing at path."
    return _record(DiffKind.ADDED, path, old_value, new_value)

def rec_removed(path, old_value, new_value=Missing):
    "Create a record of a value disappearing from path."
    return _record(DiffKind.REMOVED, path, old_value, new_value)

def rec_modified(path, old_value, new_value):
    "Create a record of a scalar changing value at path."
    return _record(DiffKind.MODIFIED, path, old_value, new_value)

def rec_same(path, old_value, new_value):
    "Create a record of an unchanged value at path."
    return _record(DiffKind.SAME, path, old_value, new_value)

def rec_type_changed(path, old_value, new_value):
    "Create a record of the value at path changing kind."
    return _record(DiffKind.TYPE_CHANGED, path, old_value, new_value)


# Record paths: "$", "$.key", "$['odd key']", "$[3]"

ROOT = "$"

_identifier_re = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_digits_re = re.compile(r"^[0-9]+\Z")


def _escape_key_for_brackets(key):
    return key.replace("\\", "\\\\").replace("'", "\\'")


def join_record_path(base, token):
    """Join a record path with a token (object key or array index)."""
    if isinstance(token, int):
        return "{}[{}]".format(base, token)
    if _identifier_re.match(token):
        return "{}.{}".format(base, token)
    return "{}['{}']".format(base, _escape_key_for_brackets(token))


def split_record_path(path):
    """Split a record path into tokens: str for keys, int for indices."""
    if not isinstance(path, str) or not path.startswith(ROOT):
        raise InvalidPath("Record path must start with '$'.", path=path)
    tokens = []
    i = 1
    n = len(path)
    while i < n:
        ch = path[i]
        if ch == ".":
            j = i + 1
            while j < n and path[j] not in ".[":
                j += 1
            key = path[i+1:j]
            if not _identifier_re.match(key):
                raise InvalidPath("Invalid key at position {}.".format(i), path=path)
            tokens.append(key)
            i = j
        elif ch == "[" and path.startswith("['", i):
            j = i + 2
            buf = []
            while j < n and path[j] != "'":
                if path[j] == "\\":
                    j += 1
                    if j >= n:
                        raise InvalidPath("Trailing backslash in quoted key.", path=path)
                buf.append(path[j])
                j += 1
            if not path.startswith("']", j):
                raise InvalidPath("Unclosed quoted key at position {}.".format(i), path=path)
            tokens.append("".join(buf))
            i = j + 2
        elif ch == "[":
            j = path.find("]", i)
            digits = path[i+1:j] if j > 0 else ""
            if not _digits_re.match(digits):
                raise InvalidPath("Invalid index at position {}.".format(i), path=path)
            tokens.append(int(digits))
            i = j + 1
        else:
            raise InvalidPath("Unexpected {!r} at position {}.".format(ch, i), path=path)
    return tokens


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


class PatchOperation(_AttrDict):
    """For internal usage in jsondelta library.

    A patch operation is its own wire format: a dict with op, path and
    value/from keys. Attribute access is provided for convenience, with
    `from_` standing in for the reserved word.
    """
    def __getattr__(self, name):
        if name == "from_":
            return self["from"]
        return super(PatchOperation, self).__getattr__(name)


def op_add(path, value):
    "Create an operation adding value at path."
    return PatchOperation(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create an operation removing the value at path."
    return PatchOperation(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create an operation replacing the value at path."
    return PatchOperation(op=PatchOp.REPLACE, path=path, value=value)

def op_move(from_path, path):
    "Create an operation moving the value at from_path to path."
    return PatchOperation({"op": PatchOp.MOVE, "from": from_path, "path": path})

def op_copy(from_path, path):
    "Create an operation copying the value at from_path to path."
    return PatchOperation({"op": PatchOp.COPY, "from": from_path, "path": path})

def op_test(path, value):
    "Create an operation checking that the value at path equals value."
    return PatchOperation(op=PatchOp.TEST, path=path, value=value)


_value_ops = (PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST)
_from_ops = (PatchOp.MOVE, PatchOp.COPY)
valid_ops = (PatchOp.ADD, PatchOp.REMOVE, PatchOp.REPLACE,
             PatchOp.MOVE, PatchOp.COPY, PatchOp.TEST)


def validate_operation(e, index=None):
    """Check that e is a well formed patch operation.

    Raises an InvalidPatch if not well formed.
    """
    if not isinstance(e, dict):
        raise InvalidPatch(
            "Patch operation must be an object, not {!r}.".format(e)).attach(e, index)
    op = e.get("op")
    if op not in valid_ops:
        raise InvalidPatch("Unknown patch op {!r}.".format(op)).attach(e, index)
    if not isinstance(e.get("path"), str):
        raise InvalidPatch("Patch op '{}' needs a string path.".format(op)).attach(e, index)
    if op in _value_ops and "value" not in e:
        raise InvalidPatch("Patch op '{}' needs a value.".format(op)).attach(e, index)
    if op in _from_ops and not isinstance(e.get("from"), str):
        raise InvalidPatch("Patch op '{}' needs a string from.".format(op)).attach(e, index)


def validate_patch(patch):
    """Check whether a patch (list of operations) is well formed.

    Raises an InvalidPatch if not well formed.
    """
    if not isinstance(patch, list):
        raise InvalidPatch("Patch must be a list of operations.")
    for i, e in enumerate(patch):
        validate_operation(e, i)


def is_valid_patch(patch):
    """Checks whether a patch is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except InvalidPatch:
        return False
    return True


def to_patch_operations(patch):
    "Wrap a parsed patch document's dicts as PatchOperation objects."
    validate_patch(patch)
    return [PatchOperation(e) for e in patch]
