# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The JSON value model.

Documents are plain Python trees made of None, bool, int/float, str,
list and dict (with str keys). Every function dispatching on the kind of
a value goes through `kind_of`, which rejects anything outside that
closed set.
"""

import json
import math

from .errors import InvalidType, OperationFailed


class ValueKind:
    "Collection of the kinds a JSON value can have."
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


scalar_kinds = (ValueKind.NULL, ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING)
container_kinds = (ValueKind.ARRAY, ValueKind.OBJECT)


def kind_of(value):
    """Return the ValueKind of value.

    Raises InvalidType for values that are not JSON values.
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, must be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.NUMBER
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise InvalidType("Number {!r} cannot be represented in JSON.".format(value))
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str):
                raise InvalidType("Object keys must be strings, got {!r}.".format(key))
        return ValueKind.OBJECT
    raise InvalidType("Not a JSON value: {!r} of type {}.".format(
        value, type(value).__name__))


def is_container(value):
    return isinstance(value, (list, dict))


def is_scalar(value):
    return kind_of(value) in scalar_kinds


def deep_copy(value):
    "Clone arrays and objects recursively, share immutable scalars."
    if isinstance(value, dict):
        return {k: deep_copy(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [deep_copy(v) for v in value]
    return value


def deep_equal(a, b):
    """Recursive structural equality of two JSON values.

    Values of different kinds are never equal (True != 1), numbers
    compare numerically (1 == 1.0), arrays compare element-wise in order
    and objects compare by key set and per-key values.
    """
    ka = kind_of(a)
    if ka != kind_of(b):
        return False
    if ka == ValueKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    elif ka == ValueKind.OBJECT:
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not deep_equal(value, b[key]):
                return False
        return True
    elif ka == ValueKind.NULL:
        return True
    else:
        return a == b


def from_native(obj):
    """Convert a native Python tree to a JSON value tree.

    Tuples become lists. Dict keys must be strings. A new tree is
    always returned, so the result never shares containers with obj.
    """
    if isinstance(obj, dict):
        result = {}
        for k, v in obj.items():
            if not isinstance(k, str):
                raise InvalidType("Object keys must be strings, got {!r}.".format(k))
            result[k] = from_native(v)
        return result
    elif isinstance(obj, (list, tuple)):
        return [from_native(v) for v in obj]
    kind_of(obj)
    return obj


def loads(text):
    "Parse JSON text (str or bytes) into a value tree."
    try:
        if isinstance(text, bytes):
            text = text.decode("utf8")
        return json.loads(text)
    except ValueError as e:
        raise OperationFailed("Could not parse JSON: {}".format(e))


def dumps(value, indent=None):
    "Serialize a value tree to JSON text."
    if indent is None:
        return json.dumps(value, allow_nan=False)
    return json.dumps(value, indent=indent, separators=(",", ": "), allow_nan=False)


def type_name(value):
    "Kind of value for use in messages, never raising."
    try:
        return kind_of(value)
    except InvalidType:
        return type(value).__name__
