# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

import pytest

from jsondelta.diff_format import (
    Missing, DiffKind, DiffRecord, PatchOperation, ROOT,
    rec_added, rec_removed, rec_modified, rec_type_changed,
    join_record_path, split_record_path,
    op_add, op_remove, op_replace, op_move, op_copy, op_test,
    validate_patch, is_valid_patch, to_patch_operations,
    )
from jsondelta.errors import InvalidPatch, InvalidPath


def test_record_attribute_access():
    r = rec_modified("$.a", 1, 2)
    assert isinstance(r, DiffRecord)
    assert r.kind == DiffKind.MODIFIED
    assert r.path == "$.a"
    assert r.old_value == 1
    assert r.new_value == 2
    with pytest.raises(AttributeError):
        r.nothing


def test_record_missing_sides():
    r = rec_added("$.a", None)
    assert r.new_value is None
    assert r.old_value is Missing
    assert "old_value" not in r
    r = rec_removed("$.a", [1], new_value=None)
    assert r.new_value is None
    assert r.old_value == [1]


def test_records_serialize_to_json():
    records = [rec_added("$.a", 1), rec_type_changed("$", "1", 1)]
    assert json.loads(json.dumps(records)) == [
        {"kind": "added", "path": "$.a", "new_value": 1},
        {"kind": "type_changed", "path": "$", "old_value": "1", "new_value": 1},
    ]


def test_join_record_path():
    assert join_record_path(ROOT, "abc") == "$.abc"
    assert join_record_path(ROOT, "_a1") == "$._a1"
    assert join_record_path(ROOT, 0) == "$[0]"
    assert join_record_path("$.a", 10) == "$.a[10]"
    assert join_record_path(ROOT, "") == "$['']"
    assert join_record_path(ROOT, "a.b") == "$['a.b']"
    assert join_record_path(ROOT, "0") == "$['0']"
    assert join_record_path(ROOT, "it's") == "$['it\\'s']"
    assert join_record_path(ROOT, "a\\b") == "$['a\\\\b']"


def test_split_record_path():
    assert split_record_path("$") == []
    assert split_record_path("$.a[0]['b c'].d") == ["a", 0, "b c", "d"]
    assert split_record_path("$['0'][0]") == ["0", 0]
    keys = ["plain", "", "a.b", "it's", "a\\b", "[x]", "a']b"]
    for key in keys:
        path = join_record_path(join_record_path(ROOT, key), 3)
        assert split_record_path(path) == [key, 3]


def test_split_record_path_errors():
    for path in ("", "a", "$.", "$.1a", "$[", "$[x]", "$[-1]", "$['a", "$x", "$[²]", "$[١]", None):
        with pytest.raises(InvalidPath):
            split_record_path(path)


def test_operation_constructors():
    assert op_add("/a", 1) == {"op": "add", "path": "/a", "value": 1}
    assert op_remove("/a") == {"op": "remove", "path": "/a"}
    assert op_replace("/a", None) == {"op": "replace", "path": "/a", "value": None}
    assert op_move("/a", "/b") == {"op": "move", "from": "/a", "path": "/b"}
    assert op_copy("/a", "/b") == {"op": "copy", "from": "/a", "path": "/b"}
    assert op_test("/a", [1]) == {"op": "test", "path": "/a", "value": [1]}
    e = op_move("/a", "/b")
    assert e.op == "move"
    assert e.from_ == "/a"
    assert e.path == "/b"


def test_validate_patch():
    validate_patch([op_add("/a", 1), op_move("/a", "/b")])
    assert is_valid_patch([])
    assert not is_valid_patch({})
    assert not is_valid_patch([{"op": "add", "path": "/a"}])
    with pytest.raises(InvalidPatch) as err:
        validate_patch([op_remove("/a"), {"op": "nope", "path": ""}])
    assert err.value.index == 1


def test_to_patch_operations():
    ops = to_patch_operations([{"op": "copy", "from": "/a", "path": "/b"}])
    assert isinstance(ops[0], PatchOperation)
    assert ops[0].from_ == "/a"


def test_patch_schema_accepts_operations(patch_validator):
    patch = [
        op_add("/a", {"b": 1}),
        op_remove("/a/b"),
        op_replace("", []),
        op_move("/x", "/y"),
        op_copy("/y", "/z"),
        op_test("/z", None),
    ]
    patch_validator.validate(patch)


def test_patch_schema_rejects_malformed(patch_validator):
    assert not patch_validator.is_valid([{"op": "add", "path": "/a"}])
    assert not patch_validator.is_valid([{"op": "move", "path": "/a"}])
    assert not patch_validator.is_valid([{"op": "bad", "path": "/a"}])
    assert not patch_validator.is_valid({"op": "remove", "path": "/a"})
