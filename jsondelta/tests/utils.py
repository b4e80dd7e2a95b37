# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsondelta import apply_patch, make_patch, deep_copy
from jsondelta.diff_format import is_valid_patch


def check_diff_and_patch(a, b):
    "Check that apply_patch(a, make_patch(a, b)) reproduces b."
    original = deep_copy(a)
    p = make_patch(a, b)
    assert is_valid_patch(p)
    assert apply_patch(a, p) == b
    # Input document is never modified
    assert a == original


def check_symmetric_diff_and_patch(a, b):
    "Check that patching reproduces b from a and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)
