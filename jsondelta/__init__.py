# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__, version_info

from .diffing import diff, diff_texts, DiffOptions
from .diff_format import DiffKind, DiffRecord, PatchOp, PatchOperation, Missing
from .errors import (
    JSONDeltaError, InvalidPatch, InvalidPath, PathNotFound, IndexOutOfRange,
    InvalidIndex, InvalidType, TestFailed, OperationFailed,
    )
from .generating import generate_patch, make_patch
from .patching import apply_patch, apply_operation
from .pointer import resolve, resolve_parent, parse_pointer, format_pointer
from .values import ValueKind, kind_of, deep_copy, deep_equal, from_native, loads, dumps


__all__ = [
    "__version__", "version_info",
    "diff", "diff_texts", "DiffOptions",
    "DiffKind", "DiffRecord", "PatchOp", "PatchOperation", "Missing",
    "generate_patch", "make_patch",
    "apply_patch", "apply_operation",
    "resolve", "resolve_parent", "parse_pointer", "format_pointer",
    "ValueKind", "kind_of", "deep_copy", "deep_equal", "from_native",
    "loads", "dumps",
    "JSONDeltaError", "InvalidPatch", "InvalidPath", "PathNotFound",
    "IndexOutOfRange", "InvalidIndex", "InvalidType", "TestFailed",
    "OperationFailed",
    ]
