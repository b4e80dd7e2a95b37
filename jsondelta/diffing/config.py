# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re


_whitespace_re = re.compile(r"\s+")


class DiffOptions:
    """Set of options controlling how values are compared by diff.

    ignore_case: strings are case-folded before comparison.
    ignore_whitespace: whitespace runs are stripped from strings before comparison.
    ignore_order: arrays are compared as multisets instead of index-wise.
    include_same: unchanged leaves are reported as 'same' records.
    max_depth: stop recursing below this depth, 0 means unlimited.
    """

    def __init__(self, *, ignore_case=False, ignore_whitespace=False,
                 ignore_order=False, include_same=False, max_depth=0):
        if max_depth is None:
            max_depth = 0
        if not isinstance(max_depth, int) or max_depth < 0:
            raise ValueError("max_depth must be a non-negative integer, got %r" % (max_depth,))
        self.ignore_case = bool(ignore_case)
        self.ignore_whitespace = bool(ignore_whitespace)
        self.ignore_order = bool(ignore_order)
        self.include_same = bool(include_same)
        self.max_depth = max_depth

    @property
    def normalizes_strings(self):
        return self.ignore_case or self.ignore_whitespace

    def normalize_string(self, s):
        "Apply the string comparison options to s."
        if self.ignore_case:
            s = s.casefold()
        if self.ignore_whitespace:
            s = _whitespace_re.sub("", s)
        return s

    def depth_exceeded(self, depth):
        return self.max_depth > 0 and depth > self.max_depth

    def replace(self, **kwargs):
        "Return a copy of these options with some fields changed."
        values = self.as_dict()
        values.update(kwargs)
        return DiffOptions(**values)

    def as_dict(self):
        return dict(
            ignore_case=self.ignore_case,
            ignore_whitespace=self.ignore_whitespace,
            ignore_order=self.ignore_order,
            include_same=self.include_same,
            max_depth=self.max_depth,
        )

    def __eq__(self, other):
        if not isinstance(other, DiffOptions):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return "DiffOptions(%s)" % ", ".join(
            "%s=%r" % item for item in self.as_dict().items())

    def __copy__(self):
        return DiffOptions(**self.as_dict())
