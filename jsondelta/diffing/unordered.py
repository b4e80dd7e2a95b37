# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Matching of array elements when order is insignificant."""


def match_unordered(a, b, compare):
    """Pair up equal items of sequences a and b, ignoring their order.

    Each item of b is matched with the first unmatched item of a for
    which compare(a[i], b[j]) is true, visiting b in index order.

    Returns (matches, unmatched_a, unmatched_b), where matches is a list
    of (i, j) index pairs sorted on j, and the unmatched lists hold the
    remaining indices of a and b in increasing order.
    """
    available = list(range(len(a)))
    matches = []
    unmatched_b = []
    for j, y in enumerate(b):
        for pos, i in enumerate(available):
            if compare(a[i], y):
                matches.append((i, j))
                del available[pos]
                break
        else:
            unmatched_b.append(j)
    return matches, available, unmatched_b


def equal_as_multisets(a, b, compare):
    "Check whether a and b hold the same items regardless of order."
    if len(a) != len(b):
        return False
    matches, unmatched_a, unmatched_b = match_unordered(a, b, compare)
    return not unmatched_a and not unmatched_b
