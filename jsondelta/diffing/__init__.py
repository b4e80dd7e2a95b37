# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import DiffOptions
from .generic import diff, diff_texts

__all__ = ["diff", "diff_texts", "DiffOptions"]
