# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

from .values import loads, dumps

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_json(f):
    """Read and return a JSON document.

    Parameters:
        f:  A filename or a file-like object. The null filename
            ("/dev/null" on *nix, "nul" on Windows) reads as a
            null document.
    """
    if f == EXPLICIT_MISSING_FILE:
        return None
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return loads(fo.read())
    return loads(f.read())


def write_json(value, f, indent=2):
    """Write a JSON document, with a trailing newline, to a filename or file-like object."""
    text = dumps(value, indent=indent) + "\n"
    if not isinstance(f, str):
        f.write(text)
        return
    with io.open(f, 'w', encoding='utf-8') as fo:
        fo.write(text)


def setup_std_streams():
    """Prepare sys.stdout/err for printing documents and diffs.

    - Unencodable characters are escaped instead of raising, unless
      PYTHONIOENCODING says otherwise. Redirected or captured streams
      are left alone.
    - colorama is enabled for ANSI escapes on Windows.
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            if stream is getattr(sys, '__%s__' % name) and hasattr(stream, 'reconfigure'):
                stream.reconfigure(errors='backslashreplace')
    # after reconfiguring, colorama wraps the final streams
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
