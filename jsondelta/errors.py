# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json


class ErrorCode:
    "Collection of valid values for the code field of jsondelta errors."
    INVALID_PATCH = "INVALID_PATCH"
    INVALID_PATH = "INVALID_PATH"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    INVALID_INDEX = "INVALID_INDEX"
    INVALID_TYPE = "INVALID_TYPE"
    TEST_FAILED = "TEST_FAILED"
    OPERATION_FAILED = "OPERATION_FAILED"


class JSONDeltaError(ValueError):
    """Base class of all errors raised while resolving pointers or patching.

    Attributes:
        code: One of the ErrorCode values.
        message: Human readable reason.
        path: The pointer (or record path) the error relates to, if any.
        operation: The patch operation that failed, if raised while patching.
        index: Position of `operation` in the patch document.
    """
    code = ErrorCode.OPERATION_FAILED

    def __init__(self, message, path=None, operation=None, index=None):
        super(JSONDeltaError, self).__init__(message)
        self.message = message
        self.path = path
        self.operation = operation
        self.index = index

    def __str__(self):
        s = "{}: {}".format(self.code, self.message)
        if self.path is not None:
            s += " (path: {!r})".format(self.path)
        if self.operation is not None:
            try:
                op_text = json.dumps(self.operation, sort_keys=True)
            except (TypeError, ValueError):
                op_text = repr(self.operation)
            s += " [operation #{}: {}]".format(self.index, op_text)
        return s

    def attach(self, operation, index):
        """Record the failing operation unless an inner call already did."""
        if self.operation is None:
            self.operation = operation
            self.index = index
        return self


class InvalidPatch(JSONDeltaError):
    "Malformed patch document or unknown op."
    code = ErrorCode.INVALID_PATCH


class InvalidPath(JSONDeltaError):
    "Malformed pointer or record path syntax."
    code = ErrorCode.INVALID_PATH


class PathNotFound(JSONDeltaError):
    "A required path segment does not exist."
    code = ErrorCode.PATH_NOT_FOUND


class IndexOutOfRange(JSONDeltaError):
    "A numeric array segment is beyond the array bounds."
    code = ErrorCode.INDEX_OUT_OF_RANGE


class InvalidIndex(JSONDeltaError):
    "A non-numeric, negative or malformed array segment."
    code = ErrorCode.INVALID_INDEX


class InvalidType(JSONDeltaError):
    "A value of the wrong kind, e.g. a path walking through a scalar."
    code = ErrorCode.INVALID_TYPE


class TestFailed(JSONDeltaError):
    "The equality check of a test operation failed."
    code = ErrorCode.TEST_FAILED
    # Keep pytest from collecting this as a test class
    __test__ = False


class OperationFailed(JSONDeltaError):
    "Generic failure of an operation."
    code = ErrorCode.OPERATION_FAILED
