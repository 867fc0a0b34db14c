"""
Error kinds raised by the career operations.

InvalidArgument is a caller fault and is reported before any data access.
Everything else is an operation failure and is reported as a failure result.
"""


class CareerServiceError(Exception):
    """Base class for errors raised by this service."""


class InvalidArgument(CareerServiceError):
    code = "invalid-argument"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OperationFailure(CareerServiceError):
    """A data-store or scoring fault. Surfaced as {success: false, ...}."""


class MalformedRecord(OperationFailure):
    """A fetched document lacks a field the scorer requires, or has it in the wrong shape."""

    def __init__(self, collection: str, doc_id: str, field: str, problem: str = "is missing required field"):
        super().__init__(f"{collection} record '{doc_id}' {problem} '{field}'")
        self.collection = collection
        self.doc_id = doc_id
        self.field = field
