"""Errors raised by store implementations.

The service layer never interprets these; they propagate to the caller
unchanged.
"""


class StorageError(Exception):
    """Base class for store failures."""


class StoreUnavailableError(StorageError):
    """Raised when the backing store cannot be reached or fails mid-operation."""


class ConstraintViolationError(StorageError):
    """Raised when a write violates a store-level constraint.

    Attributes:
        entity (str): The kind of row being written (e.g. "employee").
        detail (str): The backend's description of the violation.
    """

    def __init__(self, entity: str, detail: str) -> None:
        super().__init__(f"{entity} violates a store constraint: {detail}")
        self.entity = entity
        self.detail = detail
