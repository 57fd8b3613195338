"""Interface for the Department Store."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roster.domain.model import Department


class DepartmentStore(abc.ABC):
    """Persistence capability for departments.

    Implementations should enforce uniqueness of department names so that
    concurrent find-or-create calls for the same name converge on one row.
    """

    @abc.abstractmethod
    def find_by_name(self, name: str) -> Department | None:
        """Look up a department by exact name.

        Args:
            name: The department name (case-sensitive, exact match).

        Returns:
            The department if found, otherwise None.
        """

    @abc.abstractmethod
    def save(self, department: Department) -> Department:
        """Persist a department.

        Transient departments (``id is None``) are inserted and returned with
        an assigned id. Departments that already carry an id are returned
        unchanged.

        Args:
            department: The department to save.

        Returns:
            The persisted department.

        Raises:
            StorageError: If the backing store fails.
        """

    @abc.abstractmethod
    def find_all(self) -> list[Department]:
        """Return every department, ordered by ascending id."""
