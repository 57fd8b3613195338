"""The transaction boundary handlers work inside."""

from __future__ import annotations

import abc

from .department_store import DepartmentStore
from .employee_store import EmployeeStore


class AbstractUnitOfWork(abc.ABC):
    """Groups store operations so they commit or roll back together.

    Used as a context manager. Leaving the block without calling
    :meth:`commit` discards the work, and so does an exception raised inside
    the block.
    """

    departments: DepartmentStore
    employees: EmployeeStore

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args):
        # rolling back after a commit is a no-op
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Make everything done in this unit durable."""

    @abc.abstractmethod
    def rollback(self):
        """Discard everything not yet committed and release resources."""
