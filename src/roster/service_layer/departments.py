"""Department resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roster.domain.model import Department

if TYPE_CHECKING:
    from roster.interfaces.department_store import DepartmentStore

logger = logging.getLogger(__name__)


class DepartmentResolver:
    """Finds departments by name, creating them on first use.

    Args:
        departments: The store departments are read from and saved to.
    """

    def __init__(self, departments: DepartmentStore) -> None:
        self._departments = departments

    def find_or_create(self, name: str) -> Department:
        """Return the department called ``name``, creating it if absent.

        A newly created department is persisted immediately, independently of
        whatever the caller does next. If the caller's own write later fails,
        the department stays behind with no employees; resolving the same name
        again simply returns it.

        Args:
            name: Exact department name. Non-emptiness is the caller's concern.

        Returns:
            The persisted department (``id`` set).
        """
        if (existing := self._departments.find_by_name(name)) is not None:
            logger.debug("Department %r exists (id=%s)", name, existing.id)
            return existing

        department = self._departments.save(Department(name=name))
        logger.info("Created department %r (id=%s)", name, department.id)
        return department

    def list_all(self) -> list[Department]:
        """Return every department."""
        return self._departments.find_all()
