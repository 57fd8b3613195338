"""Bootstrap the message bus and query facade with a unit of work."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from roster import config
from roster.adapters.db.engine import make_engine
from roster.adapters.unit_of_work import SqlAlchemyUnitOfWork
from roster.interfaces.unit_of_work import AbstractUnitOfWork
from roster.service_layer.handlers import COMMAND_HANDLERS
from roster.service_layer.messagebus import MessageBus
from roster.service_layer.views import EmployeeQueries

if TYPE_CHECKING:
    from roster.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application services."""

    message_bus: MessageBus
    queries: EmployeeQueries


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work backed by the database at ``url``."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork, command_handlers: dict[type[Command], Callable[..., None]]
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def build_queries(uow: AbstractUnitOfWork) -> EmployeeQueries:
    """Build the read-side query facade."""
    return EmployeeQueries(uow)


def bootstrap(
    url: str | None = None, uow: AbstractUnitOfWork | None = None
) -> AppContainer:
    """Wire the application.

    Args:
        url: Database URL. Defaults to ``ROSTER_DB_URL``. Ignored when ``uow``
            is given.
        uow: A ready-made unit of work (e.g. in-memory for tests).

    Raises:
        DatabaseUrlNotSetError: If neither ``uow`` nor ``url`` is given and
            ``ROSTER_DB_URL`` is unset.
    """
    if uow is None:
        uow = build_write_uow(url or config.get_db_url())
    logger.debug("Bootstrapping with %s", type(uow).__name__)

    return AppContainer(
        message_bus=build_message_bus(uow, COMMAND_HANDLERS),
        queries=build_queries(uow),
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return lambda message: handler(message, **deps)
