"""Command dispatch for the service layer.

The CLI never calls a handler directly: it builds a command and passes it to
:meth:`MessageBus.handle`, which finds the handler bound for that command type
in :mod:`roster.bootstrap`.
"""

import logging
from collections.abc import Callable

from roster.domain.errors import DomainError
from roster.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

Handler = Callable[..., None]

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """No handler is registered for the command's type."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


def handler_name(fn: Handler) -> str:
    """Name a handler for log lines, looking through ``functools.partial``."""
    wrapped = getattr(fn, "func", fn)
    return getattr(wrapped, "__name__", repr(fn))


class MessageBus:
    """Routes each command to exactly one handler.

    Args:
        uow: Unit of work the handlers were bound to, kept for callers that
            need it after dispatch.
        command_handlers: Command type to a one-argument callable.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Handler],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> None:
        """Run the handler registered for ``type(cmd)``.

        Raises:
            NoHandlerForCommand: Nothing is registered for the command type.
            DomainError: The handler rejected the command. Logged at INFO
                without a traceback.
            Exception: Any other handler failure, logged with its traceback.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        name = handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, name)
        try:
            handler(cmd)
        except DomainError as e:
            logger.info("Command %s rejected: %s", cmd, e)
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception("Exception handling command %s with handler %s", cmd, name)
            raise
