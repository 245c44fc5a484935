"""Message bus implementation for handling commands and events."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING

from qaudit.domain.events import DomainEvent

from .commands import Command

if TYPE_CHECKING:
    from qaudit.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple synchronous message bus.

    Routes each command to its handler, then hands every domain event the
    handler drained from its aggregate to the handlers registered for that
    event type (e.g. the lock history projector).

    With a unit of work, the command and the handling of its events run
    inside it and are committed together: if an event handler fails, the
    audit changes made by the command are rolled back and the command can
    be retried.

    Args:
        command_handlers: A mapping of command types to their handlers.
            Handlers accept a single command argument and return the drained
            events. Additional dependencies should be injected via closures.
        event_handlers: A mapping of event types to the handlers interested in
            them. Events with no registered handler are ignored.
        uow: Unit of work the handlers' repositories stage their changes in.
    """

    def __init__(
        self,
        command_handlers: Mapping[type[Command], Callable[..., Sequence[DomainEvent]]],
        event_handlers: Mapping[type[DomainEvent], Sequence[Callable[..., None]]]
        | None = None,
        uow: AbstractUnitOfWork | None = None,
    ) -> None:
        self._command_handlers = command_handlers
        self._event_handlers = event_handlers or {}
        self._uow = uow

    def handle(self, cmd: Command) -> list[DomainEvent]:
        """Handle a command, then dispatch the events it produced.

        Args:
            cmd: The command to handle.

        Returns:
            The domain events produced by the command, in order.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If a command or event handler raises an exception.
        """

        if not (handler := self._command_handlers.get(type(cmd))):
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        if self._uow is None:
            return self._run(cmd, handler)

        with self._uow:
            events = self._run(cmd, handler)
            self._uow.commit()
        return events

    def _run(
        self, cmd: Command, handler: Callable[..., Sequence[DomainEvent]]
    ) -> list[DomainEvent]:
        handler_name = self._get_handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, handler_name)
        try:
            events = list(handler(cmd) or ())
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling command %s with handler %s", cmd, handler_name
            )
            raise

        for event in events:
            self._dispatch(event)
        return events

    def _dispatch(self, event: DomainEvent) -> None:
        for handler in self._event_handlers.get(type(event), ()):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling event %s with handler %s", event, handler_name)
            try:
                handler(event)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling event %s with handler %s", event, handler_name
                )
                raise

    @staticmethod
    def _get_handler_name(fn: Callable[..., object]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
