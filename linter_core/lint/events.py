# This file is part of linter-core.
#
# Copyright 2025 Canonical Ltd.
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License version 3, as
# published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranties of MERCHANTABILITY,
# SATISFACTORY QUALITY, or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with this program.  If not, see <http://www.gnu.org/licenses/>.
"""Notifications emitted while linting."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias

from linter_core.lint.types import Scope
from linter_core.util.logging import log_fault

if TYPE_CHECKING:  # pragma: no cover
    from linter_core.lint.record import ProviderRecord
    from linter_core.lint.types import EditContext


class EventKind(str, Enum):
    """The kinds of lint notification."""

    BEGIN = "begin"
    UPDATE = "update"
    FINISH = "finish"


@dataclass(frozen=True, slots=True)
class BeginEvent:
    """A provider started linting. ``file_path`` is None for project providers."""

    provider: Any
    file_path: str | None


@dataclass(frozen=True, slots=True)
class UpdateEvent:
    """A provider produced messages. ``buffer`` is None for project providers."""

    provider: Any
    messages: list[Any]
    buffer: Any


@dataclass(frozen=True, slots=True)
class FinishEvent:
    """A provider settled, whether or not it produced messages."""

    provider: Any
    file_path: str | None


LintEvent: TypeAlias = BeginEvent | UpdateEvent | FinishEvent
Listener: TypeAlias = Callable[[Any], None]
Unsubscribe: TypeAlias = Callable[[], None]


def begin_event(record: ProviderRecord, context: EditContext) -> BeginEvent:
    """Shape a begin event for the provider's scope."""
    file_path = context.file_path if record.scope is Scope.FILE else None
    return BeginEvent(provider=record.provider, file_path=file_path)


def update_event(
    record: ProviderRecord, context: EditContext, messages: list[Any]
) -> UpdateEvent:
    """Shape an update event for the provider's scope."""
    buffer = context.buffer if record.scope is Scope.FILE else None
    return UpdateEvent(provider=record.provider, messages=messages, buffer=buffer)


def finish_event(record: ProviderRecord, context: EditContext) -> FinishEvent:
    """Shape a finish event for the provider's scope."""
    file_path = context.file_path if record.scope is Scope.FILE else None
    return FinishEvent(provider=record.provider, file_path=file_path)


class EventBus:
    """Synchronous fan-out of lint events to subscribed callbacks.

    Listeners are called in subscription order. A listener that raises is
    logged and skipped; the remaining listeners still receive the event.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventKind, list[Listener]] = {
            kind: [] for kind in EventKind
        }
        self._disposed = False

    def subscribe(self, kind: EventKind, callback: Listener) -> Unsubscribe:
        """Register a callback for an event kind.

        :returns: a function that removes the callback again.
        """
        listeners = self._listeners[kind]
        listeners.append(callback)

        def unsubscribe() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def emit(self, kind: EventKind, event: LintEvent) -> None:
        """Deliver an event to every listener of its kind."""
        if self._disposed:
            return
        for callback in list(self._listeners[kind]):
            try:
                callback(event)
            except Exception as exc:  # noqa: BLE001
                log_fault(f"Lint {kind.value} listener {callback!r} failed", exc)

    def dispose(self) -> None:
        """Drop every listener. Later events are discarded."""
        for listeners in self._listeners.values():
            listeners.clear()
        self._disposed = True
