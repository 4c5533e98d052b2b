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
"""Orchestrates provider registration, dispatch and result reconciliation."""

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Any

from craft_cli import emit
from typing_extensions import override

from linter_core import errors
from linter_core.host import GrammarScopeMatcher, NeverIgnored
from linter_core.lint import events, gate, validate
from linter_core.lint.events import EventBus, EventKind, Listener, Unsubscribe
from linter_core.lint.record import ProviderRecord
from linter_core.lint.types import Fault, LintResult, Ok, Scope, normalize_messages
from linter_core.services import base
from linter_core.util.logging import log_fault

if TYPE_CHECKING:
    from linter_core.application import AppMetadata
    from linter_core.host import (
        ConfigStore,
        EditingSurface,
        ScopeMatcher,
        VcsIgnorePredicate,
    )
    from linter_core.lint.types import EditContext
    from linter_core.services.service_factory import ServiceFactory


class LinterRegistryService(base.AppService):
    """Keeps the set of lint providers and runs them for edit events.

    Every dispatch to a provider gets a generation number. A response is only
    surfaced if no newer response from the same provider was accepted first,
    so slow providers can never overwrite fresher messages.
    """

    def __init__(
        self,
        app: AppMetadata,
        services: ServiceFactory,
        *,
        vcs: VcsIgnorePredicate | None = None,
        matcher: ScopeMatcher | None = None,
        config: ConfigStore | None = None,
    ) -> None:
        super().__init__(app, services)
        self._config = config
        self._vcs: VcsIgnorePredicate = vcs or NeverIgnored()
        self._matcher: ScopeMatcher = matcher or GrammarScopeMatcher()
        self._records: dict[int, ProviderRecord] = {}
        self._events = EventBus()
        self._disposed = False

    @override
    def setup(self) -> None:
        super().setup()
        self._get_config()

    def _get_config(self) -> ConfigStore:
        """Get the config store, falling back to the factory's config service."""
        if self._config is None:
            self._config = self._services.get("config")
        return self._config

    def add_provider(self, provider: Any, *, legacy: bool = False) -> None:  # noqa: ANN401
        """Register a provider.

        :param provider: the provider object. It is referenced, not copied.
        :param legacy: force the legacy (version 1) calling convention.
        :raises DuplicateProviderError: if the provider is already registered.
        :raises InvalidProviderError: if the provider breaks the contract.
        """
        if self._disposed:
            raise errors.RegistryDisposedError
        if self.has_provider(provider):
            raise errors.DuplicateProviderError(str(provider.name))
        version = validate.get_calling_version(provider, legacy=legacy)
        validate.validate_provider(provider, version)

        self._records[id(provider)] = ProviderRecord(provider=provider, version=version)
        emit.debug(f"Registered provider {provider.name!r} (version {int(version)})")

    def remove_provider(self, provider: Any) -> None:  # noqa: ANN401
        """Deregister a provider. Unknown providers are ignored.

        In-flight requests to the provider still settle, but their messages
        are no longer surfaced.
        """
        record = self._records.pop(id(provider), None)
        if record is None:
            return
        record.deactivate()
        emit.debug(f"Removed provider {record.name!r}")

    def has_provider(self, provider: Any) -> bool:  # noqa: ANN401
        """Whether ``provider`` is registered."""
        record = self._records.get(id(provider))
        return record is not None and record.provider is provider

    def get_record(self, provider: Any) -> ProviderRecord:  # noqa: ANN401
        """Get the bookkeeping record for a registered provider.

        :raises KeyError: if the provider is not registered.
        """
        if not self.has_provider(provider):
            raise KeyError(f"provider not registered: {provider!r}")
        return self._records[id(provider)]

    @property
    def providers(self) -> list[Any]:
        """Registered providers, in registration order."""
        return [record.provider for record in self._records.values()]

    def on_did_begin_linting(self, callback: Listener) -> Unsubscribe:
        """Call ``callback`` with a BeginEvent whenever a provider starts."""
        return self._events.subscribe(EventKind.BEGIN, callback)

    def on_did_update_messages(self, callback: Listener) -> Unsubscribe:
        """Call ``callback`` with an UpdateEvent whenever messages are accepted."""
        return self._events.subscribe(EventKind.UPDATE, callback)

    def on_did_finish_linting(self, callback: Listener) -> Unsubscribe:
        """Call ``callback`` with a FinishEvent whenever a provider settles."""
        return self._events.subscribe(EventKind.FINISH, callback)

    async def lint(self, context: EditContext) -> bool:
        """Lint an editor with every provider that applies to it.

        :returns: False if the event was not eligible for linting, True once
            every dispatched provider has settled (even if none applied).
        """
        if self._disposed:
            return False
        config = self._get_config()
        if not gate.should_lint(context, config, self._vcs):
            return False

        disabled = set(config.get("disabled_providers") or ())
        pending = []
        for record in list(self._records.values()):
            if not record.activated:
                continue
            if record.name in disabled:
                emit.trace(f"Skipping disabled provider {record.name!r}")
                continue
            if not gate.should_trigger_provider(record, context, self._matcher):
                continue
            generation = record.next_generation()
            self._events.emit(EventKind.BEGIN, events.begin_event(record, context))
            pending.append(self._dispatch(record, generation, context))

        if pending:
            await asyncio.gather(*pending)
        return True

    async def _dispatch(
        self, record: ProviderRecord, generation: int, context: EditContext
    ) -> None:
        emit.trace(f"Linting with {record.name!r}, request {generation}")
        try:
            result = await self._invoke(record, context.surface)

            if not record.accept(generation):
                emit.trace(
                    f"Dropping stale response {generation} from {record.name!r}"
                )
            elif isinstance(result, Ok) and self._should_surface(record, context):
                self._events.emit(
                    EventKind.UPDATE,
                    events.update_event(record, context, result.messages),
                )
        finally:
            self._events.emit(EventKind.FINISH, events.finish_event(record, context))

    @staticmethod
    async def _invoke(record: ProviderRecord, surface: EditingSurface) -> LintResult:
        """Call the provider, containing any exception it raises."""
        try:
            result = record.provider.lint(surface)
            if inspect.isawaitable(result):
                result = await result
        except asyncio.CancelledError as exc:
            task = asyncio.current_task()
            # Propagate only when this dispatch itself is being cancelled.
            if task is not None and task.cancelling():
                raise
            log_fault(f"Provider {record.name!r} cancelled its request", exc)
            return Fault(exc)
        except Exception as exc:  # noqa: BLE001
            log_fault(f"Provider {record.name!r} crashed", exc)
            return Fault(exc)

        if not isinstance(result, (list, tuple)):
            emit.debug(
                f"Provider {record.name!r} returned {type(result).__name__}, "
                "not a list of messages"
            )
        return Ok(normalize_messages(result))

    @staticmethod
    def _should_surface(record: ProviderRecord, context: EditContext) -> bool:
        if not record.activated:
            return False
        if record.scope is Scope.PROJECT:
            return True
        return not context.surface.is_destroyed()

    def dispose(self) -> None:
        """Deactivate every provider and release all listeners."""
        for record in self._records.values():
            record.deactivate()
        self._records.clear()
        self._events.dispose()
        self._disposed = True
        emit.debug("Linter registry disposed")
