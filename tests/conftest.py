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
"""Shared data for all linter-core tests."""

from __future__ import annotations

import asyncio
import dataclasses
from typing import TYPE_CHECKING, Any

import pytest
from linter_core import AppMetadata, services
from linter_core.lint import AbstractLegacyProvider, AbstractProvider, EventKind, Scope
from typing_extensions import override

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Iterator, Sequence

    from linter_core.host import EditingSurface

FAKE_FILE_PATH = "/home/user/project/src/module.py"


class FakeBuffer:
    """Stand-in for an editor's text buffer."""


@dataclasses.dataclass
class FakeSurface:
    """An editor that satisfies the EditingSurface protocol."""

    file_path: str | None = FAKE_FILE_PATH
    grammar: str = "source.python"
    pending: bool = False
    destroyed: bool = False
    buffer: FakeBuffer = dataclasses.field(default_factory=FakeBuffer)

    def is_persisted(self) -> bool:
        return self.file_path is not None

    def path(self) -> str | None:
        return self.file_path

    def is_pending_preview(self) -> bool:
        return self.pending

    def underlying_buffer(self) -> FakeBuffer:
        return self.buffer

    def is_destroyed(self) -> bool:
        return self.destroyed

    def grammar_scope(self) -> str:
        return self.grammar

    def destroy(self) -> None:
        self.destroyed = True


class FakeProvider(AbstractProvider):
    """A current-style provider that returns canned messages asynchronously."""

    def __init__(
        self,
        name: str = "fake-provider",
        *,
        scope: Scope = Scope.PROJECT,
        grammar_scopes: Sequence[str] = ("source.python",),
        lints_on_change: bool = True,
        messages: Sequence[Any] = (),
    ) -> None:
        self.name = name
        self.scope = scope
        self.grammar_scopes = list(grammar_scopes)
        self.lints_on_change = lints_on_change
        self.messages = list(messages)
        self.calls: list[EditingSurface] = []

    @override
    async def lint(self, surface: EditingSurface) -> list[Any]:
        self.calls.append(surface)
        return list(self.messages)


class FakeLegacyProvider(AbstractLegacyProvider):
    """A legacy provider that only knows the ``lint_on_fly`` trigger."""

    def __init__(self, name: str = "fake-legacy-provider") -> None:
        self.name = name
        self.scope = Scope.FILE
        self.grammar_scopes = ["source.python"]
        self.lint_on_fly = True

    @override
    def lint(self, surface: EditingSurface) -> list[Any]:
        return [{"text": "legacy message"}]


class DeferredProvider(FakeProvider):
    """A provider whose responses are resolved by the test, in any order."""

    def __init__(self, name: str = "deferred-provider", **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        self.pending: list[asyncio.Future[list[Any]]] = []

    @override
    def lint(self, surface: EditingSurface) -> asyncio.Future[list[Any]]:  # type: ignore[override]
        self.calls.append(surface)
        future: asyncio.Future[list[Any]] = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return future


class FakeVcs:
    """A version control predicate with a fixed set of ignored paths."""

    def __init__(self) -> None:
        self.ignored: set[str] = set()

    def is_ignored(self, path: str) -> bool:
        return path in self.ignored


@dataclasses.dataclass
class EventRecorder:
    """Collects every event a registry emits, in order."""

    events: list[tuple[EventKind, Any]] = dataclasses.field(default_factory=list)

    def of_kind(self, kind: EventKind) -> list[Any]:
        return [event for event_kind, event in self.events if event_kind is kind]

    @property
    def kinds(self) -> list[EventKind]:
        return [kind for kind, _ in self.events]

    def listener(self, kind: EventKind) -> Callable[[Any], None]:
        def _record(event: Any) -> None:
            self.events.append((kind, event))

        return _record


async def wait_until(condition: Callable[[], bool], *, attempts: int = 100) -> None:
    """Let the event loop run until ``condition`` holds."""
    for _ in range(attempts):
        if condition():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")


@pytest.fixture(autouse=True)
def reset_services() -> Iterator[None]:
    yield
    services.ServiceFactory.reset()


@pytest.fixture(scope="session")
def app_metadata() -> AppMetadata:
    return AppMetadata(name="testlinter", summary="A linter host for testing.")


@pytest.fixture
def fake_services(app_metadata) -> services.ServiceFactory:
    return services.ServiceFactory(app_metadata)


@pytest.fixture
def config_service(fake_services) -> services.ConfigService:
    return fake_services.get("config")


@pytest.fixture
def fake_vcs() -> FakeVcs:
    return FakeVcs()


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def registry(fake_services, fake_vcs) -> Iterator[services.LinterRegistryService]:
    fake_services.update_kwargs("linter_registry", vcs=fake_vcs)
    registry = fake_services.get("linter_registry")
    yield registry
    registry.dispose()


@pytest.fixture
def recorder(registry) -> EventRecorder:
    recorder = EventRecorder()
    registry.on_did_begin_linting(recorder.listener(EventKind.BEGIN))
    registry.on_did_update_messages(recorder.listener(EventKind.UPDATE))
    registry.on_did_finish_linting(recorder.listener(EventKind.FINISH))
    return recorder
