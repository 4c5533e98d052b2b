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
"""Tests for the lint event bus."""

from unittest import mock

import pytest
import pytest_check
from linter_core.lint import (
    BeginEvent,
    CallingVersion,
    EditContext,
    EventBus,
    EventKind,
    ProviderRecord,
    Scope,
    events,
)

from tests.conftest import FAKE_FILE_PATH, FakeProvider, FakeSurface


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def event() -> BeginEvent:
    return BeginEvent(provider=FakeProvider(), file_path=FAKE_FILE_PATH)


def test_delivery_order(bus, event):
    calls = []
    bus.subscribe(EventKind.BEGIN, lambda e: calls.append(("first", e)))
    bus.subscribe(EventKind.BEGIN, lambda e: calls.append(("second", e)))

    bus.emit(EventKind.BEGIN, event)

    assert calls == [("first", event), ("second", event)]


def test_only_matching_kind(bus, event):
    begin = mock.Mock()
    finish = mock.Mock()
    bus.subscribe(EventKind.BEGIN, begin)
    bus.subscribe(EventKind.FINISH, finish)

    bus.emit(EventKind.BEGIN, event)

    begin.assert_called_once_with(event)
    finish.assert_not_called()


def test_unsubscribe(bus, event):
    listener = mock.Mock()
    unsubscribe = bus.subscribe(EventKind.UPDATE, listener)

    unsubscribe()
    unsubscribe()  # Unsubscribing twice is harmless.
    bus.emit(EventKind.UPDATE, event)

    listener.assert_not_called()


def test_failing_listener_is_contained(bus, event, emitter):
    after = mock.Mock()
    bus.subscribe(EventKind.FINISH, mock.Mock(side_effect=RuntimeError("boom")))
    bus.subscribe(EventKind.FINISH, after)

    bus.emit(EventKind.FINISH, event)

    after.assert_called_once_with(event)
    emitter.assert_debug(
        r"Lint finish listener .* failed: RuntimeError\(.boom.\)", regex=True
    )


def test_dispose(bus, event):
    listener = mock.Mock()
    bus.subscribe(EventKind.BEGIN, listener)

    bus.dispose()
    bus.emit(EventKind.BEGIN, event)

    listener.assert_not_called()


@pytest.mark.parametrize(
    ("scope", "expected_path", "expect_buffer"),
    [
        (Scope.FILE, FAKE_FILE_PATH, True),
        (Scope.PROJECT, None, False),
    ],
)
def test_event_shaping(scope, expected_path, expect_buffer):
    surface = FakeSurface()
    context = EditContext(surface=surface)
    provider = FakeProvider(scope=scope)
    record = ProviderRecord(provider=provider, version=CallingVersion.CURRENT)

    begin = events.begin_event(record, context)
    update = events.update_event(record, context, ["message"])
    finish = events.finish_event(record, context)

    pytest_check.equal(begin.file_path, expected_path)
    pytest_check.equal(finish.file_path, expected_path)
    pytest_check.is_(update.buffer, surface.buffer if expect_buffer else None)
    pytest_check.equal(update.messages, ["message"])
    pytest_check.is_(begin.provider, provider)
