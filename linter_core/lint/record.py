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
"""Per-provider bookkeeping kept by the registry."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from linter_core.lint.types import CallingVersion, Scope


@dataclass(eq=False)
class ProviderRecord:
    """Registration state and request counters for one provider.

    ``request_latest`` counts dispatches. ``request_last_received`` is the
    generation of the newest accepted response and never exceeds
    ``request_latest``.
    """

    provider: Any
    version: CallingVersion
    activated: bool = True
    request_latest: int = 0
    request_last_received: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @property
    def name(self) -> str:
        """The provider's name."""
        return str(self.provider.name)

    @property
    def scope(self) -> Scope:
        """The provider's scope."""
        return Scope(self.provider.scope)

    @property
    def lints_on_change(self) -> bool:
        """Whether the provider runs on change, read through its contract version."""
        if self.version is CallingVersion.LEGACY:
            return bool(self.provider.lint_on_fly)
        return bool(self.provider.lints_on_change)

    def next_generation(self) -> int:
        """Start a new request and return its generation number."""
        with self._lock:
            self.request_latest += 1
            return self.request_latest

    def accept(self, generation: int) -> bool:
        """Record a response unless a newer or equal one was already accepted.

        :returns: True if the response is current and was accepted.
        """
        with self._lock:
            if generation <= self.request_last_received:
                return False
            self.request_last_received = generation
            return True

    def deactivate(self) -> None:
        """Stop the provider from being dispatched or surfaced."""
        self.activated = False
