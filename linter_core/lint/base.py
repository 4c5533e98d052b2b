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
"""Abstract bases for lint providers.

Providers do not have to inherit from these classes; any object with the same
attributes can be registered. The bases exist to document the contract and to
give providers sensible defaults.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from linter_core.lint.types import Scope

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Awaitable, Sequence

    from linter_core.host import EditingSurface


class AbstractProvider(ABC):
    """Base class for current (version 2) providers.

    Providers should set:
      - name: human readable identifier
      - scope: Scope.FILE or Scope.PROJECT
      - grammar_scopes: grammar scope names the provider applies to
      - lints_on_change: whether the provider runs while the user types
    """

    name: str
    scope: Scope = Scope.FILE
    grammar_scopes: Sequence[str] = ()
    lints_on_change: bool = False

    @abstractmethod
    def lint(
        self, surface: EditingSurface
    ) -> Sequence[Any] | Awaitable[Sequence[Any]] | None:
        """Lint the editor and return its messages, directly or as an awaitable."""


class AbstractLegacyProvider(ABC):
    """Base class for legacy (version 1) providers.

    Identical to :class:`AbstractProvider` except that the on-change trigger
    is called ``lint_on_fly``.
    """

    name: str
    scope: Scope = Scope.FILE
    grammar_scopes: Sequence[str] = ()
    lint_on_fly: bool = False

    @abstractmethod
    def lint(
        self, surface: EditingSurface
    ) -> Sequence[Any] | Awaitable[Sequence[Any]] | None:
        """Lint the editor and return its messages, directly or as an awaitable."""
