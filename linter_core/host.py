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
"""Interfaces to the editor host that the linter core depends on.

The core never talks to a concrete editor. Hosts provide objects satisfying
these protocols when they create the registry service.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, final, runtime_checkable

from typing_extensions import override


@runtime_checkable
class EditingSurface(Protocol):
    """A text editor as seen by the linter core."""

    def is_persisted(self) -> bool:
        """Whether the editor's content is backed by a file on disk."""

    def path(self) -> str | None:
        """The path of the backing file, or None for unsaved buffers."""

    def is_pending_preview(self) -> bool:
        """Whether the editor is a preview tab that has not been kept yet."""

    def underlying_buffer(self) -> Any:  # noqa: ANN401
        """The buffer object backing the editor."""

    def is_destroyed(self) -> bool:
        """Whether the editor (and its buffer) has been destroyed."""

    def grammar_scope(self) -> str:
        """The scope name of the editor's grammar, e.g. ``source.python``."""


class VcsIgnorePredicate(Protocol):
    """Decides whether a path is ignored by version control."""

    def is_ignored(self, path: str) -> bool:
        """Whether ``path`` is ignored."""


class ConfigStore(Protocol):
    """Read access to user configuration."""

    def get(self, item: str) -> Any:  # noqa: ANN401
        """Get the value of a configuration item."""


class ScopeMatcher(Protocol):
    """Decides whether a provider applies to an editor."""

    def matches(self, grammar_scopes: Sequence[str], surface: EditingSurface) -> bool:
        """Whether a provider declaring ``grammar_scopes`` applies to ``surface``."""


@final
class GrammarScopeMatcher(ScopeMatcher):
    """Match providers whose grammar scopes include the editor's grammar.

    The ``"*"`` scope matches every grammar.
    """

    @override
    def matches(self, grammar_scopes: Sequence[str], surface: EditingSurface) -> bool:
        return "*" in grammar_scopes or surface.grammar_scope() in grammar_scopes


@final
class NeverIgnored(VcsIgnorePredicate):
    """A VCS predicate for hosts without version control integration."""

    @override
    def is_ignored(self, path: str) -> bool:
        return False
