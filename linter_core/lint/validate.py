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
"""Checks run on providers when they are registered."""

from __future__ import annotations

from typing import Any

from linter_core import errors
from linter_core.lint.types import CallingVersion, Scope

_SCOPES = frozenset(scope.value for scope in Scope)


def get_calling_version(provider: Any, *, legacy: bool = False) -> CallingVersion:  # noqa: ANN401
    """Determine which provider contract a provider follows.

    A provider is legacy if the caller says so, or if it only has the legacy
    ``lint_on_fly`` trigger field.
    """
    if legacy:
        return CallingVersion.LEGACY
    if hasattr(provider, "lint_on_fly") and not hasattr(provider, "lints_on_change"):
        return CallingVersion.LEGACY
    return CallingVersion.CURRENT


def get_problems(provider: Any, version: CallingVersion) -> list[str]:  # noqa: ANN401
    """List every way in which ``provider`` breaks the provider contract."""
    problems: list[str] = []

    name = getattr(provider, "name", None)
    if not isinstance(name, str) or not name:
        problems.append("'name' must be a non-empty string")

    scope = getattr(provider, "scope", None)
    if isinstance(scope, Scope):
        scope = scope.value
    if scope not in _SCOPES:
        problems.append(f"'scope' must be one of 'file' or 'project', not {scope!r}")

    grammar_scopes = getattr(provider, "grammar_scopes", None)
    if not isinstance(grammar_scopes, (list, tuple)) or not all(
        isinstance(item, str) for item in grammar_scopes
    ):
        problems.append("'grammar_scopes' must be a list of strings")

    trigger = "lint_on_fly" if version is CallingVersion.LEGACY else "lints_on_change"
    if not isinstance(getattr(provider, trigger, None), bool):
        problems.append(f"{trigger!r} must be a boolean")

    if not callable(getattr(provider, "lint", None)):
        problems.append("'lint' must be callable")

    return problems


def validate_provider(provider: Any, version: CallingVersion) -> None:  # noqa: ANN401
    """Raise InvalidProviderError if the provider cannot be registered."""
    problems = get_problems(provider, version)
    if problems:
        name = getattr(provider, "name", None) or type(provider).__name__
        raise errors.InvalidProviderError(str(name), problems)
