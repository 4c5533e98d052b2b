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
"""Error classes for linter-core.

All errors inherit from craft_cli.CraftError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from craft_cli import CraftError

from linter_core.util.string import humanize_list

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


class LinterCoreError(CraftError):
    """Base class for errors raised by the linter registry."""


class DuplicateProviderError(LinterCoreError):
    """The provider is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Provider {name!r} is already registered.",
            resolution="Remove the provider before adding it again.",
            reportable=False,
        )


class InvalidProviderError(LinterCoreError):
    """The provider does not implement the provider contract."""

    def __init__(self, name: str, problems: Sequence[str]) -> None:
        self.problems = list(problems)
        super().__init__(
            f"Invalid provider {name!r}.",
            details="\n".join(f"- {problem}" for problem in self.problems),
            resolution=(
                "Providers must define "
                + humanize_list(
                    ["name", "scope", "grammar_scopes", "lints_on_change", "lint"],
                    "and",
                    sort=False,
                )
                + "."
            ),
            reportable=False,
        )


class RegistryDisposedError(LinterCoreError):
    """The registry was used after being disposed."""

    def __init__(self) -> None:
        super().__init__(
            "The linter registry has been disposed.",
            resolution="Create a new registry service.",
        )
