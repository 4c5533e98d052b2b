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
"""Types shared by the linter registry.

Note: this module name intentionally overlaps with the stdlib ``types`` module.
We only import it within the package; downstream users should prefer explicit
imports from ``linter_core.lint``.
"""

from __future__ import annotations

# ruff: noqa: A005  # module name shadows stdlib 'types'
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:  # pragma: no cover
    from linter_core.host import EditingSurface


class Scope(str, Enum):
    """What a provider's messages pertain to."""

    FILE = "file"
    PROJECT = "project"


class CallingVersion(IntEnum):
    """Provider contract version, fixed at registration."""

    LEGACY = 1
    CURRENT = 2


@dataclass(frozen=True, slots=True)
class EditContext:
    """The editor event that requested a lint.

    - surface: the editor to lint
    - on_change: True when triggered by typing rather than by save or open
    """

    surface: EditingSurface
    on_change: bool = False
    file_path: str | None = field(init=False)
    buffer: Any = field(init=False)

    def __post_init__(self) -> None:
        setter = object.__setattr__
        setter(
            self,
            "file_path",
            self.surface.path() if self.surface.is_persisted() else None,
        )
        setter(self, "buffer", self.surface.underlying_buffer())


@dataclass(frozen=True, slots=True)
class Ok:
    """A provider settled with messages."""

    messages: list[Any]


@dataclass(frozen=True, slots=True)
class Fault:
    """A provider raised instead of returning messages."""

    error: BaseException


LintResult: TypeAlias = Ok | Fault


def normalize_messages(result: object) -> list[Any]:
    """Coerce a provider's return value into a list of messages.

    Lists and tuples are taken as they are. Anything else is not a message
    sequence and counts as no messages.
    """
    if isinstance(result, (list, tuple)):
        return list(result)
    return []
