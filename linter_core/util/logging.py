# noqa: A005
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
"""Logging helpers."""

from __future__ import annotations

import traceback

from craft_cli import emit


def log_fault(summary: str, error: BaseException) -> None:
    """Report a contained fault without raising it.

    The summary goes to the debug stream and the full traceback to the trace
    stream, so a misbehaving provider is diagnosable with ``--verbosity=trace``.
    """
    emit.debug(f"{summary}: {error!r}")
    for line in traceback.format_exception(error):
        emit.trace(line.rstrip("\n"))
