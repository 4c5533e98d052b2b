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
"""Configuration model for the linter core."""

from __future__ import annotations

import pydantic


class ConfigModel(pydantic.BaseModel):
    """User-facing toggles that steer when linting happens."""

    lint_on_fly: bool = True
    """Lint while the user types, not only on save."""
    lint_preview_tabs: bool = True
    """Lint editors that are still in a pending (preview) state."""
    ignore_vcs_ignored_paths: bool = True
    """Skip files that the version control system ignores."""
    ignored_glob: str = ""
    """Shell-style glob of paths that are never linted."""
    disabled_providers: list[str] = pydantic.Field(default_factory=list)
    """Names of providers that are registered but must not run."""
