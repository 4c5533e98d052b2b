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
"""Metadata describing the host application that embeds the linter core."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from importlib import metadata
from typing import final

from linter_core import _config


@final
@dataclass(frozen=True)
class AppMetadata:
    """Metadata about the application hosting the linter registry."""

    name: str
    """The name of the application. Used as the environment variable prefix."""
    summary: str | None = None
    """A short summary of the application."""
    version: str = field(init=False)
    ConfigModel: type[_config.ConfigModel] = _config.ConfigModel
    """The configuration model to use for this app.

    Applications may subclass the default model to add their own items.
    """

    def __post_init__(self) -> None:
        setter = super().__setattr__

        # Try to determine the app version.
        try:
            # First, via the __version__ attribute on the app's main package.
            version = importlib.import_module(self.name).__version__
        except (AttributeError, ModuleNotFoundError):
            try:
                # If that fails, try via the installed metadata.
                version = metadata.version(self.name)
            except metadata.PackageNotFoundError:
                version = "dev"

        setter("version", version)
        if self.summary is None:
            try:
                setter("summary", metadata.metadata(self.name)["summary"])
            except metadata.PackageNotFoundError:
                pass
