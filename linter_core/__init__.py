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
"""Orchestration core for pluggable lint providers."""

from linter_core.application import AppMetadata
from linter_core import lint
from linter_core.lint import EditContext, Scope
from linter_core.services import (
    AppService,
    ConfigService,
    LinterRegistryService,
    ServiceFactory,
)
from linter_core._config import ConfigModel

try:
    from ._version import __version__
except ImportError:  # pragma: no cover
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("linter-core")
    except PackageNotFoundError:
        __version__ = "dev"

__all__ = [
    "__version__",
    "AppMetadata",
    "AppService",
    "ConfigModel",
    "ConfigService",
    "EditContext",
    "LinterRegistryService",
    "Scope",
    "ServiceFactory",
    "lint",
]
