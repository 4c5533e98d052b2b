#  This file is part of linter-core.
#
#  Copyright 2025 Canonical Ltd.
#
#  This program is free software: you can redistribute it and/or modify it
#  under the terms of the GNU Lesser General Public License version 3, as
#  published by the Free Software Foundation.
#
#  This program is distributed in the hope that it will be useful, but WITHOUT
#  ANY WARRANTY; without even the implied warranties of MERCHANTABILITY,
#  SATISFACTORY QUALITY, or FITNESS FOR A PARTICULAR PURPOSE.
#  See the GNU Lesser General Public License for more details.
#
#  You should have received a copy of the GNU Lesser General Public License
#  along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""Service classes for the business logic of the linter core."""

from linter_core.services.base import AppService
from linter_core.services.config import ConfigService
from linter_core.services.registry import LinterRegistryService

# ServiceFactory must be imported after the actual services
from linter_core.services.service_factory import ServiceFactory

__all__ = [
    "AppService",
    "ConfigService",
    "LinterRegistryService",
    "ServiceFactory",
]
