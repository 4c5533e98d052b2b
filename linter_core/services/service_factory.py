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
"""Creates and shares the services used by a host application."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Literal, overload

from craft_cli import emit

from linter_core.services.base import AppService
from linter_core.services.config import ConfigService
from linter_core.services.registry import LinterRegistryService

if TYPE_CHECKING:
    from linter_core.application import AppMetadata


class ServiceFactory:
    """One instance of each service per host application.

    Services are built on first request and then shared, so the registry and
    every other consumer read the same configuration. Hosts swap in their own
    service classes with :meth:`register` and pass constructor arguments, such
    as the registry's ``vcs`` predicate, with :meth:`update_kwargs`.
    """

    DEFAULT_SERVICES: ClassVar[dict[str, type[AppService]]] = {
        "config": ConfigService,
        "linter_registry": LinterRegistryService,
    }
    _service_classes: ClassVar[dict[str, type[AppService]]] = {}

    def __init__(self, app: AppMetadata) -> None:
        self.app = app
        self._kwargs: dict[str, dict[str, Any]] = {}
        self._instances: dict[str, AppService] = {}

    @classmethod
    def register(cls, name: str, service_class: type[AppService]) -> None:
        """Use ``service_class`` for the service called ``name``."""
        cls._service_classes[name] = service_class

    @classmethod
    def reset(cls) -> None:
        """Forget registered overrides and go back to the default services."""
        cls._service_classes = dict(cls.DEFAULT_SERVICES)

    @classmethod
    def get_class(cls, name: str) -> type[AppService]:
        """Get the class registered for a service.

        :raises KeyError: if no service is registered under ``name``.
        """
        try:
            return cls._service_classes[name]
        except KeyError:
            raise KeyError(f"Not a registered service: {name!r}") from None

    def update_kwargs(self, service: str, **kwargs: Any) -> None:
        """Set keyword arguments for a service's constructor.

        Later calls add to and overwrite earlier ones. Arguments only apply to
        services that have not been built yet.
        """
        self._kwargs.setdefault(service, {}).update(kwargs)

    @overload
    def get(self, service: Literal["config"]) -> ConfigService: ...
    @overload
    def get(self, service: Literal["linter_registry"]) -> LinterRegistryService: ...
    @overload
    def get(self, service: str) -> AppService: ...
    def get(self, service: str) -> AppService:
        """Get a set-up service, building it on first use."""
        if service not in self._instances:
            service_class = self.get_class(service)
            instance = service_class(
                app=self.app, services=self, **self._kwargs.get(service, {})
            )
            emit.debug(f"Created {service!r} service ({service_class.__name__})")
            instance.setup()
            self._instances[service] = instance
        return self._instances[service]


ServiceFactory.reset()
