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
"""Configuration service."""

from __future__ import annotations

import abc
import os
import typing
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeVar, cast, final

import pydantic
import pydantic_core
from craft_cli import emit
from typing_extensions import override

from linter_core import _config, application, util
from linter_core.services import base

if TYPE_CHECKING:
    from linter_core.services.service_factory import ServiceFactory


T = TypeVar("T")


class ConfigHandler(abc.ABC):
    """An abstract class for configuration handlers."""

    def __init__(self, app: application.AppMetadata) -> None:
        self._app = app

    @abc.abstractmethod
    def get_raw(self, item: str) -> Any:  # noqa: ANN401
        """Get the raw value for a configuration item.

        :param item: the name of the configuration item.
        :returns: The raw value of the item.
        :raises: KeyError if the item cannot be found.
        """


@final
class AppEnvironmentHandler(ConfigHandler):
    """Configuration handler to get values from app-specific environment variables."""

    def __init__(self, app: application.AppMetadata) -> None:
        super().__init__(app)
        self._environ_prefix = f"{app.name.upper()}"

    @override
    def get_raw(self, item: str) -> str:
        return os.environ[f"{self._environ_prefix}_{item.upper()}"]


@final
class LinterEnvironmentHandler(ConfigHandler):
    """Configuration handler to get values from LINTER environment variables."""

    def __init__(self, app: application.AppMetadata) -> None:
        super().__init__(app)
        self._fields = _config.ConfigModel.model_fields

    @override
    def get_raw(self, item: str) -> str:
        # LINTER_* env vars only apply to items known to the linter core.
        if item not in self._fields:
            raise KeyError(f"{item!r} not a general linter-core config item.")

        return os.environ[f"LINTER_{item.upper()}"]


@final
class OverrideConfigHandler(ConfigHandler):
    """Configuration handler for values set at runtime by the host."""

    def __init__(self, app: application.AppMetadata) -> None:
        super().__init__(app)
        self.values: dict[str, Any] = {}

    @override
    def get_raw(self, item: str) -> Any:
        return self.values[item]


@final
class DefaultConfigHandler(ConfigHandler):
    """Configuration handler for getting default values."""

    def __init__(self, app: application.AppMetadata) -> None:
        super().__init__(app)
        self._config_model = app.ConfigModel
        self._cache: dict[str, Any] = {}

    @override
    def get_raw(self, item: str) -> Any:
        if item in self._cache:
            return self._cache[item]

        field = self._config_model.model_fields[item]
        if field.default is not pydantic_core.PydanticUndefined:
            self._cache[item] = field.default
            return field.default
        if field.default_factory is not None:
            default = field.default_factory()  # type: ignore[call-arg]
            self._cache[item] = default
            return default

        raise KeyError(f"config item {item!r} has no default value.")


class ConfigService(base.AppService):
    """Application-wide configuration access.

    Values are looked up in the app's environment variables, then in
    ``LINTER_*`` environment variables, then in values set with :meth:`set`,
    and finally fall back to the config model's defaults.
    """

    _handlers: list[ConfigHandler]

    def __init__(
        self,
        app: application.AppMetadata,
        services: ServiceFactory,
        *,
        extra_handlers: Iterable[type[ConfigHandler]] = (),
    ) -> None:
        super().__init__(app, services)
        self._extra_handlers = extra_handlers
        self._override_handler = OverrideConfigHandler(self._app)
        self._default_handler = DefaultConfigHandler(self._app)

    @override
    def setup(self) -> None:
        super().setup()
        self._handlers = [
            AppEnvironmentHandler(self._app),
            LinterEnvironmentHandler(self._app),
            *(handler(self._app) for handler in self._extra_handlers),
            self._override_handler,
        ]

    def get(self, item: str) -> Any:  # noqa: ANN401
        """Get the given configuration item."""
        field_info = self._get_field(item)

        for handler in self._handlers:
            try:
                value = handler.get_raw(item)
            except KeyError:
                continue
            else:
                break
        else:
            return self._default_handler.get_raw(item)

        if not isinstance(value, str):
            return value
        return self._convert_type(value, field_info.annotation)  # type: ignore[arg-type]

    def set(self, item: str, value: Any) -> None:  # noqa: ANN401
        """Set a configuration item for the rest of this session.

        Environment variables still take precedence over values set here.
        """
        field_info = self._get_field(item)
        adapter = pydantic.TypeAdapter(field_info.annotation)
        self._override_handler.values[item] = adapter.validate_python(value)
        emit.debug(f"Config item {item!r} set to {value!r}")

    def unset(self, item: str) -> None:
        """Remove a value previously set with :meth:`set`."""
        self._get_field(item)
        self._override_handler.values.pop(item, None)

    def _get_field(self, item: str) -> pydantic.fields.FieldInfo:
        if item not in self._app.ConfigModel.model_fields:
            raise KeyError(f"unknown config item: {item!r}")
        return self._app.ConfigModel.model_fields[item]

    def _convert_type(self, value: str, field_type: type[T]) -> T:
        """Convert the value to the appropriate type."""
        if typing.get_origin(field_type) is list:
            return cast(T, [part.strip() for part in value.split(",") if part.strip()])
        if isinstance(field_type, type):
            if issubclass(field_type, str):
                return cast(T, field_type(value))
            if issubclass(field_type, bool):
                return cast(T, util.strtobool(value))
        field_adapter = pydantic.TypeAdapter(field_type)
        return field_adapter.validate_strings(value)
