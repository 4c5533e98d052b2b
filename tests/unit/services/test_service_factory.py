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
"""Tests for ServiceFactory"""

from __future__ import annotations

from unittest import mock

import pytest
import pytest_check
from linter_core import services
from linter_core.host import GrammarScopeMatcher, NeverIgnored


class FakeRegistry(services.LinterRegistryService):
    """A registry subclass a host might register."""


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("config", services.ConfigService),
        ("linter_registry", services.LinterRegistryService),
    ],
)
def test_default_services(name, expected):
    assert services.ServiceFactory.get_class(name) is expected


def test_register_override(fake_services):
    services.ServiceFactory.register("linter_registry", FakeRegistry)

    pytest_check.is_(services.ServiceFactory.get_class("linter_registry"), FakeRegistry)
    pytest_check.is_instance(fake_services.get("linter_registry"), FakeRegistry)


def test_get_class_unknown():
    with pytest.raises(KeyError, match="Not a registered service: 'nope'"):
        services.ServiceFactory.get_class("nope")


def test_reset_restores_defaults():
    services.ServiceFactory.register("linter_registry", FakeRegistry)
    services.ServiceFactory.register("extra", FakeRegistry)

    services.ServiceFactory.reset()

    assert services.ServiceFactory.get_class("linter_registry") is (
        services.LinterRegistryService
    )
    with pytest.raises(KeyError):
        services.ServiceFactory.get_class("extra")


@pytest.mark.parametrize(
    ("first_kwargs", "second_kwargs", "expected"),
    [
        ({}, {}, {}),
        (
            {"arg_1": None},
            {"arg_b": "something"},
            {"arg_1": None, "arg_b": "something"},
        ),
        (
            {"overridden": False},
            {"overridden": True},
            {"overridden": True},
        ),
    ],
)
def test_update_kwargs(app_metadata, first_kwargs, second_kwargs, check, expected):
    mock_class = mock.Mock(return_value=mock.Mock(spec_set=services.AppService))
    mock_class.__name__ = "MockService"
    services.ServiceFactory.register("testy", mock_class)
    factory = services.ServiceFactory(app_metadata)

    factory.update_kwargs("testy", **first_kwargs)
    factory.update_kwargs("testy", **second_kwargs)

    check.is_(factory.get("testy"), mock_class.return_value)
    with check:
        mock_class.assert_called_once_with(
            app=app_metadata, services=factory, **expected
        )
    with check:
        mock_class.return_value.setup.assert_called_once_with()


def test_get_caches(fake_services):
    config = fake_services.get("config")

    assert fake_services.get("config") is config


def test_factories_do_not_share_instances(app_metadata, fake_services):
    other = services.ServiceFactory(app_metadata)

    assert other.get("config") is not fake_services.get("config")


def test_get_registry_defaults(fake_services):
    registry = fake_services.get("linter_registry")

    pytest_check.is_instance(registry, services.LinterRegistryService)
    pytest_check.is_instance(registry._vcs, NeverIgnored)
    pytest_check.is_instance(registry._matcher, GrammarScopeMatcher)
    pytest_check.is_(registry._get_config(), fake_services.get("config"))


def test_get_unknown(fake_services):
    with pytest.raises(KeyError):
        fake_services.get("not_a_service")
