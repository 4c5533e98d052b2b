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
"""String related functions."""

from collections.abc import Iterable


def strtobool(value: str) -> bool:
    """Convert a configuration string to a boolean.

    If the value is not a string, a TypeError is raised.
    If the value is not a valid boolean value, a ValueError is raised.
    """
    if not isinstance(value, str):  # type: ignore[reportUnnecessaryIsInstance]
        raise TypeError(f"Invalid str value: {str(value)}")

    value = value.strip().lower()
    if value in {"true", "t", "yes", "y", "on", "1"}:
        return True
    if value in {"false", "f", "no", "n", "off", "0"}:
        return False
    raise ValueError(f"Invalid boolean value: {value}")


def humanize_list(
    items: Iterable[str],
    conjunction: str,
    item_format: str = "{!r}",
    *,
    sort: bool = True,
) -> str:
    """Join items into a readable phrase such as "'a', 'b' and 'c'".

    :param items: values to join.
    :param conjunction: word placed before the final item (e.g. 'and').
    :param item_format: format string applied to each item.
    :param sort: if true, sort the formatted items first.
    """
    formatted = [item_format.format(item) for item in items]
    if not formatted:
        return ""

    if sort:
        formatted.sort()

    if len(formatted) == 1:
        return formatted[0]

    head = ", ".join(formatted[:-1])
    if len(formatted) > 2:  # noqa: PLR2004
        head += ","

    return f"{head} {conjunction} {formatted[-1]}"
