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
"""Decisions about whether, and for which providers, a lint should happen."""

from __future__ import annotations

import os
from fnmatch import fnmatch
from typing import TYPE_CHECKING

from craft_cli import emit

if TYPE_CHECKING:  # pragma: no cover
    from linter_core.host import ConfigStore, ScopeMatcher, VcsIgnorePredicate
    from linter_core.lint.record import ProviderRecord
    from linter_core.lint.types import EditContext


def is_path_ignored(
    path: str,
    config: ConfigStore,
    vcs: VcsIgnorePredicate,
) -> bool:
    """Whether the user's ignore settings exclude ``path`` from linting."""
    ignored_glob = config.get("ignored_glob")
    if ignored_glob and (
        fnmatch(path, ignored_glob) or fnmatch(os.path.basename(path), ignored_glob)
    ):
        emit.debug(f"Not linting {path!r}: matches ignored glob {ignored_glob!r}")
        return True
    if config.get("ignore_vcs_ignored_paths") and vcs.is_ignored(path):
        emit.debug(f"Not linting {path!r}: ignored by version control")
        return True
    return False


def should_lint(
    context: EditContext,
    config: ConfigStore,
    vcs: VcsIgnorePredicate,
) -> bool:
    """Decide whether an edit event should be linted at all.

    Checks run in order and stop at the first failure:

    1. the editor must be saved to a file;
    2. the file must not be ignored (glob or version control);
    3. on-change events need ``lint_on_fly``;
    4. save or open events on a preview tab need ``lint_preview_tabs``.
    """
    path = context.file_path
    if not path:
        emit.debug("Not linting: editor is not saved to disk")
        return False
    if is_path_ignored(path, config, vcs):
        return False
    if context.on_change:
        if not config.get("lint_on_fly"):
            emit.debug(f"Not linting {path!r}: linting on change is disabled")
            return False
    elif context.surface.is_pending_preview() and not config.get("lint_preview_tabs"):
        emit.debug(f"Not linting {path!r}: linting preview tabs is disabled")
        return False
    return True


def should_trigger_provider(
    record: ProviderRecord,
    context: EditContext,
    matcher: ScopeMatcher,
) -> bool:
    """Whether a registered provider should run for this edit event.

    The scope matcher is always consulted, exactly once.
    """
    matches = matcher.matches(record.provider.grammar_scopes, context.surface)
    if context.on_change and not record.lints_on_change:
        return False
    return matches
