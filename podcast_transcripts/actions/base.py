from __future__ import annotations

"""
Shared action interface.

Actions implement a small protocol so the CLI can dynamically register arguments
and dispatch execution based on the selected subcommand.
"""

import argparse
from typing import Protocol

from podcast_transcripts.config import LANGUAGES, SiteConfig


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Implementations are expected to:
    - Provide a `name` used as the subcommand.
    - Provide a short `help` string for `--help`.
    - Declare whether they require a valid YAML config.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register action-specific CLI arguments.

        Args:
            parser:
                The subparser dedicated to this action.

        Returns:
            None
        """

    def run(self, args: argparse.Namespace, config: SiteConfig | None) -> None:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.

        Returns:
            None
        """


def require_config(action: Action, config: SiteConfig | None) -> SiteConfig:
    """Return the loaded config or fail for actions that were dispatched without one."""

    if config is None:
        raise RuntimeError(f"{type(action).__name__} requires a config, but none was provided")
    return config


def add_lang_argument(parser: argparse.ArgumentParser, *, default: str | None = "ko") -> None:
    """Register the shared `--lang` option."""

    parser.add_argument(
        "--lang",
        choices=LANGUAGES,
        default=default,
        help=f"Episode language (default: {default})" if default else "Episode language (default: all)",
    )
