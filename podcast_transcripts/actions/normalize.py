# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Standalone timestamp normalization action.

Runs the inline timestamp normalizer on a single markdown file without
touching the content directory. Useful for checking a new transcript before
syncing it.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from podcast_transcripts.cli_io import prompt_overwrite
from podcast_transcripts.config import ConfigError, SiteConfig
from podcast_transcripts.transcripts import normalize_inline_timestamps


@dataclass(frozen=True)
class NormalizeAction:
    """
    `normalize` subcommand.

    This action does not require a YAML config.
    """

    name: str = "normalize"
    help: str = "Normalize inline timestamps of a transcript file"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `normalize` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument("input", help="Transcript markdown file")
        parser.add_argument(
            "-o",
            "--output",
            help="Write the result to this file instead of stdout",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing output file",
        )

    def run(self, args: argparse.Namespace, config: SiteConfig | None) -> None:
        """
        Execute the normalizer.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Unused for this action.

        Returns:
            None

        Raises:
            ConfigError:
                If the input cannot be read.
        """

        _ = config
        source = Path(args.input)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read transcript '{source}': {exc}") from exc

        result = normalize_inline_timestamps(text)

        if not args.output:
            sys.stdout.write(result)
            if not result.endswith("\n"):
                sys.stdout.write("\n")
            return

        dest = Path(args.output)
        if dest.exists() and not prompt_overwrite(dest, force=bool(args.force)):
            print("Aborted.")
            return

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(result, encoding="utf-8")
        print(f"Wrote normalized transcript to: {dest}")
