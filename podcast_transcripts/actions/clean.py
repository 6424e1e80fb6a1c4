from __future__ import annotations

"""
Build output cleanup action.

The `clean` subcommand removes all files and directories inside the configured
output directory (`outdir`) without removing the directory itself.

For safety:
- If `--force` is not provided and the process is attached to an interactive TTY,
  the user is prompted for confirmation.
- If `--force` is not provided and the process is not interactive, the action
  aborts.
- The content directory and the config directory are never cleaned.
"""

import argparse
import shutil
from dataclasses import dataclass
from pathlib import Path

from podcast_transcripts.actions.base import require_config
from podcast_transcripts.cli_io import prompt_delete_contents
from podcast_transcripts.config import ConfigError, SiteConfig


@dataclass(frozen=True)
class CleanAction:
    """
    `clean` subcommand.

    Removes all files and directories inside the configured `outdir`.
    """

    name: str = "clean"
    help: str = "Empty the build output directory"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Do not prompt for confirmation",
        )

    def run(self, args: argparse.Namespace, config: SiteConfig | None) -> None:
        """
        Execute the cleanup.

        Raises:
            ConfigError:
                If the output directory is unsafe, cannot be cleaned, or if
                confirmation is required but cannot be requested.
        """

        config = require_config(self, config)

        outdir = config.outdir
        if self._is_dangerous_outdir(outdir, config):
            raise ConfigError(f"Refusing to clean dangerous outdir: {outdir}")

        if not prompt_delete_contents(outdir, force=bool(args.force)):
            print("Aborted.")
            return

        removed = self._empty_directory(outdir)
        print(f"Cleaned {removed} item(s) from: {outdir}")

    def _is_dangerous_outdir(self, path: Path, config: SiteConfig) -> bool:
        """
        Check whether a path looks too dangerous to delete recursively.

        Args:
            path:
                Candidate output directory.
            config:
                Loaded configuration (its own directories are protected).

        Returns:
            True if the path is considered dangerous.
        """

        resolved = path.resolve()

        if resolved == Path("/"):
            return True

        try:
            if resolved == Path.home().resolve():
                return True
        except RuntimeError:
            # Home cannot be resolved; do not treat the path as safe.
            return True

        protected = {config.base_dir.resolve(), config.content_dir.resolve(), config.srt2md_root.resolve()}
        if resolved in protected:
            return True

        # Never clean a directory that contains the content records.
        content_dir = config.content_dir.resolve()
        return resolved in content_dir.parents

    def _empty_directory(self, directory: Path) -> int:
        """
        Remove all entries within a directory.

        Args:
            directory:
                Directory whose contents should be removed.

        Returns:
            Number of entries removed.

        Raises:
            ConfigError:
                If the path is not a directory, or if deletion fails.
        """

        if not directory.exists():
            return 0
        if not directory.is_dir():
            raise ConfigError(f"outdir is not a directory: {directory}")

        removed = 0
        for child in directory.iterdir():
            try:
                if child.is_dir() and not child.is_symlink():
                    shutil.rmtree(child)
                else:
                    child.unlink()
                removed += 1
            except OSError as exc:
                raise ConfigError(f"Failed to remove '{child}': {exc}") from exc

        return removed
