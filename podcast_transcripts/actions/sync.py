# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Episode sync action.

This action copies publishable transcripts from the transcript tool into the
site's content directory. The inline speaker/timestamp markup is normalized on
the way, and the chapter list plus YouTube metadata become the front matter.
"""

import argparse
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from podcast_transcripts.actions.base import add_lang_argument, require_config
from podcast_transcripts.cli_io import prompt_overwrite
from podcast_transcripts.config import ConfigError, SiteConfig
from podcast_transcripts.hash_utils import text_matches_file
from podcast_transcripts.sources import (
    PLACEHOLDER_YOUTUBE_ID,
    YouTubeVideo,
    build_episode_metadata,
    chapters_file_path,
    find_all_episodes,
    find_publish_file,
    load_youtube_metadata,
    render_episode_document,
)
from podcast_transcripts.transcripts import normalize_inline_timestamps, parse_chapters_file


@dataclass(frozen=True)
class SyncAction:
    """
    `sync` subcommand.

    Writes `<content_dir>/<lang>/ep<N>.mdx` for one or all episodes.
    """

    name: str = "sync"
    help: str = "Sync episode transcripts from the transcript tool"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `sync` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        which = parser.add_mutually_exclusive_group(required=True)
        which.add_argument("--ep", type=int, metavar="N", help="Sync a single episode")
        which.add_argument("--all", action="store_true", help="Sync all episodes found")
        add_lang_argument(parser)
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite existing content records without asking",
        )

    def run(self, args: argparse.Namespace, config: SiteConfig | None) -> None:
        """
        Execute the sync.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            None

        Raises:
            ConfigError:
                If no episode could be synced, or if overwriting requires a
                confirmation that cannot be requested.
        """

        config = require_config(self, config)

        if args.all:
            episodes = find_all_episodes(config.examples_dir)
            print(f"Found {len(episodes)} episodes: {', '.join(str(e) for e in episodes)}")
        else:
            episodes = [int(args.ep)]

        videos = load_youtube_metadata(config.youtube_metadata)

        synced = 0
        for episode_number in episodes:
            if self.sync_episode(config, episode_number, args.lang, force=bool(args.force), videos=videos):
                synced += 1

        print(f"Synced {synced} of {len(episodes)} episode(s).")
        if episodes and synced == 0:
            raise ConfigError("No episode was synced")

    def sync_episode(
        self,
        config: SiteConfig,
        episode_number: int,
        lang: str,
        *,
        force: bool,
        videos: dict[int, YouTubeVideo],
        today: date | None = None,
    ) -> bool:
        """
        Sync one episode.

        Args:
            config:
                Loaded configuration.
            episode_number:
                Episode to sync.
            lang:
                Language tag.
            force:
                Overwrite an existing record without asking.
            videos:
                YouTube metadata by episode number.
            today:
                Publication date for the front matter (defaults to today).

        Returns:
            True if the content record is up to date afterwards.
        """

        ep_dir = config.examples_dir / f"ep{episode_number}"
        if not ep_dir.is_dir():
            print(f"error: Episode directory not found: {ep_dir}", file=sys.stderr)
            return False

        print(f"Syncing EP{episode_number} ({lang})...")

        publish_file = find_publish_file(ep_dir, lang)
        if publish_file is None:
            print(f"error: No publish file found for EP{episode_number} ({lang})", file=sys.stderr)
            return False
        print(f"  Source: {publish_file.name}")

        content = normalize_inline_timestamps(publish_file.read_text(encoding="utf-8"))

        chapters = parse_chapters_file(chapters_file_path(ep_dir, episode_number, lang))
        print(f"  Chapters: {len(chapters)}")

        video = videos.get(episode_number)
        if video is None:
            print("  WARNING: No YouTube metadata found - youtubeId needs manual update")

        meta = build_episode_metadata(
            episode_number=episode_number,
            lang=lang,
            content=content,
            chapters=chapters,
            video=video,
            hosts=config.hosts,
            series_name=config.series.name,
            today=today,
        )
        document = render_episode_document(meta, content)

        out_path = config.content_dir / lang / f"ep{episode_number}.mdx"
        if text_matches_file(document, out_path):
            print(f"  Unchanged: {self._rel_posix(config.base_dir, out_path)}")
            return True

        if out_path.exists() and not prompt_overwrite(out_path, force=force):
            print("  Skipped.")
            return False

        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(document, encoding="utf-8")
        print(f"  Output: {self._rel_posix(config.base_dir, out_path)}")

        if meta.youtube_id == PLACEHOLDER_YOUTUBE_ID:
            print("  WARNING: Remember to update youtubeId and publishedAt!")

        return True

    def _rel_posix(self, base_dir: Path, path: Path) -> str:
        """
        Compute a stable POSIX-style relative path.

        Args:
            base_dir:
                Base directory.
            path:
                Path to relativize.

        Returns:
            Relative path using '/' separators.
        """

        try:
            rel = path.resolve().relative_to(base_dir.resolve())
        except Exception:  # noqa: BLE001
            rel = path.resolve()
        return rel.as_posix()
