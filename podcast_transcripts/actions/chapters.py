# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Chapter inspection action.

Prints the chapter blocks that the JSON API would publish for one stored
episode, which makes it easy to check speaker attribution after a sync.
"""

import argparse
import json
from dataclasses import dataclass

from podcast_transcripts.actions.base import add_lang_argument, require_config
from podcast_transcripts.config import ConfigError, SiteConfig
from podcast_transcripts.content import load_episode


@dataclass(frozen=True)
class ChaptersAction:
    """
    `chapters` subcommand.

    Parses `<content_dir>/<lang>/ep<N>.mdx` and prints its chapters as JSON.
    """

    name: str = "chapters"
    help: str = "Print the parsed chapter transcripts of an episode"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("ep", type=int, metavar="N", help="Episode number")
        add_lang_argument(parser)
        parser.add_argument(
            "--summary",
            action="store_true",
            help="Only print time, title and speakers of each chapter",
        )

    def run(self, args: argparse.Namespace, config: SiteConfig | None) -> None:
        """
        Print the chapters.

        Raises:
            ConfigError:
                If the content record does not exist.
        """

        config = require_config(self, config)

        path = config.content_dir / args.lang / f"ep{args.ep}.mdx"
        if not path.is_file():
            raise ConfigError(f"No content record for EP{args.ep} ({args.lang}): {path}")

        episode = load_episode(path, default_hosts=config.hosts)
        chapters = [c.to_dict() for c in episode.chapter_blocks()]
        if args.summary:
            for chapter in chapters:
                chapter.pop("transcript")

        print(json.dumps(chapters, ensure_ascii=False, indent=2))
