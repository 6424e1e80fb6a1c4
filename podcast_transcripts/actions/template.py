# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `podcast.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from podcast_transcripts.config import ConfigError, SiteConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template podcast.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Public site URL (used for canonical URLs, API links and feeds)",
            "site: https://aifrontier.kr",
            "",
            "# Content records: <content_dir>/<lang>/ep<N>.mdx",
            "content_dir: src/content/episodes",
            "",
            "# Output directory of the 'build' command",
            "outdir: dist",
            "",
            "# Checkout of the subtitle-to-markdown tool (holds examples/ep<N>).",
            "# The SRT2MD_ROOT environment variable (or .env entry) takes precedence.",
            "srt2md_root: ../srt2md",
            "",
            "# YouTube metadata JSON (optional; defaults to <srt2md_root>/data/youtube_metadata.json)",
            "# youtube_metadata: ../srt2md/data/youtube_metadata.json",
            "",
            "# Default hosts for episodes without a 'hosts' list",
            "hosts:",
            "  - 노정석",
            "  - 최승준",
            "",
            "series:",
            "  name: AI Frontier",
            "  description: AI 심층 대화 팟캐스트",
            "  # Lines quoted at the top of llms.txt (optional; defaults to the description)",
            "  summary:",
            "    - AI 심층 대화 팟캐스트: 노정석, 최승준이 매주 인공지능의 최신 기술·산업·철학을 깊이 있게 이야기합니다.",
            "    - A bilingual (Korean/English) deep-dive AI podcast by Chester Roh and Seungjoon Choi.",
            "  youtube_channel: https://www.youtube.com/@chester_roh",
            "  # image: https://aifrontier.kr/og.png",
            "  authors:",
            "    - name: 노정석",
            "      alternate_name: Chester Roh",
            "    - name: 최승준",
            "      alternate_name: Seungjoon Choi",
            "",
            "# RSS channel per language (optional; defaults to the series name/description)",
            "feeds:",
            "  ko:",
            "    title: AI Frontier (한국어)",
            "    description: AI 심층 대화 팟캐스트 - 노정석, 최승준",
            "  en:",
            "    title: AI Frontier (English)",
            "    description: AI Deep Dive Podcast - Chester Roh, Seungjoon Choi",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="podcast.yaml",
            help="Destination path for the template (default: ./podcast.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: SiteConfig | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        if dest.exists() and not args.force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
        print(f"Wrote template config to: {dest}")
