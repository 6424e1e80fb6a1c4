# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Smoke-test helpers.

Run via:

    poetry run python -m podcast_transcripts.smoke

This is intentionally lightweight: it loads the config and every content record,
parses the chapters and checks that the stored bodies are already normalized.
Nothing is written.
"""

import argparse
import json
from pathlib import Path

from podcast_transcripts.config import ConfigError, load_config
from podcast_transcripts.content import ContentError, load_episodes
from podcast_transcripts.transcripts import normalize_inline_timestamps


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Podcast transcripts smoke test")
    parser.add_argument(
        "--config",
        default="podcast.yaml",
        help="Path to podcast.yaml (default: ./podcast.yaml)",
    )
    parser.add_argument(
        "--print-speakers",
        action="store_true",
        help="Print the speakers found per episode as JSON",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config_path = Path(str(args.config))

    try:
        cfg = load_config(config_path)
        episodes = load_episodes(cfg.content_dir, default_hosts=cfg.hosts)
    except (ConfigError, ContentError) as exc:
        print(f"CONFIG ERROR: {exc}")
        return 2

    chapter_count = 0
    empty_chapters = 0
    not_normalized: list[str] = []
    speakers: dict[str, list[str]] = {}

    for episode in episodes:
        key = f"{episode.lang}/{episode.slug}"
        blocks = episode.chapter_blocks()
        chapter_count += len(blocks)
        empty_chapters += len([b for b in blocks if not b.transcript])

        seen: list[str] = []
        for block in blocks:
            seen.extend(s for s in block.speakers if s not in seen)
        speakers[key] = seen

        if normalize_inline_timestamps(episode.body) != episode.body:
            not_normalized.append(key)

    print(f"Config: {cfg.config_path}")
    print(f"Content dir: {cfg.content_dir}")
    print(f"Episodes: {len(episodes)}")
    print(f"Chapters: {chapter_count}")
    print(f"Chapters without transcript: {empty_chapters}")

    if bool(args.print_speakers):
        print(json.dumps(speakers, ensure_ascii=False, sort_keys=True, indent=2))

    if not_normalized:
        print(f"INTERNAL ERROR: content records are not normalized: {', '.join(not_normalized)}")
        return 3

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
