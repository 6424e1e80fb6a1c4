# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Static output build action.

Reads all content records and writes the machine-readable surfaces of the site
into the configured output directory:

    api/episodes.json
    api/episodes/ep<N>.json
    api/openapi.json
    .well-known/ai-plugin.json
    <lang>/rss.xml
    sitemap.xml
    seo/<lang>/index.json, seo/<lang>/ep<N>.json
    llms.txt, llm.txt
    robots.txt

Files whose content did not change are left untouched.
"""

import argparse
import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

from podcast_transcripts.actions.base import require_config
from podcast_transcripts.api import (
    build_episode_details,
    build_episode_index,
    build_openapi_document,
    build_plugin_manifest,
)
from podcast_transcripts.config import LANGUAGES, SiteConfig
from podcast_transcripts.content import Episode, load_episodes
from podcast_transcripts.feeds import build_llms_txt, build_robots_txt, build_rss_xml
from podcast_transcripts.hash_utils import text_matches_file
from podcast_transcripts.seo import (
    SitemapEpisode,
    alternate_language,
    build_episode_head,
    build_series_head,
    build_sitemap_entries,
    build_sitemap_xml,
)
from podcast_transcripts.sources import read_youtube_videos, youtube_index_by_id


def render_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def build_site_files(config: SiteConfig, episodes: list[Episode], *, today: date | None = None) -> dict[str, str]:
    """
    Render every generated file.

    Args:
        config:
            Loaded configuration.
        episodes:
            All episode records.
        today:
            Date for the index `updated` field (defaults to today).

    Returns:
        Mapping of output path (relative, POSIX) to file content.
    """

    site = config.site
    youtube_index = youtube_index_by_id(read_youtube_videos(config.youtube_metadata))

    files: dict[str, str] = {}
    files["api/episodes.json"] = render_json(
        build_episode_index(site=site, episodes=episodes, youtube_index=youtube_index, today=today)
    )
    for slug, detail in build_episode_details(site=site, episodes=episodes, youtube_index=youtube_index).items():
        files[f"api/episodes/{slug}.json"] = render_json(detail)

    files["api/openapi.json"] = render_json(build_openapi_document(site=site, series_name=config.series.name))
    files[".well-known/ai-plugin.json"] = render_json(
        build_plugin_manifest(site=site, series_name=config.series.name, description=config.series.description)
    )

    for lang in LANGUAGES:
        files[f"{lang}/rss.xml"] = build_rss_xml(site=site, lang=lang, feed=config.feeds[lang], episodes=episodes)

    entries = build_sitemap_entries(
        site=site,
        episodes=[
            SitemapEpisode(lang=e.lang, episode_number=e.episode_number, published_at=e.published_at)
            for e in episodes
        ],
    )
    files["sitemap.xml"] = build_sitemap_xml(entries)

    for lang in LANGUAGES:
        files[f"seo/{lang}/index.json"] = render_json(build_series_head(site=site, lang=lang, series=config.series))

    pages = {(e.lang, e.episode_number): e.page_path for e in episodes}
    for episode in episodes:
        alternate_path = pages.get((alternate_language(episode.lang), episode.episode_number))
        head = build_episode_head(
            site=site,
            episode=episode,
            series_name=config.series.name,
            alternate_path=alternate_path,
        )
        files[f"seo/{episode.lang}/{episode.slug}.json"] = render_json(head)

    llms = build_llms_txt(site=site, series=config.series, episodes=episodes, youtube_index=youtube_index)
    files["llms.txt"] = llms
    files["llm.txt"] = llms
    files["robots.txt"] = build_robots_txt(site)

    return files


@dataclass(frozen=True)
class BuildAction:
    """
    `build` subcommand.

    Generates the JSON API and SEO files from the content directory.
    """

    name: str = "build"
    help: str = "Write JSON API, RSS, sitemap, SEO head and llms.txt files"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `build` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "--outdir",
            "-o",
            help="Output directory (default: 'outdir' from the config)",
        )

    def run(self, args: argparse.Namespace, config: SiteConfig | None) -> None:
        """
        Execute the build.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            None

        Raises:
            ContentError:
                If a content record is malformed.
        """

        config = require_config(self, config)
        outdir = Path(args.outdir) if args.outdir else config.outdir

        episodes = load_episodes(config.content_dir, default_hosts=config.hosts)
        if not episodes:
            print(f"WARNING: No content records found in: {config.content_dir}")

        files = build_site_files(config, episodes)

        written = 0
        for rel_path, content in files.items():
            target = outdir / rel_path
            if text_matches_file(content, target):
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            written += 1

        print(
            f"Built {len(files)} file(s) from {len(episodes)} episode record(s): "
            f"wrote {written}, unchanged {len(files) - written}. Output: {outdir}"
        )
