# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Static JSON API payloads.

The site publishes a small read-only API for agents:

- `/api/episodes.json`: index of all Korean episodes with metadata and chapter
  headings.
- `/api/episodes/ep<N>.json`: one episode with chapter-level transcripts parsed
  from the normalized body.
- `/api/openapi.json` and `/.well-known/ai-plugin.json` describe the API.

Only the Korean records are listed. English records add a `transcript_en` URL.
"""

from datetime import date
from typing import Any

from podcast_transcripts.content import Episode
from podcast_transcripts.sources import YouTubeVideo


def _episode_urls(site: str, episode: Episode, *, has_english: bool, detail: bool) -> dict[str, str]:
    urls: dict[str, str] = {"transcript_ko": f"{site}/ko/episodes/{episode.slug}"}
    if has_english:
        urls["transcript_en"] = f"{site}/en/episodes/{episode.slug}"
    if detail:
        urls["detail_api"] = f"{site}/api/episodes/{episode.slug}.json"
    urls["youtube"] = f"https://www.youtube.com/watch?v={episode.youtube_id}"
    if episode.notion_url:
        urls["resources"] = episode.notion_url
    return urls


def _title_en(episode: Episode, youtube_index: dict[str, YouTubeVideo]) -> str | None:
    video = youtube_index.get(episode.youtube_id)
    if video is None:
        return None
    return video.title_en or None


def english_episode_numbers(episodes: list[Episode]) -> set[int]:
    return {e.episode_number for e in episodes if e.lang == "en"}


def build_episode_index(
    *,
    site: str,
    episodes: list[Episode],
    youtube_index: dict[str, YouTubeVideo] | None = None,
    today: date | None = None,
) -> dict[str, Any]:
    """Build the `/api/episodes.json` payload.

    Args:
        site:
            Public site URL without trailing slash.
        episodes:
            All episode records (both languages).
        youtube_index:
            YouTube metadata by video ID, used for English titles.
        today:
            Value of the `updated` field (defaults to the current date).

    Returns:
        The index payload with Korean episodes, newest first.
    """

    youtube_index = youtube_index or {}
    english = english_episode_numbers(episodes)
    korean = sorted(
        (e for e in episodes if e.lang == "ko"),
        key=lambda e: e.episode_number,
        reverse=True,
    )

    entries: list[dict[str, Any]] = []
    for episode in korean:
        entries.append(
            {
                "number": episode.episode_number,
                "title": episode.title,
                "title_en": _title_en(episode, youtube_index),
                "description": episode.description,
                "published": episode.published_at.isoformat(),
                "duration": episode.duration,
                "youtube_id": episode.youtube_id,
                "hosts": list(episode.hosts),
                "chapters": [c.to_dict() for c in episode.chapters],
                "urls": _episode_urls(
                    site,
                    episode,
                    has_english=episode.episode_number in english,
                    detail=True,
                ),
            }
        )

    return {
        "site": site,
        "total": len(entries),
        "updated": (today or date.today()).isoformat(),
        "episodes": entries,
    }


def build_episode_detail(
    *,
    site: str,
    episode: Episode,
    has_english: bool,
    title_en: str | None = None,
) -> dict[str, Any]:
    """Build the `/api/episodes/ep<N>.json` payload with chapter transcripts."""

    return {
        "number": episode.episode_number,
        "title": episode.title,
        "title_en": title_en,
        "description": episode.description,
        "published": episode.published_at.isoformat(),
        "duration": episode.duration,
        "youtube_id": episode.youtube_id,
        "hosts": list(episode.hosts),
        "urls": _episode_urls(site, episode, has_english=has_english, detail=False),
        "chapters": [c.to_dict() for c in episode.chapter_blocks()],
    }


def build_episode_details(
    *,
    site: str,
    episodes: list[Episode],
    youtube_index: dict[str, YouTubeVideo] | None = None,
) -> dict[str, dict[str, Any]]:
    """Build all detail payloads, keyed by episode slug (`ep<N>`)."""

    youtube_index = youtube_index or {}
    english = english_episode_numbers(episodes)
    return {
        e.slug: build_episode_detail(
            site=site,
            episode=e,
            has_english=e.episode_number in english,
            title_en=_title_en(e, youtube_index),
        )
        for e in episodes
        if e.lang == "ko"
    }


def build_openapi_document(*, site: str, series_name: str) -> dict[str, Any]:
    """Describe the static API as an OpenAPI 3.1 document."""

    def ok(description: str) -> dict[str, Any]:
        return {"200": {"description": description, "content": {"application/json": {}}}}

    return {
        "openapi": "3.1.0",
        "info": {
            "title": f"{series_name} Podcast API",
            "description": (
                "Static JSON API for AI agents. Lists episodes with metadata and provides "
                "chapter-level transcripts."
            ),
            "version": "1.0.0",
        },
        "servers": [{"url": site}],
        "paths": {
            "/api/episodes.json": {
                "get": {
                    "operationId": "listEpisodes",
                    "summary": (
                        "Get all episodes with metadata (hosts, chapters, dates, URLs). Filter "
                        "client-side by hosts array, chapter titles, or published date."
                    ),
                    "responses": ok("Episode index"),
                },
            },
            "/api/episodes/{ep}.json": {
                "get": {
                    "operationId": "getEpisode",
                    "summary": (
                        "Get one episode with chapter-level transcripts. Each chapter has time, "
                        "title, speakers, and full transcript text."
                    ),
                    "parameters": [
                        {
                            "name": "ep",
                            "in": "path",
                            "required": True,
                            "description": 'Episode identifier, e.g. "ep86"',
                            "schema": {"type": "string", "pattern": r"^ep\d+$"},
                        }
                    ],
                    "responses": ok("Episode detail with transcripts"),
                },
            },
        },
    }


def build_plugin_manifest(*, site: str, series_name: str, description: str) -> dict[str, Any]:
    """Build the `/.well-known/ai-plugin.json` manifest pointing at the OpenAPI document."""

    model_name = "".join(ch for ch in series_name.lower() if ch.isalnum()) or "podcast"
    return {
        "schema_version": "v1",
        "name_for_human": series_name,
        "name_for_model": model_name,
        "description_for_human": description or series_name,
        "description_for_model": (
            f"{series_name} podcast. "
            f"GET {site}/api/episodes.json for episode index (filter by hosts, chapters, dates client-side). "
            f"GET {site}/api/episodes/ep{{N}}.json for full chapter-level transcripts. "
            "Each chapter has time, title, speakers[], and transcript text."
        ),
        "api": {"type": "openapi", "url": f"{site}/api/openapi.json"},
        "logo_url": f"{site}/favicon.svg",
        "contact_email": "",
        "legal_info_url": site,
    }
