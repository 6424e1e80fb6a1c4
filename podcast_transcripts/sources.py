# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript tool output discovery.

The subtitle-to-markdown tool keeps one directory per episode:

    <srt2md_root>/
        data/youtube_metadata.json
        examples/ep83/
            outputs/ep83_kor_paragraphed_publish.md
            outputs/ep83_en_publish.md
            chapters/ep83_human.txt
            chapters/ep83_en_human.txt

This module finds the publishable transcript and chapter list for an episode,
reads the YouTube metadata, and renders the front matter of the content record.
"""

from dataclasses import dataclass, field
from datetime import date
import json
from pathlib import Path
import re
from typing import Any

from podcast_transcripts.config import ConfigError
from podcast_transcripts.transcripts import ChapterHeading
from podcast_transcripts.yaml_io import dump_front_matter


# Publish file suffixes per language, in order of preference.
PUBLISH_SUFFIXES: dict[str, tuple[str, ...]] = {
    "ko": ("_kor_paragraphed_publish.md", "_publish.md", "_kor_paragraphed_codex.md"),
    "en": ("_en_publish.md", "_en_paragraphed_publish.md"),
}

# Language markers in output file names. A file carrying another language's
# marker never matches, even through a generic suffix like `_publish.md`.
LANGUAGE_MARKERS: dict[str, str] = {"ko": "_kor_", "en": "_en_"}

PLACEHOLDER_YOUTUBE_ID = "REPLACE_ME"
UNTITLED_EPISODE = "Untitled Episode"

_EPISODE_DIR_RE = re.compile(r"^ep(?P<number>[0-9]+)$")
_FIRST_HEADING_RE = re.compile(r"^##\s+(?P<title>.+?)\s+\*[0-9:]+\*\s*$", re.M)
_TRAILING_TIME_RE = re.compile(r"\s+\*[0-9:]+\*$")
_YOUTUBE_EPISODE_PREFIX_RE = re.compile(r"^EP\s*[0-9]+\.\s*")


@dataclass(frozen=True)
class YouTubeVideo:
    """Subset of the YouTube metadata used for content records."""

    id: str
    title: str
    episode: int | None = None
    duration_string: str = ""
    description: str = ""
    thumbnail: str = ""
    title_en: str | None = None


@dataclass(frozen=True)
class EpisodeMetadata:
    """Front matter of a generated content record."""

    episode_number: int
    title: str
    description: str
    published_at: date
    duration: str
    youtube_id: str
    lang: str
    hosts: list[str] = field(default_factory=list)
    chapters: list[ChapterHeading] = field(default_factory=list)
    alternate_slug: str | None = None

    @property
    def thumbnail(self) -> str:
        return f"https://i.ytimg.com/vi/{self.youtube_id}/maxresdefault.jpg"

    def front_matter(self) -> dict[str, Any]:
        """Return the front matter mapping in the key order of the content schema."""

        return {
            "episodeNumber": self.episode_number,
            "title": self.title,
            "description": self.description,
            "publishedAt": self.published_at,
            "duration": self.duration,
            "youtubeId": self.youtube_id,
            "thumbnail": self.thumbnail,
            "hosts": list(self.hosts),
            "chapters": [c.to_dict() for c in self.chapters],
            "lang": self.lang,
            "alternateSlug": self.alternate_slug,
        }


def _video_from_json(entry: dict[str, Any]) -> YouTubeVideo:
    episode = entry.get("episode")
    return YouTubeVideo(
        id=str(entry.get("id") or ""),
        title=str(entry.get("title") or ""),
        episode=episode if isinstance(episode, int) and not isinstance(episode, bool) else None,
        duration_string=str(entry.get("duration_string") or ""),
        description=str(entry.get("description") or ""),
        thumbnail=str(entry.get("thumbnail") or ""),
        title_en=str(entry["title_en"]) if entry.get("title_en") else None,
    )


def read_youtube_videos(path: Path) -> list[YouTubeVideo]:
    """Read the YouTube metadata file.

    Returns:
        All video entries. A missing file yields an empty list and a warning.

    Raises:
        ConfigError:
            If the file exists but is not a JSON list.
    """

    if not path.exists():
        print(f"WARNING: YouTube metadata file not found: {path}")
        return []

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Failed to read YouTube metadata '{path}': {exc}") from exc

    if not isinstance(raw, list):
        raise ConfigError(f"YouTube metadata must be a JSON list: {path}")

    return [_video_from_json(entry) for entry in raw if isinstance(entry, dict)]


def load_youtube_metadata(path: Path) -> dict[int, YouTubeVideo]:
    """Map episode number to video. Videos without an episode number are skipped."""

    return {v.episode: v for v in read_youtube_videos(path) if v.episode}


def youtube_index_by_id(videos: list[YouTubeVideo]) -> dict[str, YouTubeVideo]:
    """Map YouTube video ID to video."""

    return {v.id: v for v in videos if v.id}


def find_publish_file(ep_dir: Path, lang: str) -> Path | None:
    """Find the publishable transcript of an episode for a language.

    Args:
        ep_dir:
            Episode directory (`examples/ep<N>`).
        lang:
            Language tag.

    Returns:
        The first file in `outputs/` that matches the preferred suffixes and
        carries no other language's marker, or None.
    """

    outputs_dir = ep_dir / "outputs"
    if not outputs_dir.is_dir():
        return None

    foreign = [marker for other, marker in LANGUAGE_MARKERS.items() if other != lang]
    names = sorted(
        p.name
        for p in outputs_dir.iterdir()
        if p.is_file() and not any(marker in p.name for marker in foreign)
    )
    for suffix in PUBLISH_SUFFIXES.get(lang, ()):
        for name in names:
            if name.endswith(suffix):
                return outputs_dir / name

    return None


def chapters_file_path(ep_dir: Path, episode_number: int, lang: str) -> Path:
    """Return the chapter list path of an episode (it may not exist)."""

    name = f"ep{episode_number}_human.txt" if lang == "ko" else f"ep{episode_number}_en_human.txt"
    return ep_dir / "chapters" / name


def find_all_episodes(examples_dir: Path) -> list[int]:
    """Return the numbers of all `ep<N>` directories, sorted numerically."""

    if not examples_dir.is_dir():
        return []

    episodes: list[int] = []
    for child in examples_dir.iterdir():
        match = _EPISODE_DIR_RE.match(child.name)
        if match and child.is_dir():
            episodes.append(int(match.group("number")))

    return sorted(episodes)


def extract_first_heading_title(content: str) -> str:
    """Return the title of the first `## Title  *MM:SS*` heading."""

    match = _FIRST_HEADING_RE.search(content)
    if match:
        return _TRAILING_TIME_RE.sub("", match.group("title").strip())
    return UNTITLED_EPISODE


def extract_duration(chapters: list[ChapterHeading]) -> str:
    """Estimate the episode duration as the last chapter start plus five minutes.

    Only minutes are estimated, seconds are always `00`.
    """

    if not chapters:
        return "00:00"

    parts = [int(p) for p in chapters[-1].time.split(":")]
    if len(parts) == 2:
        total_minutes = parts[0] + 5
    else:
        total_minutes = parts[0] * 60 + parts[1] + 5

    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:00"
    return f"{minutes}:00"


def build_episode_metadata(
    *,
    episode_number: int,
    lang: str,
    content: str,
    chapters: list[ChapterHeading],
    video: YouTubeVideo | None,
    hosts: list[str],
    series_name: str,
    today: date | None = None,
) -> EpisodeMetadata:
    """Combine transcript, chapter list and YouTube metadata into front matter.

    Args:
        episode_number:
            Episode number.
        lang:
            Language tag.
        content:
            Normalized transcript (used for the fallback title).
        chapters:
            Parsed chapter list.
        video:
            YouTube metadata for the episode, if known.
        hosts:
            Host names.
        series_name:
            Used for the fallback description.
        today:
            Publication date (defaults to the current date).

    Returns:
        The episode metadata.
    """

    title = extract_first_heading_title(content)
    if video is not None:
        title = _YOUTUBE_EPISODE_PREFIX_RE.sub("", video.title) or title

    description = ""
    if video is not None:
        description = video.description[:200]

    return EpisodeMetadata(
        episode_number=episode_number,
        title=title,
        description=description or f"{series_name} EP{episode_number}",
        published_at=today or date.today(),
        duration=(video.duration_string if video is not None else "") or extract_duration(chapters),
        youtube_id=(video.id if video is not None else "") or PLACEHOLDER_YOUTUBE_ID,
        lang=lang,
        hosts=list(hosts),
        chapters=list(chapters),
    )


def render_episode_document(meta: EpisodeMetadata, body: str) -> str:
    """Render a complete `.mdx` content record."""

    return dump_front_matter(meta.front_matter()) + body
