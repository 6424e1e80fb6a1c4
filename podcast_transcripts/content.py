# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Episode content records.

Each episode is stored as `<content_dir>/<lang>/ep<N>.mdx`: YAML front matter
with the episode metadata followed by the normalized transcript body. This
module reads those files into typed records and validates the front matter.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from podcast_transcripts.config import LANGUAGES
from podcast_transcripts.transcripts import ChapterBlock, ChapterHeading, parse_chapters
from podcast_transcripts.yaml_io import split_front_matter


@dataclass(frozen=True)
class ContentError(RuntimeError):
    """Raised for malformed episode content records."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


@dataclass(frozen=True)
class Episode:
    """
    One episode in one language.

    Attributes:
        episode_number:
            Episode number shared by all language variants.
        title:
            Episode title.
        description:
            Short description.
        published_at:
            Publication date.
        duration:
            Duration as `MM:SS` or `H:MM:SS`.
        youtube_id:
            YouTube video ID.
        lang:
            Language tag (`ko` or `en`).
        hosts:
            Host names.
        chapters:
            Chapter headings from the front matter.
        thumbnail:
            Optional thumbnail URL.
        alternate_slug:
            Optional slug of the other language variant.
        notion_url:
            Optional link to show notes/resources.
        body:
            Canonical transcript markdown.
        path:
            Source file, if loaded from disk.
    """

    episode_number: int
    title: str
    description: str
    published_at: date
    duration: str
    youtube_id: str
    lang: str
    hosts: list[str] = field(default_factory=list)
    chapters: list[ChapterHeading] = field(default_factory=list)
    thumbnail: str | None = None
    alternate_slug: str | None = None
    notion_url: str | None = None
    body: str = ""
    path: Path | None = None

    @property
    def slug(self) -> str:
        return f"ep{self.episode_number}"

    @property
    def page_path(self) -> str:
        """Site-relative path of the episode page."""

        return f"/{self.lang}/episodes/{self.slug}"

    def chapter_blocks(self) -> list[ChapterBlock]:
        """Parse the transcript body into chapter blocks."""

        return parse_chapters(self.body)


def _require(data: dict[str, Any], key: str, kind: type, path: Path | None) -> Any:
    value = data.get(key)
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ContentError(f"front matter field '{key}' must be of type {kind.__name__}", path)
    return value


def _optional_str(data: dict[str, Any], key: str, path: Path | None) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ContentError(f"front matter field '{key}' must be a string if provided", path)
    return value


def _coerce_date(value: Any, path: Path | None) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            pass
    raise ContentError(f"front matter field 'publishedAt' is not a valid date: {value!r}", path)


def _parse_chapter_list(value: Any, path: Path | None) -> list[ChapterHeading]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ContentError("front matter field 'chapters' must be a list", path)

    chapters: list[ChapterHeading] = []
    for idx, item in enumerate(value, start=1):
        if not isinstance(item, dict):
            raise ContentError(f"chapters[{idx}] must be a mapping", path)
        time = item.get("time")
        title = item.get("title")
        if not isinstance(time, str) or not isinstance(title, str):
            raise ContentError(f"chapters[{idx}] needs string 'time' and 'title' fields", path)
        chapters.append(ChapterHeading(time=time, title=title))
    return chapters


def parse_episode(text: str, *, default_hosts: list[str] | None = None, path: Path | None = None) -> Episode:
    """Parse an `.mdx` content record.

    Args:
        text:
            Full file content (front matter and body).
        default_hosts:
            Hosts used when the front matter does not list any.
        path:
            Source path for error messages.

    Returns:
        The parsed episode.

    Raises:
        ContentError:
            If the front matter is missing or does not match the schema.
    """

    raw_front_matter, body = split_front_matter(text)
    if raw_front_matter is None:
        raise ContentError("missing front matter", path)

    try:
        data = yaml.safe_load(raw_front_matter)
    except yaml.YAMLError as exc:
        raise ContentError(f"invalid front matter YAML: {exc}", path) from exc

    if not isinstance(data, dict):
        raise ContentError("front matter must be a mapping", path)

    lang = data.get("lang")
    if lang not in LANGUAGES:
        raise ContentError(f"front matter field 'lang' must be one of: {', '.join(LANGUAGES)}", path)

    hosts_value = data.get("hosts")
    if hosts_value is None:
        hosts = list(default_hosts or [])
    elif isinstance(hosts_value, list) and all(isinstance(h, str) for h in hosts_value):
        hosts = list(hosts_value)
    else:
        raise ContentError("front matter field 'hosts' must be a list of strings", path)

    return Episode(
        episode_number=_require(data, "episodeNumber", int, path),
        title=_require(data, "title", str, path),
        description=_require(data, "description", str, path),
        published_at=_coerce_date(data.get("publishedAt"), path),
        duration=_require(data, "duration", str, path),
        youtube_id=_require(data, "youtubeId", str, path),
        lang=lang,
        hosts=hosts,
        chapters=_parse_chapter_list(data.get("chapters"), path),
        thumbnail=_optional_str(data, "thumbnail", path),
        alternate_slug=_optional_str(data, "alternateSlug", path),
        notion_url=_optional_str(data, "notionUrl", path),
        body=body,
        path=path,
    )


def load_episode(path: Path, *, default_hosts: list[str] | None = None) -> Episode:
    """Read one content record from disk."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentError(f"Failed to read content file: {exc}", path) from exc

    return parse_episode(text, default_hosts=default_hosts, path=path)


def load_episodes(content_dir: Path, *, default_hosts: list[str] | None = None) -> list[Episode]:
    """Load all `.mdx` records below a content directory.

    Returns:
        Episodes sorted by file path. A missing directory yields an empty list.
    """

    if not content_dir.is_dir():
        return []

    return [
        load_episode(p, default_hosts=default_hosts)
        for p in sorted(content_dir.glob("**/*.mdx"))
        if p.is_file()
    ]
