# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `podcast.yaml`, validating required keys, and
normalizing paths so that downstream actions can rely on a typed config object.
"""

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any

import yaml


LANGUAGES = ("ko", "en")

# Environment variable that overrides `srt2md_root` (may be set in `.env`).
SRT2MD_ROOT_ENV = "SRT2MD_ROOT"


@dataclass(frozen=True)
class PersonSpec:
    """
    Series author for the PodcastSeries JSON-LD.

    Attributes:
        name:
            Display name.
        alternate_name:
            Optional romanized or alternative name.
    """

    name: str
    alternate_name: str | None = None


@dataclass(frozen=True)
class FeedConfig:
    """RSS channel title and description for one language."""

    title: str
    description: str


@dataclass(frozen=True)
class SeriesConfig:
    """
    Podcast series metadata.

    Attributes:
        name:
            Series name, used in JSON-LD, llms.txt and generated descriptions.
        description:
            Short series description.
        summary:
            Lines quoted at the top of llms.txt.
        youtube_channel:
            Optional channel URL.
        image:
            Optional series image URL for JSON-LD.
        authors:
            Persons listed as series authors.
    """

    name: str
    description: str = ""
    summary: list[str] = field(default_factory=list)
    youtube_channel: str | None = None
    image: str | None = None
    authors: list[PersonSpec] = field(default_factory=list)


@dataclass(frozen=True)
class SiteConfig:
    """
    Parsed configuration for the podcast site pipeline.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths are resolved against.
        site:
            Public site URL without trailing slash.
        content_dir:
            Directory holding the `<lang>/ep<N>.mdx` content records.
        outdir:
            Output directory for the generated API and SEO files.
        srt2md_root:
            Root directory of the transcript tool (holds `examples/ep<N>`).
        youtube_metadata:
            JSON file with YouTube video metadata.
        hosts:
            Default host list for episodes.
        series:
            Series metadata.
        feeds:
            RSS channel settings per language.
    """

    config_path: Path
    base_dir: Path
    site: str
    content_dir: Path
    outdir: Path
    srt2md_root: Path
    youtube_metadata: Path
    hosts: list[str]
    series: SeriesConfig
    feeds: dict[str, FeedConfig]

    @property
    def examples_dir(self) -> Path:
        """Directory with one `ep<N>` folder per episode."""

        return self.srt2md_root / "examples"


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    return Path.cwd() / "podcast.yaml"


def _require_str(raw: dict[str, Any], key: str, context: str = "") -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{context}{key}' must be a non-empty string")
    return value.strip()


def _optional_str(raw: dict[str, Any], key: str, context: str = "") -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{context}{key}' must be a non-empty string if provided")
    return value.strip()


def _parse_string_list(value: Any, *, context: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"'{context}' must be a list if provided")

    out: list[str] = []
    for idx, item in enumerate(value, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"'{context}' entries must be non-empty strings (problem at index {idx})")
        out.append(item.strip())
    return out


def _parse_authors(value: Any) -> list[PersonSpec]:
    """
    Parse the `series.authors` list.

    Supported formats:
    - "Name"
    - {name: "Name", alternate_name: "..."}
    """

    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("'series.authors' must be a list if provided")

    authors: list[PersonSpec] = []
    for idx, item in enumerate(value, start=1):
        if isinstance(item, str) and item.strip():
            authors.append(PersonSpec(name=item.strip()))
            continue

        if not isinstance(item, dict):
            raise ConfigError(
                f"Each item in 'series.authors' must be a string or mapping (problem at index {idx})"
            )

        context = f"series.authors[{idx}]."
        authors.append(
            PersonSpec(
                name=_require_str(item, "name", context),
                alternate_name=_optional_str(item, "alternate_name", context),
            )
        )

    return authors


def _parse_series(value: Any) -> SeriesConfig:
    """
    Parse and validate the `series` section.

    Args:
        value:
            Raw YAML value for the `series` key.

    Returns:
        A SeriesConfig instance.

    Raises:
        ConfigError:
            If the section is missing required keys or malformed.
    """

    if not isinstance(value, dict):
        raise ConfigError("'series' must be a mapping")

    name = _require_str(value, "name", "series.")
    description = _optional_str(value, "description", "series.") or ""

    summary = _parse_string_list(value.get("summary"), context="series.summary")
    if not summary and description:
        summary = [description]

    return SeriesConfig(
        name=name,
        description=description,
        summary=summary,
        youtube_channel=_optional_str(value, "youtube_channel", "series."),
        image=_optional_str(value, "image", "series."),
        authors=_parse_authors(value.get("authors")),
    )


def _parse_feeds(value: Any, series: SeriesConfig) -> dict[str, FeedConfig]:
    """
    Parse the optional `feeds` section (one entry per language).

    Languages without an entry fall back to the series name and description.
    """

    if value is None:
        value = {}
    if not isinstance(value, dict):
        raise ConfigError("'feeds' must be a mapping if provided")

    unknown = sorted(str(k) for k in value if k not in LANGUAGES)
    if unknown:
        raise ConfigError(f"'feeds' has unsupported language(s): {', '.join(unknown)}")

    feeds: dict[str, FeedConfig] = {}
    for lang in LANGUAGES:
        entry = value.get(lang)
        if entry is None:
            feeds[lang] = FeedConfig(title=series.name, description=series.description)
            continue
        if not isinstance(entry, dict):
            raise ConfigError(f"'feeds.{lang}' must be a mapping")

        feeds[lang] = FeedConfig(
            title=_optional_str(entry, "title", f"feeds.{lang}.") or series.name,
            description=_optional_str(entry, "description", f"feeds.{lang}.") or series.description,
        )

    return feeds


def load_config(path: Path) -> SiteConfig:
    """
    Load and validate a `podcast.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated SiteConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            "No podcast.yaml found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    missing = [k for k in ("site", "content_dir", "series") if k not in raw]
    if missing:
        raise ConfigError(f"Config is missing required key(s): {', '.join(missing)}")

    site = _require_str(raw, "site")
    if not site.startswith(("http://", "https://")):
        raise ConfigError("'site' must be an absolute http(s) URL")

    content_dir = _require_str(raw, "content_dir")
    outdir = _optional_str(raw, "outdir") or "dist"

    # SRT2MD_ROOT takes precedence over the config file.
    srt2md_root = os.environ.get(SRT2MD_ROOT_ENV) or _optional_str(raw, "srt2md_root") or "../srt2md"
    youtube_metadata = _optional_str(raw, "youtube_metadata")

    hosts = _parse_string_list(raw.get("hosts"), context="hosts")
    series = _parse_series(raw.get("series"))
    feeds = _parse_feeds(raw.get("feeds"), series)

    # Interpret all paths relative to the config file location.
    base_dir = path.parent.resolve()
    srt2md_root_path = (base_dir / srt2md_root).resolve()
    if youtube_metadata:
        youtube_metadata_path = (base_dir / youtube_metadata).resolve()
    else:
        youtube_metadata_path = srt2md_root_path / "data" / "youtube_metadata.json"

    return SiteConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        site=site.rstrip("/"),
        content_dir=(base_dir / content_dir).resolve(),
        outdir=(base_dir / outdir).resolve(),
        srt2md_root=srt2md_root_path,
        youtube_metadata=youtube_metadata_path,
        hosts=hosts,
        series=series,
        feeds=feeds,
    )
