# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""SEO helpers.

Builders for the search-engine facing parts of the site: ISO-8601 durations,
hreflang alternates, canonical URLs, the XML sitemap and schema.org JSON-LD.
All functions are pure string/dict builders. `build_series_head` and
`build_episode_head` bundle them into the per-page head data the site reads.
"""

from dataclasses import asdict, dataclass
from datetime import date
import html
from typing import Any
from urllib.parse import urljoin

from podcast_transcripts.config import PersonSpec, SeriesConfig
from podcast_transcripts.content import Episode


SCHEMA_CONTEXT = "https://schema.org"


@dataclass(frozen=True)
class HreflangLink:
    hreflang: str
    href: str


@dataclass(frozen=True)
class SitemapEntry:
    loc: str
    lastmod: str | None = None


@dataclass(frozen=True)
class SitemapEpisode:
    lang: str
    episode_number: int
    published_at: date


def _absolute(site: str, path: str) -> str:
    return urljoin(site, path)


def alternate_language(lang: str) -> str:
    return "en" if lang == "ko" else "ko"


def duration_to_iso(duration: str) -> str:
    """Convert `MM:SS` or `H:MM:SS` into an ISO-8601 duration like `PT1H2M3S`.

    Unparseable input yields `PT0S`. Zero components are omitted.
    """

    try:
        parts = [int(p) for p in duration.split(":")]
    except ValueError:
        return "PT0S"

    if len(parts) == 3:
        hours, minutes, seconds = parts
    else:
        hours = 0
        minutes = parts[0]
        seconds = parts[1] if len(parts) > 1 else 0

    segments: list[str] = []
    if hours:
        segments.append(f"{hours}H")
    if minutes:
        segments.append(f"{minutes}M")
    if seconds:
        segments.append(f"{seconds}S")
    return "PT" + ("".join(segments) or "0S")


def build_hreflang_links(
    *,
    site: str,
    lang: str,
    alternate_path: str | None = None,
    canonical_path: str | None = None,
) -> list[HreflangLink]:
    """Build hreflang links for a page.

    The page itself is always listed. The other language and `x-default` are
    only listed when an alternate path exists.
    """

    links = [HreflangLink(hreflang=lang, href=_absolute(site, canonical_path or f"/{lang}"))]
    if alternate_path:
        links.append(HreflangLink(hreflang=alternate_language(lang), href=_absolute(site, alternate_path)))
        links.append(HreflangLink(hreflang="x-default", href=_absolute(site, "/")))
    return links


def build_canonical_url(*, site: str, path: str) -> str:
    return _absolute(site, path)


def build_sitemap_entries(*, site: str, episodes: list[SitemapEpisode]) -> list[SitemapEntry]:
    """Sitemap entries for both language roots followed by every episode page."""

    entries = [
        SitemapEntry(loc=_absolute(site, "/ko")),
        SitemapEntry(loc=_absolute(site, "/en")),
    ]
    for episode in episodes:
        entries.append(
            SitemapEntry(
                loc=_absolute(site, f"/{episode.lang}/episodes/ep{episode.episode_number}"),
                lastmod=episode.published_at.isoformat(),
            )
        )
    return entries


def build_sitemap_xml(entries: list[SitemapEntry]) -> str:
    urls = []
    for entry in entries:
        lastmod = f"<lastmod>{html.escape(entry.lastmod)}</lastmod>" if entry.lastmod else ""
        urls.append(f"<url><loc>{html.escape(entry.loc)}</loc>{lastmod}</url>")

    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        + "".join(urls)
        + "</urlset>"
    )


def resolve_episode_thumbnail(*, thumbnail: str | None, youtube_id: str | None) -> str | None:
    """Prefer the explicit thumbnail, fall back to the YouTube `hqdefault` image."""

    if thumbnail:
        return thumbnail
    if youtube_id:
        return f"https://i.ytimg.com/vi/{youtube_id}/hqdefault.jpg"
    return None


def build_podcast_episode_json_ld(
    *,
    site: str,
    lang: str,
    episode_number: int,
    title: str,
    description: str,
    published_at: str,
    duration: str,
    youtube_id: str,
    series_name: str,
    thumbnail: str | None = None,
) -> dict[str, Any]:
    """Build the `PodcastEpisode` JSON-LD payload.

    Image fields are omitted when there is no thumbnail.
    """

    name = f"EP {episode_number}: {title}"
    media: dict[str, Any] = {
        "@type": "VideoObject",
        "name": name,
        "embedUrl": f"https://www.youtube.com/embed/{youtube_id}",
    }
    if thumbnail:
        media["thumbnailUrl"] = thumbnail

    payload: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "PodcastEpisode",
        "name": name,
        "description": description,
        "datePublished": published_at,
        "duration": duration_to_iso(duration),
        "episodeNumber": episode_number,
        "url": _absolute(site, f"/{lang}/episodes/ep{episode_number}"),
    }
    if thumbnail:
        payload["image"] = thumbnail
    payload["partOfSeries"] = {
        "@type": "PodcastSeries",
        "@id": f"{site}#podcast",
        "name": series_name,
    }
    payload["associatedMedia"] = media
    return payload


def build_podcast_series_json_ld(
    *,
    site: str,
    lang: str,
    name: str,
    description: str,
    image: str | None = None,
    authors: list[PersonSpec] | None = None,
) -> dict[str, Any]:
    """Build the `PodcastSeries` JSON-LD payload."""

    people: list[dict[str, Any]] = []
    for person in authors or []:
        entry: dict[str, Any] = {"@type": "Person", "name": person.name}
        if person.alternate_name:
            entry["alternateName"] = person.alternate_name
        people.append(entry)

    payload: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "PodcastSeries",
        "@id": f"{site}#podcast",
        "name": name,
        "description": description,
        "url": _absolute(site, f"/{lang}"),
        "inLanguage": lang,
    }
    if image:
        payload["image"] = image
    payload["author"] = people
    return payload


def build_series_head(*, site: str, lang: str, series: SeriesConfig) -> dict[str, Any]:
    """Head data for a language root page: canonical URL, hreflang links and series JSON-LD."""

    path = f"/{lang}"
    return {
        "canonical": build_canonical_url(site=site, path=path),
        "hreflang": [
            asdict(link)
            for link in build_hreflang_links(
                site=site,
                lang=lang,
                canonical_path=path,
                alternate_path=f"/{alternate_language(lang)}",
            )
        ],
        "jsonLd": build_podcast_series_json_ld(
            site=site,
            lang=lang,
            name=series.name,
            description=series.description,
            image=series.image,
            authors=series.authors,
        ),
    }


def build_episode_head(
    *,
    site: str,
    episode: Episode,
    series_name: str,
    alternate_path: str | None = None,
) -> dict[str, Any]:
    """
    Head data for an episode page.

    Args:
        site:
            Absolute site URL.
        episode:
            The episode record.
        series_name:
            Name used for `partOfSeries`.
        alternate_path:
            Path of the same episode in the other language, if it exists.

    Returns:
        Mapping with `canonical`, `hreflang` and `jsonLd` keys.
    """

    links = build_hreflang_links(
        site=site,
        lang=episode.lang,
        canonical_path=episode.page_path,
        alternate_path=alternate_path,
    )
    return {
        "canonical": build_canonical_url(site=site, path=episode.page_path),
        "hreflang": [asdict(link) for link in links],
        "jsonLd": build_podcast_episode_json_ld(
            site=site,
            lang=episode.lang,
            episode_number=episode.episode_number,
            title=episode.title,
            description=episode.description,
            published_at=episode.published_at.isoformat(),
            duration=episode.duration,
            youtube_id=episode.youtube_id,
            series_name=series_name,
            thumbnail=resolve_episode_thumbnail(thumbnail=episode.thumbnail, youtube_id=episode.youtube_id),
        ),
    }
