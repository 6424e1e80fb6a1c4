# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Text feeds: RSS, llms.txt and robots.txt."""

from datetime import datetime, timezone
from email.utils import format_datetime
import html

from podcast_transcripts.config import FeedConfig, SeriesConfig
from podcast_transcripts.content import Episode
from podcast_transcripts.sources import YouTubeVideo


def _esc(text: str | None) -> str:
    return html.escape(text or "", quote=True)


def _rss_pubdate(episode: Episode) -> str:
    published = datetime(
        episode.published_at.year,
        episode.published_at.month,
        episode.published_at.day,
        tzinfo=timezone.utc,
    )
    return format_datetime(published)


def build_rss_xml(*, site: str, lang: str, feed: FeedConfig, episodes: list[Episode]) -> str:
    """Build an RSS 2.0 feed for the episodes of one language.

    Args:
        site:
            Public site URL without trailing slash.
        lang:
            Language tag. Episodes in other languages are ignored.
        feed:
            Channel title and description.
        episodes:
            Episode records.

    Returns:
        The feed XML, newest episode first.
    """

    selected = sorted(
        (e for e in episodes if e.lang == lang),
        key=lambda e: e.published_at,
        reverse=True,
    )

    items_xml: list[str] = []
    for episode in selected:
        link = f"{site}{episode.page_path}"
        items_xml.append(
            "\n".join(
                [
                    "    <item>",
                    f"      <title>{_esc(f'EP {episode.episode_number}: {episode.title}')}</title>",
                    f"      <link>{_esc(link)}</link>",
                    f'      <guid isPermaLink="true">{_esc(link)}</guid>',
                    f"      <description>{_esc(episode.description)}</description>",
                    f"      <pubDate>{_rss_pubdate(episode)}</pubDate>",
                    "    </item>",
                ]
            )
        )

    self_link = f"{site}/{lang}/rss.xml"
    rss_lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">',
        "  <channel>",
        f"    <title>{_esc(feed.title)}</title>",
        f"    <description>{_esc(feed.description)}</description>",
        f"    <link>{_esc(site + '/')}</link>",
        f'    <atom:link href="{_esc(self_link)}" rel="self" type="application/rss+xml" />',
        f"    <language>{_esc(lang)}</language>",
        *items_xml,
        "  </channel>",
        "</rss>",
    ]
    return "\n".join(rss_lines) + "\n"


def build_llms_txt(
    *,
    site: str,
    series: SeriesConfig,
    episodes: list[Episode],
    youtube_index: dict[str, YouTubeVideo] | None = None,
) -> str:
    """Build the llms.txt overview of the site.

    Korean episodes are listed newest first. An English title from the YouTube
    metadata is added when it differs from the episode title.
    """

    youtube_index = youtube_index or {}
    selected = sorted(
        (e for e in episodes if e.lang == "ko"),
        key=lambda e: e.episode_number,
        reverse=True,
    )

    lines = [f"# {series.name}"]
    lines.extend(f"> {line}" for line in series.summary)
    lines.append("")
    lines.append(f"- Site: {site}")
    if series.youtube_channel:
        lines.append(f"- YouTube: {series.youtube_channel}")
    lines.append(f"- Korean RSS: {site}/ko/rss.xml")
    lines.append(f"- English RSS: {site}/en/rss.xml")
    lines.extend(["", "## Episodes", ""])

    for episode in selected:
        video = youtube_index.get(episode.youtube_id)
        title_en = video.title_en if video is not None else None

        lines.append(f"### EP {episode.episode_number}: {episode.title}")
        if title_en and title_en != episode.title:
            lines.append(f"(EN) {title_en}")
        lines.append(f"- URL: {site}{episode.page_path}")
        lines.append(f"- Date: {episode.published_at.isoformat()}")
        lines.append(f"- Duration: {episode.duration}")
        lines.append(f"- Hosts: {', '.join(episode.hosts)}")
        lines.append(f"- {episode.description}")
        if episode.chapters:
            lines.append(f"- Topics: {' | '.join(c.title for c in episode.chapters)}")
        lines.append("")

    lines.append("## Optional")
    lines.append(f"- [Full episode list (KO)]({site}/ko)")
    lines.append(f"- [Full episode list (EN)]({site}/en)")
    if series.youtube_channel:
        lines.append(f"- [YouTube Channel]({series.youtube_channel})")
    lines.append("")

    return "\n".join(lines)


def build_robots_txt(site: str) -> str:
    return "\n".join(["User-agent: *", "Allow: /", "", f"Sitemap: {site}/sitemap.xml", ""])
