"""Tests for podcast_transcripts.content and podcast_transcripts.yaml_io."""

from datetime import date

import pytest

from podcast_transcripts.content import ContentError, load_episodes, parse_episode
from podcast_transcripts.transcripts import ChapterHeading
from podcast_transcripts.yaml_io import dump_front_matter, split_front_matter


RECORD = """\
---
episodeNumber: 83
title: Scaling laws
description: About scaling
publishedAt: 2026-01-26
duration: '53:55'
youtubeId: AuF7V7bqsrQ
lang: ko
chapters:
  - time: '00:00'
    title: Opening
  - time: '12:30'
    title: Scaling
notionUrl: https://example.notion.site/ep83
---

## Opening  *00:00*
<span class="paragraph-timestamp" data-ts="00:00">00:00</span> **노정석** 안녕하세요.
"""


def _record(**replacements: str) -> str:
    text = RECORD
    for old, new in replacements.items():
        text = text.replace(old, new)
    return text


# ---------------------------------------------------------------------------
# Front matter helpers
# ---------------------------------------------------------------------------


class TestSplitFrontMatter:
    def test_split(self):
        front, body = split_front_matter("---\na: 1\n---\n\nbody\n")
        assert front == "a: 1"
        assert body == "\nbody\n"

    def test_no_front_matter(self):
        assert split_front_matter("just text") == (None, "just text")

    def test_crlf(self):
        front, body = split_front_matter("---\r\na: 1\r\n---\r\nbody")
        assert front == "a: 1"
        assert body == "body"


def test_dump_front_matter_keeps_order_and_unicode():
    rendered = dump_front_matter({"title": "안녕", "episodeNumber": 1})
    assert rendered == "---\ntitle: 안녕\nepisodeNumber: 1\n---\n\n"


# ---------------------------------------------------------------------------
# parse_episode
# ---------------------------------------------------------------------------


class TestParseEpisode:
    def test_fields(self):
        episode = parse_episode(RECORD, default_hosts=["노정석", "최승준"])
        assert episode.episode_number == 83
        assert episode.title == "Scaling laws"
        assert episode.published_at == date(2026, 1, 26)
        assert episode.duration == "53:55"
        assert episode.lang == "ko"
        assert episode.hosts == ["노정석", "최승준"]
        assert episode.chapters == [
            ChapterHeading(time="00:00", title="Opening"),
            ChapterHeading(time="12:30", title="Scaling"),
        ]
        assert episode.notion_url == "https://example.notion.site/ep83"
        assert episode.thumbnail is None
        assert episode.slug == "ep83"
        assert episode.page_path == "/ko/episodes/ep83"

    def test_chapter_blocks_come_from_body(self):
        blocks = parse_episode(RECORD).chapter_blocks()
        assert [b.to_dict() for b in blocks] == [
            {"time": "00:00", "title": "Opening", "speakers": ["노정석"], "transcript": "노정석: 안녕하세요."}
        ]

    def test_explicit_hosts_win(self):
        text = _record(**{"lang: ko\n": "lang: ko\nhosts:\n  - Guest\n"})
        assert parse_episode(text, default_hosts=["노정석"]).hosts == ["Guest"]

    def test_published_at_as_string(self):
        text = _record(**{"publishedAt: 2026-01-26": "publishedAt: '2026-01-26T09:00:00Z'"})
        assert parse_episode(text).published_at == date(2026, 1, 26)

    def test_missing_front_matter(self):
        with pytest.raises(ContentError):
            parse_episode("## Opening  *00:00*\n")

    def test_unknown_language(self):
        with pytest.raises(ContentError):
            parse_episode(_record(**{"lang: ko": "lang: de"}))

    def test_episode_number_must_be_int(self):
        with pytest.raises(ContentError):
            parse_episode(_record(**{"episodeNumber: 83": "episodeNumber: eighty"}))

    def test_invalid_date(self):
        with pytest.raises(ContentError):
            parse_episode(_record(**{"publishedAt: 2026-01-26": "publishedAt: soon"}))

    def test_error_message_names_path(self, tmp_path):
        path = tmp_path / "ep1.mdx"
        with pytest.raises(ContentError) as excinfo:
            parse_episode("no front matter", path=path)
        assert str(path) in str(excinfo.value)


def test_load_episodes(tmp_path):
    (tmp_path / "ko").mkdir()
    (tmp_path / "en").mkdir()
    (tmp_path / "ko" / "ep83.mdx").write_text(RECORD, encoding="utf-8")
    (tmp_path / "en" / "ep83.mdx").write_text(_record(**{"lang: ko": "lang: en"}), encoding="utf-8")
    (tmp_path / "ko" / "notes.txt").write_text("ignored", encoding="utf-8")

    episodes = load_episodes(tmp_path)
    assert [(e.lang, e.episode_number) for e in episodes] == [("en", 83), ("ko", 83)]
    assert episodes[1].path == tmp_path / "ko" / "ep83.mdx"


def test_load_episodes_missing_directory(tmp_path):
    assert load_episodes(tmp_path / "missing") == []
