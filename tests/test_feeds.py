"""Tests for podcast_transcripts.feeds."""

from datetime import date

from podcast_transcripts.config import FeedConfig, SeriesConfig
from podcast_transcripts.feeds import build_llms_txt, build_robots_txt, build_rss_xml
from podcast_transcripts.sources import YouTubeVideo
from podcast_transcripts.transcripts import ChapterHeading


SITE = "https://aifrontier.kr"


class TestRss:
    def test_items_are_filtered_and_sorted(self, make_episode):
        episodes = [
            make_episode(episode_number=1, title="Old", published_at=date(2025, 1, 1)),
            make_episode(episode_number=2, title="New", published_at=date(2025, 2, 1)),
            make_episode(episode_number=2, title="English", lang="en"),
        ]
        xml = build_rss_xml(site=SITE, lang="ko", feed=FeedConfig("AI Frontier", "desc"), episodes=episodes)

        assert xml.index("EP 2: New") < xml.index("EP 1: Old")
        assert "English" not in xml
        assert "<language>ko</language>" in xml
        assert '<guid isPermaLink="true">https://aifrontier.kr/ko/episodes/ep2</guid>' in xml
        assert "<pubDate>Sat, 01 Feb 2025 00:00:00 +0000</pubDate>" in xml
        assert xml.endswith("</rss>\n")

    def test_channel_and_escaping(self, make_episode):
        episodes = [make_episode(title="Q&A <live>", description='Say "hi"')]
        feed = FeedConfig("AI Frontier (English)", "Tom & Jerry")
        xml = build_rss_xml(site=SITE, lang="ko", feed=feed, episodes=episodes)

        assert "<title>AI Frontier (English)</title>" in xml
        assert "<description>Tom &amp; Jerry</description>" in xml
        assert "<link>https://aifrontier.kr/</link>" in xml
        assert 'href="https://aifrontier.kr/ko/rss.xml"' in xml
        assert "EP 83: Q&amp;A &lt;live&gt;" in xml
        assert "Say &quot;hi&quot;" in xml

    def test_empty_feed(self):
        xml = build_rss_xml(site=SITE, lang="en", feed=FeedConfig("t", "d"), episodes=[])
        assert "<item>" not in xml
        assert "<channel>" in xml


class TestLlmsTxt:
    SERIES = SeriesConfig(
        name="AI Frontier",
        description="AI deep dive",
        summary=["AI deep dive"],
        youtube_channel="https://www.youtube.com/@chester_roh",
    )

    def test_lists_korean_episodes_newest_first(self, make_episode):
        episodes = [
            make_episode(episode_number=82, title="Earlier", youtube_id="a"),
            make_episode(
                episode_number=83,
                title="최신 에피소드",
                youtube_id="b",
                chapters=[ChapterHeading("00:00", "Opening"), ChapterHeading("12:30", "Scaling")],
            ),
            make_episode(episode_number=83, title="Latest", lang="en"),
        ]
        youtube_index = {
            "b": YouTubeVideo(id="b", title="EP 83. 최신 에피소드", title_en="Latest episode"),
            "a": YouTubeVideo(id="a", title="EP 82. Earlier", title_en="Earlier"),
        }
        text = build_llms_txt(site=SITE, series=self.SERIES, episodes=episodes, youtube_index=youtube_index)
        lines = text.split("\n")

        assert lines[0] == "# AI Frontier"
        assert lines[1] == "> AI deep dive"
        assert text.index("### EP 83: 최신 에피소드") < text.index("### EP 82: Earlier")
        assert "(EN) Latest episode" in lines
        assert "(EN) Earlier" not in lines
        assert "- Topics: Opening | Scaling" in lines
        assert "- URL: https://aifrontier.kr/ko/episodes/ep83" in lines
        assert "- Hosts: 노정석, 최승준" in lines
        assert "### EP 83: Latest" not in text
        assert "- [YouTube Channel](https://www.youtube.com/@chester_roh)" in lines

    def test_without_youtube_metadata(self, make_episode):
        text = build_llms_txt(site=SITE, series=self.SERIES, episodes=[make_episode(chapters=[])])
        assert "(EN)" not in text
        assert "Topics" not in text


def test_robots_txt():
    assert build_robots_txt(SITE) == "User-agent: *\nAllow: /\n\nSitemap: https://aifrontier.kr/sitemap.xml\n"
