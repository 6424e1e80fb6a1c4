"""End-to-end tests for the CLI actions."""

from datetime import date
import json

import pytest

from podcast_transcripts import smoke
from podcast_transcripts.actions.build import build_site_files
from podcast_transcripts.actions.sync import SyncAction
from podcast_transcripts.app import main
from podcast_transcripts.config import ConfigError, load_config
from podcast_transcripts.content import load_episode, load_episodes
from podcast_transcripts.sources import load_youtube_metadata


RAW_TRANSCRIPT = """\
## Opening  *00:00*

**노정석**    *00:00*  안녕하세요.

**최승준**
*00:42*  반갑습니다.

## Scaling  *12:30*

*12:30*  Where were we?
"""

CHAPTERS = "00:00:00 Opening\n00:12:30 Scaling\n"

VIDEOS = [
    {
        "id": "AuF7V7bqsrQ",
        "title": "EP 83. 스케일링",
        "episode": 83,
        "duration_string": "53:55",
        "description": "스케일링 법칙 이야기",
        "title_en": "Scaling",
    }
]


@pytest.fixture
def srt2md(config_path):
    """Create the transcript tool tree next to the site directory."""

    root = config_path.parent.parent / "srt2md"
    ep_dir = root / "examples" / "ep83"
    (ep_dir / "outputs").mkdir(parents=True)
    (ep_dir / "chapters").mkdir()
    (ep_dir / "outputs" / "ep83_kor_paragraphed_publish.md").write_text(RAW_TRANSCRIPT, encoding="utf-8")
    (ep_dir / "chapters" / "ep83_human.txt").write_text(CHAPTERS, encoding="utf-8")
    (root / "data").mkdir()
    (root / "data" / "youtube_metadata.json").write_text(json.dumps(VIDEOS), encoding="utf-8")
    return root


def _record_path(config_path):
    return config_path.parent / "content" / "ko" / "ep83.mdx"


# ---------------------------------------------------------------------------
# sync
# ---------------------------------------------------------------------------


class TestSync:
    def test_sync_episode(self, site_config, srt2md, capsys):
        videos = load_youtube_metadata(site_config.youtube_metadata)
        synced = SyncAction().sync_episode(site_config, 83, "ko", force=False, videos=videos, today=date(2026, 1, 26))
        assert synced is True

        episode = load_episode(site_config.content_dir / "ko" / "ep83.mdx")
        assert episode.title == "스케일링"
        assert episode.description == "스케일링 법칙 이야기"
        assert episode.youtube_id == "AuF7V7bqsrQ"
        assert episode.duration == "53:55"
        assert episode.published_at == date(2026, 1, 26)
        assert episode.hosts == ["노정석", "최승준"]
        assert [c.to_dict() for c in episode.chapters] == [
            {"time": "0:00", "title": "Opening"},
            {"time": "12:30", "title": "Scaling"},
        ]

        blocks = episode.chapter_blocks()
        assert [b.speakers for b in blocks] == [["노정석", "최승준"], ["최승준"]]
        assert blocks[1].transcript == "최승준: Where were we?"

    def test_second_sync_is_unchanged(self, site_config, srt2md, capsys):
        videos = load_youtube_metadata(site_config.youtube_metadata)
        action = SyncAction()
        action.sync_episode(site_config, 83, "ko", force=False, videos=videos, today=date(2026, 1, 26))
        capsys.readouterr()

        assert action.sync_episode(site_config, 83, "ko", force=False, videos=videos, today=date(2026, 1, 26))
        assert "Unchanged" in capsys.readouterr().out

    def test_changed_record_needs_force(self, site_config, srt2md):
        videos = load_youtube_metadata(site_config.youtube_metadata)
        action = SyncAction()
        action.sync_episode(site_config, 83, "ko", force=False, videos=videos, today=date(2026, 1, 26))

        with pytest.raises(ConfigError):
            action.sync_episode(site_config, 83, "ko", force=False, videos=videos, today=date(2026, 2, 1))

        assert action.sync_episode(site_config, 83, "ko", force=True, videos=videos, today=date(2026, 2, 1))
        assert load_episode(site_config.content_dir / "ko" / "ep83.mdx").published_at == date(2026, 2, 1)

    def test_missing_publish_file(self, site_config, srt2md, capsys):
        assert not SyncAction().sync_episode(site_config, 83, "en", force=True, videos={})
        assert "No publish file found" in capsys.readouterr().err

    def test_placeholder_without_youtube_metadata(self, site_config, srt2md, capsys):
        assert SyncAction().sync_episode(site_config, 83, "ko", force=True, videos={})
        assert load_episode(site_config.content_dir / "ko" / "ep83.mdx").youtube_id == "REPLACE_ME"
        assert "Remember to update youtubeId" in capsys.readouterr().out

    def test_cli(self, config_path, srt2md):
        assert main(["sync", "-c", str(config_path), "--ep", "83"]) == 0
        assert _record_path(config_path).is_file()

    def test_cli_all(self, config_path, srt2md, capsys):
        assert main(["sync", "-c", str(config_path), "--all"]) == 0
        assert "Synced 1 of 1 episode(s)." in capsys.readouterr().out

    def test_cli_unknown_episode(self, config_path, srt2md, capsys):
        assert main(["sync", "-c", str(config_path), "--ep", "99"]) == 2
        assert "Episode directory not found" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# chapters
# ---------------------------------------------------------------------------


def test_chapters_cli(config_path, srt2md, capsys):
    assert main(["sync", "-c", str(config_path), "--ep", "83"]) == 0
    capsys.readouterr()

    assert main(["chapters", "83", "-c", str(config_path), "--summary"]) == 0
    assert json.loads(capsys.readouterr().out) == [
        {"time": "00:00", "title": "Opening", "speakers": ["노정석", "최승준"]},
        {"time": "12:30", "title": "Scaling", "speakers": ["최승준"]},
    ]


def test_chapters_cli_missing_record(config_path, capsys):
    assert main(["chapters", "83", "-c", str(config_path)]) == 2
    assert "No content record" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


def test_build_site_files(site_config, make_episode):
    episodes = [make_episode(), make_episode(lang="en", title="Scaling (EN)")]
    files = build_site_files(site_config, episodes, today=date(2026, 2, 1))

    assert sorted(files) == [
        ".well-known/ai-plugin.json",
        "api/episodes.json",
        "api/episodes/ep83.json",
        "api/openapi.json",
        "en/rss.xml",
        "ko/rss.xml",
        "llm.txt",
        "llms.txt",
        "robots.txt",
        "seo/en/ep83.json",
        "seo/en/index.json",
        "seo/ko/ep83.json",
        "seo/ko/index.json",
        "sitemap.xml",
    ]
    assert files["llm.txt"] == files["llms.txt"]
    assert json.loads(files["api/episodes.json"])["updated"] == "2026-02-01"
    assert "Scaling (EN)" in files["en/rss.xml"]
    assert "https://aifrontier.kr/en/episodes/ep83" in files["sitemap.xml"]

    head = json.loads(files["seo/ko/ep83.json"])
    assert head["canonical"] == "https://aifrontier.kr/ko/episodes/ep83"
    assert [link["hreflang"] for link in head["hreflang"]] == ["ko", "en", "x-default"]
    assert head["jsonLd"]["partOfSeries"]["name"] == "AI Frontier"
    assert json.loads(files["seo/en/index.json"])["jsonLd"]["@type"] == "PodcastSeries"


def test_build_cli(config_path, srt2md, capsys):
    assert main(["sync", "-c", str(config_path), "--ep", "83"]) == 0
    assert main(["build", "-c", str(config_path)]) == 0

    dist = config_path.parent / "dist"
    index = json.loads((dist / "api" / "episodes.json").read_text(encoding="utf-8"))
    assert index["total"] == 1
    assert index["episodes"][0]["title_en"] == "Scaling"

    detail = json.loads((dist / "api" / "episodes" / "ep83.json").read_text(encoding="utf-8"))
    assert [c["title"] for c in detail["chapters"]] == ["Opening", "Scaling"]
    assert (dist / "robots.txt").read_text(encoding="utf-8").startswith("User-agent: *")

    capsys.readouterr()
    assert main(["build", "-c", str(config_path)]) == 0
    assert "wrote 0" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# clean
# ---------------------------------------------------------------------------


class TestClean:
    def _fill(self, config_path):
        dist = config_path.parent / "dist"
        (dist / "api").mkdir(parents=True)
        (dist / "api" / "episodes.json").write_text("{}", encoding="utf-8")
        (dist / "robots.txt").write_text("", encoding="utf-8")
        return dist

    def test_force(self, config_path):
        dist = self._fill(config_path)
        assert main(["clean", "-c", str(config_path), "--force"]) == 0
        assert dist.is_dir()
        assert list(dist.iterdir()) == []

    def test_refuses_without_tty(self, config_path):
        dist = self._fill(config_path)
        assert main(["clean", "-c", str(config_path)]) == 2
        assert (dist / "robots.txt").exists()

    def test_refuses_content_parent(self, config_path):
        text = config_path.read_text(encoding="utf-8").replace("outdir: dist", "outdir: .")
        config_path.write_text(text, encoding="utf-8")
        assert main(["clean", "-c", str(config_path), "--force"]) == 2
        assert config_path.exists()


# ---------------------------------------------------------------------------
# template / normalize / misc
# ---------------------------------------------------------------------------


def test_template(tmp_path):
    dest = tmp_path / "podcast.yaml"
    assert main(["template", str(dest)]) == 0

    config = load_config(dest)
    assert config.site == "https://aifrontier.kr"
    assert config.feeds["ko"].title == "AI Frontier (한국어)"
    assert len(config.series.authors) == 2

    assert main(["template", str(dest)]) == 2
    assert main(["template", str(dest), "--force"]) == 0


def test_normalize_to_stdout(tmp_path, capsys):
    source = tmp_path / "raw.md"
    source.write_text("**Host**    *00:00*  Hello there", encoding="utf-8")

    assert main(["normalize", str(source)]) == 0
    assert capsys.readouterr().out == (
        '<span class="paragraph-timestamp" data-ts="00:00">00:00</span> **Host** Hello there\n'
    )


def test_normalize_to_file(tmp_path):
    source = tmp_path / "raw.md"
    source.write_text(RAW_TRANSCRIPT, encoding="utf-8")
    dest = tmp_path / "out" / "normalized.md"

    assert main(["normalize", str(source), "-o", str(dest)]) == 0
    assert 'data-ts="00:42">00:42</span> **최승준** 반갑습니다.' in dest.read_text(encoding="utf-8")

    assert main(["normalize", str(source), "-o", str(dest)]) == 2
    assert main(["normalize", str(source), "-o", str(dest), "--force"]) == 0


def test_normalize_missing_input(tmp_path):
    assert main(["normalize", str(tmp_path / "missing.md")]) == 2


def test_missing_config(tmp_path):
    assert main(["build", "-c", str(tmp_path / "missing.yaml")]) == 2


def test_invalid_content_record(config_path, capsys):
    content = config_path.parent / "content" / "ko"
    content.mkdir(parents=True)
    (content / "ep1.mdx").write_text("no front matter", encoding="utf-8")

    assert main(["build", "-c", str(config_path)]) == 2
    assert "missing front matter" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# smoke
# ---------------------------------------------------------------------------


def test_smoke(config_path, srt2md, capsys):
    assert main(["sync", "-c", str(config_path), "--ep", "83"]) == 0
    capsys.readouterr()

    assert smoke.main(["--config", str(config_path), "--print-speakers"]) == 0
    out = capsys.readouterr().out
    assert "Episodes: 1" in out
    assert '"ko/ep83"' in out


def test_smoke_detects_unnormalized_body(config_path, srt2md):
    assert main(["sync", "-c", str(config_path), "--ep", "83"]) == 0
    record = _record_path(config_path)
    record.write_text(record.read_text(encoding="utf-8") + "\n**A** *59:00* raw\n", encoding="utf-8")

    assert len(load_episodes(record.parent.parent)) == 1
    assert smoke.main(["--config", str(config_path)]) == 3
