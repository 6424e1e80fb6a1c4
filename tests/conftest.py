"""Shared test fixtures."""

from datetime import date
from pathlib import Path

import pytest

from podcast_transcripts.config import SRT2MD_ROOT_ENV, load_config
from podcast_transcripts.content import Episode
from podcast_transcripts.transcripts import ChapterHeading


CONFIG_YAML = """\
site: https://aifrontier.kr/
content_dir: content
outdir: dist
srt2md_root: ../srt2md
hosts:
  - 노정석
  - 최승준
series:
  name: AI Frontier
  description: AI deep dive podcast
  youtube_channel: https://www.youtube.com/@chester_roh
  authors:
    - name: 노정석
      alternate_name: Chester Roh
feeds:
  en:
    title: AI Frontier (English)
    description: AI Deep Dive Podcast
"""


@pytest.fixture(autouse=True)
def _no_srt2md_env(monkeypatch):
    monkeypatch.delenv(SRT2MD_ROOT_ENV, raising=False)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Write the sample podcast.yaml into `<tmp>/site/` and return its path."""

    site_dir = tmp_path / "site"
    site_dir.mkdir()
    path = site_dir / "podcast.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


@pytest.fixture
def site_config(config_path: Path):
    return load_config(config_path)


@pytest.fixture
def make_episode():
    """Factory for Episode records with sensible defaults."""

    def _make(**overrides) -> Episode:
        values = {
            "episode_number": 83,
            "title": "Scaling laws",
            "description": "Episode description",
            "published_at": date(2026, 1, 26),
            "duration": "53:55",
            "youtube_id": "AuF7V7bqsrQ",
            "lang": "ko",
            "hosts": ["노정석", "최승준"],
            "chapters": [ChapterHeading(time="00:00", title="Opening")],
            "body": "",
        }
        values.update(overrides)
        return Episode(**values)

    return _make
