"""Tests for podcast_transcripts.config."""

import pytest

from podcast_transcripts.config import SRT2MD_ROOT_ENV, ConfigError, PersonSpec, load_config


def _write(tmp_path, text):
    path = tmp_path / "podcast.yaml"
    path.write_text(text, encoding="utf-8")
    return path


MINIMAL = "site: https://example.com\ncontent_dir: content\nseries:\n  name: Show\n"


def test_load_config(site_config, config_path):
    base = config_path.parent.resolve()

    assert site_config.site == "https://aifrontier.kr"
    assert site_config.base_dir == base
    assert site_config.content_dir == base / "content"
    assert site_config.outdir == base / "dist"
    assert site_config.srt2md_root == (base / ".." / "srt2md").resolve()
    assert site_config.examples_dir == site_config.srt2md_root / "examples"
    assert site_config.youtube_metadata == site_config.srt2md_root / "data" / "youtube_metadata.json"
    assert site_config.hosts == ["노정석", "최승준"]
    assert site_config.series.authors == [PersonSpec(name="노정석", alternate_name="Chester Roh")]
    assert site_config.series.summary == ["AI deep dive podcast"]


def test_feeds_fall_back_to_series(site_config):
    assert site_config.feeds["en"].title == "AI Frontier (English)"
    assert site_config.feeds["ko"].title == "AI Frontier"
    assert site_config.feeds["ko"].description == "AI deep dive podcast"


def test_minimal_config(tmp_path):
    config = load_config(_write(tmp_path, MINIMAL))
    assert config.hosts == []
    assert config.series.summary == []
    assert config.outdir == tmp_path.resolve() / "dist"


def test_environment_overrides_srt2md_root(tmp_path, monkeypatch):
    monkeypatch.setenv(SRT2MD_ROOT_ENV, str(tmp_path / "tools"))
    config = load_config(_write(tmp_path, MINIMAL + "srt2md_root: elsewhere\n"))
    assert config.srt2md_root == (tmp_path / "tools").resolve()


def test_explicit_youtube_metadata(tmp_path):
    config = load_config(_write(tmp_path, MINIMAL + "youtube_metadata: data/yt.json\n"))
    assert config.youtube_metadata == tmp_path.resolve() / "data" / "yt.json"


@pytest.mark.parametrize(
    "text",
    [
        "content_dir: content\nseries:\n  name: Show\n",
        "site: example.com\ncontent_dir: content\nseries:\n  name: Show\n",
        "site: https://example.com\ncontent_dir: content\nseries: Show\n",
        MINIMAL + "hosts: Alice\n",
        MINIMAL + "feeds:\n  de:\n    title: Sendung\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_config(tmp_path, text):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "podcast.yaml")
