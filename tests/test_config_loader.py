"""Tests for source list and settings loading."""

import pytest

from newseum.config import (
    Config,
    ConfigModel,
    SourceConfig,
    UndatedPolicy,
    default_config_dir,
    load_config,
    load_sources,
    save_config,
    save_sources,
)


def test_load_sources_trims_fields(tmp_path):
    path = tmp_path / "feeds.csv"
    path.write_text(
        " Hacker News , https://news.ycombinator.com/rss \n"
        "\n"
        ",https://xkcd.com/atom.xml\n"
    )

    sources = load_sources(path)

    assert sources == [
        SourceConfig(name="Hacker News", url="https://news.ycombinator.com/rss"),
        SourceConfig(name="", url="https://xkcd.com/atom.xml"),
    ]


def test_quoted_names_may_contain_commas(tmp_path):
    path = tmp_path / "feeds.csv"
    path.write_text('"News, World",https://example.com/rss\n')

    assert load_sources(path)[0].name == "News, World"


def test_empty_file_is_no_sources(tmp_path):
    path = tmp_path / "feeds.csv"
    path.write_text("")

    assert load_sources(path) == []


def test_missing_sources_file_has_remediation(tmp_path):
    with pytest.raises(FileNotFoundError, match="CSV list of feed names and URLs"):
        load_sources(tmp_path / "feeds.csv")


@pytest.mark.parametrize("line", ["only-one-field", "a,b,c"])
def test_wrong_field_count_is_fatal(tmp_path, line):
    path = tmp_path / "feeds.csv"
    path.write_text(f"Good,https://example.com/rss\n{line}\n")

    with pytest.raises(ValueError, match="line 2"):
        load_sources(path)


def test_sources_round_trip(tmp_path):
    path = tmp_path / "sub" / "feeds.csv"
    sources = [SourceConfig(name="A, B", url="https://a.example/rss"), SourceConfig(url="https://b.example/rss")]

    save_sources(sources, path)

    assert load_sources(path) == sources


def test_missing_config_means_defaults(tmp_path):
    config = load_config(tmp_path / "config.yaml")

    assert config.fetch.workers == 5
    assert config.undated == UndatedPolicy.NEWEST
    assert config.rewrites[0].pattern == "nitter."
    assert config.rewrites[0].canonical == "https://x.com"
    assert config.player.command == "mpv"


def test_load_config_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "fetch:\n"
        "  workers: 8\n"
        "  timeout: 5\n"
        "undated: oldest\n"
        "rewrites:\n"
        "  - pattern: invidious.\n"
        "    canonical: https://www.youtube.com/\n"
        "player:\n"
        "  enabled: false\n"
    )

    config = load_config(path)

    assert config.fetch.workers == 8
    assert config.fetch.timeout == 5.0
    assert config.undated == UndatedPolicy.OLDEST
    assert config.rewrites[0].canonical == "https://www.youtube.com"
    assert config.player.enabled is False


def test_invalid_config_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch:\n  workers: 0\n")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


def test_config_round_trip(tmp_path):
    path = tmp_path / "config.yaml"
    original = ConfigModel(undated=UndatedPolicy.EXCLUDED)

    save_config(original, path)

    assert load_config(path) == original


def test_config_dir_resolution(tmp_path, monkeypatch):
    monkeypatch.delenv("NEWSEUM_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_config_dir() == tmp_path / "newseum"

    monkeypatch.setenv("NEWSEUM_CONFIG_DIR", str(tmp_path / "custom"))
    assert default_config_dir() == tmp_path / "custom"

    config = Config()
    assert config.sources_path == tmp_path / "custom" / "feeds.csv"
    assert config.config_path == tmp_path / "custom" / "config.yaml"
