"""Test suite for filter settings."""

import pytest

from mpv_playlist.config.filters import (
    FilterConfig,
    default_domains,
    default_extensions,
    load_filter_config,
    update_config,
)
from mpv_playlist.utils.persistence import load_data, save_data


def test_defaults():
    config = load_filter_config(None)
    assert config.domain_allow_list.split("\n") == default_domains
    assert config.extension_allow_list.split("\n") == default_extensions
    assert config.url_regex_allow_list == ""


def test_stored_values_override_defaults():
    config = load_filter_config({
        "url_regex_allow_list": "vimeo",
        "domain_allow_list": "",
        "unrelated": "ignored",
    })
    assert config.url_regex_allow_list == "vimeo"
    assert config.domain_allow_list == ""
    assert config.extension_allow_list == "\n".join(default_extensions)


def test_update_config_persists_new_values():
    saved = []
    config = update_config(FilterConfig(), "extension_allow_list", "mp4", saved.append)
    assert config.extension_allow_list == "mp4"
    assert saved == [config.to_dict()]


def test_update_config_rejects_unknown_field():
    saved = []
    with pytest.raises(ValueError):
        update_config(FilterConfig(), "player", "vlc", saved.append)
    assert saved == []


def test_settings_file_round_trip(tmp_path):
    path = str(tmp_path / "settings.json")
    assert load_data(path, {}) == {}

    config = FilterConfig(url_regex_allow_list="vimeo\\.com")
    save_data(config.to_dict(), path)
    assert load_filter_config(load_data(path, {})) == config


def test_corrupt_settings_file_falls_back_to_default(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_data(str(path), {"fallback": True}) == {"fallback": True}


@pytest.mark.parametrize("content", ['["youtube.com"]', '"youtube.com"', "42"])
def test_non_object_settings_file_falls_back_to_defaults(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")
    assert load_filter_config(load_data(str(path), {})) == FilterConfig()
