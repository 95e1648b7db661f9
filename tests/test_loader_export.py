"""Tests for theme bundles, JSON export and the readability report."""

import json

import pytest

from artwork_theme.export import export_json, generate_readability_report, theme_to_params
from artwork_theme.theme import (
    default_presets,
    default_theme,
    load_themes_from_json,
    merge_themes,
    theme_from_params,
)


def test_exported_themes_load_back(tmp_path):
    themes = [default_theme("Artwork")] + default_presets()
    path = tmp_path / "themes.json"
    export_json(themes, path)

    assert load_themes_from_json(path) == themes


def test_params_skip_unset_roles():
    partial = theme_from_params({"title": "Half", "darkPrimary": "EEEEEE"})
    assert theme_to_params(partial) == {"title": "Half", "darkPrimary": "EEEEEE"}


def test_loader_rejects_non_list(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text(json.dumps({"title": "Solo"}))
    with pytest.raises(ValueError):
        load_themes_from_json(path)


def test_loader_rejects_non_object_entries(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text(json.dumps([{"title": "Ok"}, "FFFFFF"]))
    with pytest.raises(ValueError, match="#1"):
        load_themes_from_json(path)


def test_loader_rejects_non_string_hex(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text(json.dumps([{"title": "X", "defaultBackground": 123456}]))
    with pytest.raises(ValueError, match="123456"):
        load_themes_from_json(path)


def test_merge_skips_known_titles():
    available = default_presets()
    incoming = [
        theme_from_params({"title": "Dark", "defaultBackground": "000000"}),
        theme_from_params({"title": "Sepia", "defaultBackground": "F4ECD8"}),
        theme_from_params({"title": "Sepia", "defaultBackground": "FFFFFF"}),
    ]
    merged = merge_themes(available, incoming)
    assert [t.title for t in merged] == ["Light", "Dark", "Sepia"]
    assert merged[1] == available[1]
    assert merged[2].default_background == "F4ECD8"


def test_report_lists_low_contrast_roles():
    report, issues = generate_readability_report(default_theme("Report"))
    assert "READABILITY REPORT" in report
    assert "Theme: Report" in report
    for variant, role, hex_val, achieved, required in issues:
        assert achieved < required
        assert hex_val in report
    # EEEEEE on 37454E is readable but below 13:1
    assert ("dark", "primary") in {(v, r) for v, r, *_ in issues}
