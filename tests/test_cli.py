"""Tests for the artwork-theme command."""

import json

import pytest
from PIL import Image

from artwork_theme.cli import main
from artwork_theme.export import export_json
from artwork_theme.theme import theme_from_params


def test_image_run_exports_theme(tmp_path, capsys):
    image_path = tmp_path / "book.png"
    Image.new("RGB", (16, 16), (27, 42, 73)).save(image_path)
    out_dir = tmp_path / "out"

    main([str(image_path), "-o", str(out_dir)])

    data = json.loads((out_dir / "book.json").read_text())
    assert len(data) == 1
    assert data[0]["title"] == "book"
    assert len(data[0]) == 9
    assert "READABILITY REPORT" in capsys.readouterr().out


def test_title_flag_names_output(tmp_path):
    image_path = tmp_path / "book.png"
    Image.new("RGB", (16, 16), (242, 233, 220)).save(image_path)

    main([str(image_path), "-o", str(tmp_path), "--title", "Moby Dick"])

    assert (tmp_path / "Moby Dick.json").exists()


def test_presets_run_lists_merged_themes(tmp_path, capsys):
    bundle = tmp_path / "themes.json"
    export_json(
        [
            theme_from_params({"title": "Light", "defaultBackground": "000000"}),
            theme_from_params({"title": "Partial", "defaultBackground": "F4ECD8"}),
        ],
        bundle,
    )

    main(["--presets", str(bundle)])

    out = capsys.readouterr().out
    assert "THEME: Light" in out
    assert "THEME: Dark" in out
    assert "Skipping incomplete theme" in out
    assert "3 themes available" in out


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["cover.png", "--presets", "themes.json"],
        ["cover.png", "--min-contrast", "0.5"],
        ["cover.png", "--darkness-threshold", "2"],
    ],
)
def test_bad_arguments_exit(argv):
    with pytest.raises(SystemExit):
        main(argv)
