import argparse

import pytest
from PIL import Image

import main
from color import RGBA


def test_parse_size():
    assert main.parse_size("3456x2234") == (3456, 2234)


@pytest.mark.parametrize("value", ["3456", "x", "10x", "axb", "0x10", "-5x10"])
def test_parse_size_invalid(value):
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_size(value)


def test_parse_color():
    assert main.parse_color("#236cff") == RGBA.from_rgb(35, 108, 255)
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_color("nope")


def test_defaults():
    args = main.get_args([])
    assert args.size == (3456, 2234)
    assert args.dst == "wallpaper.png"
    assert not args.debug
    assert args.background == RGBA.from_rgb(35, 108, 255)


def test_main_writes_png(tmp_path, capsys):
    output = tmp_path / "wallpaper.png"
    main.main(["--size", "600x200", "--dst", str(output), "--background", "#000000"])
    assert "Successfully saved" in capsys.readouterr().out
    with Image.open(output) as image:
        assert image.size == (600, 200)
        assert image.mode == "RGBA"


def test_main_reports_errors(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main.main(["--size", "60x20", "--dst", str(tmp_path / "missing" / "out.png")])
    assert info.value.code == 1
    assert "Error while rendering wallpaper" in capsys.readouterr().out
