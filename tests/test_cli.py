import io

import pytest
from PIL import Image

from asciiimg.cli import build_parser, main
from asciiimg.terminal import DEFAULT_SIZE, get_terminal_size


def test_parser_defaults():
    args = build_parser().parse_args(["picture.png"])
    assert args.generator == "charset"
    assert args.colorizer == "null"
    assert args.preprocessor == "basic"
    assert args.charset is None
    assert args.charset_name == "default"
    assert args.width is None
    assert args.height is None
    assert args.fit is False


def test_prints_one_line_per_row(png_path, capsys):
    path = png_path(Image.new("RGB", (4, 2), (255, 255, 255)))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "####\n"


def test_explicit_size_and_charset(png_path, capsys):
    path = png_path(Image.new("RGB", (10, 10), (0, 0, 0)))
    assert main([str(path), "--width", "3", "--height", "2", "--charset", ".@"]) == 0
    assert capsys.readouterr().out == "...\n...\n"


def test_half_block_truecolor(png_path, capsys):
    path = png_path(Image.new("RGB", (2, 2), (0, 128, 255)))
    assert main([str(path), "-g", "half-block", "-c", "ansi-rgb"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 1
    assert lines[0].count("▀") == 2
    assert "\033[38;2;0;128;255m\033[48;2;0;128;255m" in lines[0]
    assert lines[0].endswith("\033[0m")


def test_fit_uses_terminal_width(png_path, capsys):
    # stdout is captured, so the terminal falls back to 80 columns
    path = png_path(Image.new("RGB", (8, 4), (255, 255, 255)))
    assert main([str(path), "--fit"]) == 0
    lines = capsys.readouterr().out.splitlines()
    # 80 columns over an 8x4 source at a 2:1 cell ratio
    assert len(lines) == 20
    assert all(line == "#" * 80 for line in lines)


def test_named_charset(png_path, capsys):
    path = png_path(Image.new("RGB", (4, 2), (255, 255, 255)))
    assert main([str(path), "--charset-name", "blocks"]) == 0
    assert capsys.readouterr().out == "████\n"


def test_charset_and_charset_name_conflict(png_path):
    path = png_path(Image.new("RGB", (2, 2)))
    with pytest.raises(SystemExit):
        main([str(path), "--charset", "ab", "--charset-name", "ascii"])


def test_infinite_aspect_ratio_is_reported(png_path, capsys):
    path = png_path(Image.new("RGB", (2, 2)))
    assert main([str(path), "--height", "2", "--aspect-ratio", "inf"]) == 1
    assert "aspect_ratio" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.png")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_empty_charset_is_reported(png_path, capsys):
    path = png_path(Image.new("RGB", (2, 2)))
    assert main([str(path), "--charset="]) == 1
    assert "at least one character" in capsys.readouterr().err


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "bad.png"
    path.write_text("garbage")
    assert main([str(path)]) == 1
    assert "Cannot decode" in capsys.readouterr().err


def test_terminal_size_when_redirected():
    assert get_terminal_size(io.StringIO()) == DEFAULT_SIZE


def test_verbose_logs_to_stderr(png_path, capsys):
    path = png_path(Image.new("RGB", (4, 2)))
    assert main([str(path), "-v"]) == 0
    err = capsys.readouterr().err
    assert "DEBUG: Rendering 4x2 image" in err
    assert "DEBUG: Preprocessed to 4x1" in err


def test_quiet_by_default(png_path, capsys):
    path = png_path(Image.new("RGB", (4, 2)))
    assert main([str(path)]) == 0
    assert capsys.readouterr().err == ""
