"""Tests for the command line entry point."""

import pytest

from epubgrid.app import main, parse_args


@pytest.fixture
def chapter_file(tmp_path, sample_chapter):
    path = tmp_path / "chapter.xhtml"
    path.write_text(sample_chapter, encoding="utf-8")
    return path


@pytest.fixture
def resources_dir(tmp_path, black_png):
    root = tmp_path / "book"
    (root / "images").mkdir(parents=True)
    (root / "images" / "cover.png").write_bytes(black_png)
    return root


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "absent.toml")]


class TestParseArgs:

    def test_defaults(self):
        args = parse_args(["chapter.xhtml"])
        assert str(args.file) == "chapter.xhtml"
        assert args.width is None
        assert not args.color


class TestMain:

    def test_renders_chapter(self, chapter_file, no_config, capsys):
        assert main([str(chapter_file), *no_config]) == 0
        out = capsys.readouterr().out
        assert "It was a dark and stormy night." in out
        assert "Alt text: Cover" in out
        # No resources given, so no ASCII art
        assert "M" * 80 not in out

    def test_resolves_images_from_resources(
        self, chapter_file, resources_dir, no_config, capsys
    ):
        assert main([str(chapter_file), "--resources", str(resources_dir), *no_config]) == 0
        assert "M" * 80 in capsys.readouterr().out

    def test_width_override(self, tmp_path, no_config, capsys):
        path = tmp_path / "rule.html"
        path.write_text("<hr/>")
        assert main([str(path), "--width", "30", *no_config]) == 0
        assert capsys.readouterr().out.strip() == "-" * 30

    def test_color_output(self, chapter_file, no_config, capsys):
        assert main([str(chapter_file), "--color", *no_config]) == 0
        assert "stormy" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, no_config, capsys):
        assert main([str(tmp_path / "nope.xhtml"), *no_config]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_bad_config(self, chapter_file, tmp_path, capsys):
        config = tmp_path / "config.toml"
        config.write_text("[rendering]\nwidth = -5\n")
        assert main([str(chapter_file), "--config", str(config)]) == 2
        assert "Config error" in capsys.readouterr().err

    def test_wrong_typed_config(self, chapter_file, tmp_path, capsys):
        config = tmp_path / "config.toml"
        config.write_text('[rendering]\nwidth = "wide"\n')
        assert main([str(chapter_file), "--config", str(config)]) == 2
        assert "must be an integer" in capsys.readouterr().err

    def test_bad_width(self, chapter_file, no_config, capsys):
        assert main([str(chapter_file), "--width", "0", *no_config]) == 2
