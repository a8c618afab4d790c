from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from rotate_resize.main import build_parser, main
from rotate_resize.utils.config import FileRequest, FolderRequest, build_config, build_request
from rotate_resize.utils.logging import Log, parse_level

from conftest import write_image


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Warning", "warning"),
        ("DEBUG", "debug"),
        ("information", "information"),
        ("Info", "information"),
        ("None", "none"),
        ("Verbose", "warning"),
        (None, "warning"),
    ],
)
def test_parse_level(name, expected) -> None:
    assert parse_level(name) == expected


def test_log_filters_by_level() -> None:
    stream = io.StringIO()
    log = Log("Error", stream=stream)
    log.warn("quiet")
    log.error("loud")
    with log.scope("file"):
        log.critical("louder")
    text = stream.getvalue()
    assert "quiet" not in text
    assert "[ERROR] loud" in text
    assert "[CRITICAL] => file louder" in text


def test_log_none_prints_nothing() -> None:
    stream = io.StringIO()
    log = Log("None", stream=stream)
    log.critical("anything")
    log.header("anything")
    assert stream.getvalue() == ""


def test_file_defaults() -> None:
    args = build_parser().parse_args(["file", "-i", "a.jpg", "-o", "b.jpg"])
    request = build_request(args)
    config = build_config(args)
    assert request == FileRequest(Path("a.jpg"), Path("b.jpg"), False)
    assert config.dpi == 264
    assert (config.envelope.horizontal, config.envelope.vertical) == (0, 0)
    assert config.log.level == "warning"


def test_folder_options() -> None:
    args = build_parser().parse_args(
        ["folder", "--SourceFolder", "/in/*.jpg", "--TargetFolder", "/out", "-h", "2048", "-v", "1024", "-d", "72", "-l", "Debug"]
    )
    request = build_request(args)
    config = build_config(args)
    assert request == FolderRequest("/in/*.jpg", Path("/out"))
    assert (config.envelope.horizontal, config.envelope.vertical) == (2048, 1024)
    assert config.dpi == 72
    assert config.log.level == "debug"


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["file", "-i", "a.jpg"],
        ["file", "-i", "a.jpg", "-o", "b.jpg", "--HorizontalSize", "-5"],
        ["folder", "-s", "/in/*.jpg", "-t", "/out", "--ForceOverwrite"],
        ["file", "--help"],
    ],
)
def test_bad_command_lines_fail(argv) -> None:
    assert main(argv, stream=io.StringIO()) == -1


def test_file_end_to_end(tmp_path: Path) -> None:
    src = write_image(tmp_path / "src.jpg", (400, 300))
    out = tmp_path / "out.jpg"
    stream = io.StringIO()
    code = main(["file", "-i", str(src), "-o", str(out), "-h", "200", "-l", "Information"], stream=stream)
    assert code == 0
    with Image.open(out) as img:
        assert img.size == (200, 150)
    assert "Starting rotate-resize in file mode" in stream.getvalue()


def test_folder_end_to_end(tmp_path: Path) -> None:
    src = tmp_path / "in"
    src.mkdir()
    write_image(src / "a.jpg", (400, 300))
    target = tmp_path / "out"
    code = main(["folder", "-s", str(src / "*.jpg"), "-t", str(target), "-v", "150"], stream=io.StringIO())
    assert code == 0
    with Image.open(target / "a.jpg") as img:
        assert img.size == (200, 150)
