from __future__ import annotations

from pathlib import Path

import pytest

from tauview.image_engine.mime_sniffer import (
    DIALOG_EXTENSIONS,
    SUPPORTED_KINDS,
    ImageKind,
    classify,
    is_image,
    sniff,
)


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        ("jpeg", ImageKind.JPEG),
        ("png", ImageKind.PNG),
        ("gif", ImageKind.GIF),
        ("webp", ImageKind.WEBP),
        ("ico", ImageKind.ICO),
    ],
)
def test_minimal_files_classify_as_their_kind(tmp_path: Path, write_image, kind: str, expected: ImageKind) -> None:
    path = write_image(tmp_path / f"sample.{kind}", kind)
    assert classify(path) is expected
    assert is_image(str(path)) is True


def test_text_empty_and_truncated_files_are_not_images(tmp_path: Path) -> None:
    text = tmp_path / "notes.txt"
    text.write_text("hello, not an image\n", encoding="utf-8")
    empty = tmp_path / "empty.png"
    empty.write_bytes(b"")
    truncated = tmp_path / "cut.png"
    truncated.write_bytes(b"\x89PN")

    assert classify(text) is None
    assert classify(empty) is None
    assert classify(truncated) is None


def test_corrupt_signatures_are_not_images(tmp_path: Path) -> None:
    broken_png = tmp_path / "broken.png"
    broken_png.write_bytes(b"\x88PNG\r\n\x1a\n" + b"\x00" * 32)
    wav = tmp_path / "sound.webp"
    wav.write_bytes(b"RIFF\x24\x00\x00\x00WAVEfmt " + b"\x00" * 16)
    bmp = tmp_path / "old.bmp"
    bmp.write_bytes(b"BM" + b"\x00" * 40)

    assert classify(broken_png) is None
    assert classify(wav) is None
    # BMP is outside the supported set.
    assert classify(bmp) is None


def test_extension_is_ignored(tmp_path: Path, write_image) -> None:
    png_as_txt = write_image(tmp_path / "picture.txt", "png")
    txt_as_png = tmp_path / "fake.png"
    txt_as_png.write_text("plain text", encoding="utf-8")
    no_ext = write_image(tmp_path / "README", "gif")

    assert classify(png_as_txt) is ImageKind.PNG
    assert classify(txt_as_png) is None
    assert classify(no_ext) is ImageKind.GIF


def test_unreadable_paths_report_not_an_image(tmp_path: Path) -> None:
    # Missing file and a directory both fail to open; neither raises.
    assert classify(tmp_path / "vanished.jpg") is None
    assert classify(tmp_path) is None
    assert is_image(tmp_path / "vanished.jpg") is False


def test_sniff_prefixes() -> None:
    assert sniff(b"\xff\xd8\xff\xdb") is ImageKind.JPEG
    assert sniff(b"GIF87a") is ImageKind.GIF
    assert sniff(b"RIFF\x00\x00\x00\x00WEBP") is ImageKind.WEBP
    assert sniff(b"RIFF\x00\x00\x00\x00WEB") is None
    assert sniff(b"\x00\x00\x01\x00") is ImageKind.ICO
    # Cursor files share the ICO layout but use type 2.
    assert sniff(b"\x00\x00\x02\x00") is None
    assert sniff(b"") is None


def test_supported_set_is_exactly_five() -> None:
    assert {k.mime for k in SUPPORTED_KINDS} == {
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/vnd.microsoft.icon",
    }
    assert set(DIALOG_EXTENSIONS) == {"ico", "gif", "png", "jpg", "jpeg", "webp"}
