from __future__ import annotations

import json
import logging
from pathlib import Path

from click.testing import CliRunner
from pypdf import PdfReader

from pdfworks.cli.main import cli
from pdfworks.core.utils import set_log_level


def _run(*args: str, env: dict | None = None):
    return CliRunner().invoke(cli, [str(arg) for arg in args], env=env)


def test_help_lists_commands() -> None:
    result = _run("--help")

    assert result.exit_code == 0
    for command in ("sign", "rotate", "page-numbers", "watermark", "protect", "split", "merge"):
        assert command in result.output


def test_validate_command(sample_pdf: Path, tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"nope")

    assert _run("validate", sample_pdf).exit_code == 0
    result = _run("validate", broken)
    assert result.exit_code == 1
    assert "not a valid PDF" in result.output


def test_rotate_command(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "rotated.pdf"

    result = _run("rotate", sample_pdf, "-o", output, "--angle", "180")

    assert result.exit_code == 0, result.output
    assert {page.rotation for page in PdfReader(str(output)).pages} == {180}


def test_rotate_command_rejects_invalid_angle(sample_pdf: Path, tmp_path: Path) -> None:
    result = _run("rotate", sample_pdf, "-o", tmp_path / "out.pdf", "--angle", "45")

    assert result.exit_code != 0


def test_sign_command(sample_pdf: Path, tmp_path: Path) -> None:
    placements = tmp_path / "placements.json"
    placements.write_text(
        json.dumps(
            [
                {"pageNumber": 1, "x": 10, "y": 10, "fieldType": "name"},
                {"pageNumber": 42, "x": 10, "y": 10, "fieldType": "text", "value": "gone"},
            ]
        )
    )
    output = tmp_path / "signed.pdf"

    result = _run("sign", sample_pdf, placements, "-o", output, "--name", "Ada Lovelace")

    assert result.exit_code == 0, result.output
    assert "skipped" in result.output
    assert "Ada Lovelace" in PdfReader(str(output)).pages[0].extract_text()


def test_sign_command_rejects_bad_json(sample_pdf: Path, tmp_path: Path) -> None:
    placements = tmp_path / "placements.json"
    placements.write_text("{not json")

    result = _run("sign", sample_pdf, placements, "-o", tmp_path / "out.pdf")

    assert result.exit_code == 1
    assert "Error" in result.output


def test_page_numbers_and_watermark_commands(sample_pdf: Path, tmp_path: Path) -> None:
    numbered = tmp_path / "numbered.pdf"
    marked = tmp_path / "marked.pdf"

    assert _run("page-numbers", sample_pdf, "-o", numbered, "-p", "top-left").exit_code == 0
    result = _run("watermark", numbered, "DRAFT", "-o", marked, "--opacity", "0.2")

    assert result.exit_code == 0, result.output
    assert len(PdfReader(str(marked)).pages) == 5


def test_protect_and_unprotect_commands(sample_pdf: Path, tmp_path: Path) -> None:
    protected = tmp_path / "protected.pdf"
    unprotected = tmp_path / "plain.pdf"

    assert _run("protect", sample_pdf, "-o", protected, "--password", "secret").exit_code == 0
    assert PdfReader(str(protected)).is_encrypted is True

    again = _run("protect", protected, "-o", tmp_path / "again.pdf", "--password", "secret")
    assert again.exit_code == 1
    assert "already encrypted" in again.output

    assert _run("unprotect", protected, "-o", unprotected, "--password", "secret").exit_code == 0
    assert PdfReader(str(unprotected)).is_encrypted is False


def test_split_and_merge_commands(sample_pdf: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "parts"

    result = _run("split", sample_pdf, "-o", out_dir, "--ranges", "1-2,3-5")
    assert result.exit_code == 0, result.output
    parts = sorted(out_dir.glob("*.pdf"))
    assert [path.name for path in parts] == ["sample_pages_1-2.pdf", "sample_pages_3-5.pdf"]

    merged = tmp_path / "merged.pdf"
    result = _run("merge", *parts, "-o", merged, "--bookmark", "Start", "--bookmark", "Rest")
    assert result.exit_code == 0, result.output
    assert len(PdfReader(str(merged)).pages) == 5


def test_split_command_invalid_range(sample_pdf: Path, tmp_path: Path) -> None:
    result = _run("split", sample_pdf, "-o", tmp_path / "parts", "--ranges", "4-9")

    assert result.exit_code == 1
    assert "Invalid" in result.output


def test_images_command(tmp_path: Path, png_bytes: bytes) -> None:
    image = tmp_path / "photo.png"
    image.write_bytes(png_bytes)
    output = tmp_path / "photos.pdf"

    result = _run("images", image, image, "-o", output)

    assert result.exit_code == 0, result.output
    assert len(PdfReader(str(output)).pages) == 2


def test_images_command_unsupported_type(tmp_path: Path) -> None:
    image = tmp_path / "anim.gif"
    image.write_bytes(b"GIF89a")

    result = _run("images", image, "-o", tmp_path / "out.pdf")

    assert result.exit_code == 1
    assert "Unsupported image type" in result.output


def test_invalid_environment_configuration(sample_pdf: Path) -> None:
    result = _run("validate", sample_pdf, env={"PDFWORKS_IMAGE_MARGIN": "wide"})

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_verbose_enables_debug_logging(sample_pdf: Path) -> None:
    result = _run("--verbose", "validate", sample_pdf)

    assert result.exit_code == 0
    assert logging.getLogger("pdfworks.validator").level == logging.DEBUG
    set_log_level(logging.NOTSET)


def test_tools_command_lists_registry() -> None:
    result = _run("tools")

    assert result.exit_code == 0
    assert "page-numbers" in result.output
    assert "watermark" in result.output
