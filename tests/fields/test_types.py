from __future__ import annotations

from datetime import date

import pytest

from pdfworks.core.config import FontVariant
from pdfworks.fields.types import (
    DEFAULT_STYLE,
    FIELD_STYLES,
    EmbedResult,
    FieldKind,
    FieldPlacement,
    PlacementOutcome,
    PlacementStatus,
    SignerDetails,
    style_for,
)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("signature", FieldKind.SIGNATURE),
        ("Company-Stamp", FieldKind.COMPANY_STAMP),
        ("company_stamp", FieldKind.COMPANY_STAMP),
        (FieldKind.DATE, FieldKind.DATE),
        ("checkbox", None),
        (None, None),
    ],
)
def test_field_kind_parse(tag, expected) -> None:
    assert FieldKind.parse(tag) is expected


def test_every_kind_has_a_style() -> None:
    assert set(FIELD_STYLES) == set(FieldKind)
    assert FIELD_STYLES[FieldKind.SIGNATURE].font is FontVariant.BOLD_OBLIQUE
    assert FIELD_STYLES[FieldKind.SIGNATURE].font_size == 18
    assert FIELD_STYLES[FieldKind.INITIALS].font_size == 16
    assert FIELD_STYLES[FieldKind.COMPANY_STAMP].font_size == 8
    assert style_for(None) == DEFAULT_STYLE
    assert DEFAULT_STYLE.font_size == 14


def test_placement_box_defaults_by_kind() -> None:
    signature = FieldPlacement(page_number=1, x=0, y=0, kind="signature")
    custom = FieldPlacement(page_number=1, x=0, y=0, kind="name", width=90)
    unknown = FieldPlacement(page_number=1, x=0, y=0, kind="checkbox")

    assert signature.box == (200, 80)
    assert custom.box == (90, 50)
    assert unknown.kind == "checkbox"
    assert unknown.field_kind is None
    assert unknown.box == (DEFAULT_STYLE.width, DEFAULT_STYLE.height)


def test_placement_from_editor_payload() -> None:
    placement = FieldPlacement.from_mapping(
        {"pageNumber": 2, "x": "12.5", "y": 40, "fieldType": "initials", "signatureData": "AB"}
    )

    assert placement.page_number == 2
    assert placement.x == 12.5
    assert placement.kind is FieldKind.INITIALS
    assert placement.value == "AB"
    assert placement.width is None


def test_placement_from_mapping_requires_page() -> None:
    with pytest.raises(ValueError):
        FieldPlacement.from_mapping({"x": 1, "y": 1})


def test_signer_details_values() -> None:
    signer = SignerDetails(full_name="Ada Lovelace", initials="AL")
    today = date(2024, 1, 1)

    assert signer.value_for(FieldKind.NAME) == "Ada Lovelace"
    assert signer.value_for(FieldKind.SIGNATURE) == "Ada Lovelace"
    assert signer.value_for(FieldKind.INITIALS) == "AL"
    assert signer.value_for(FieldKind.DATE, today=today) == "2024-01-01"
    assert signer.value_for(FieldKind.TEXT) == "Custom Text"
    assert signer.value_for(None) == ""


def test_embed_result_groups_outcomes() -> None:
    placement = FieldPlacement(page_number=1, x=0, y=0)
    result = EmbedResult(
        data=b"",
        outcomes=[
            PlacementOutcome(0, placement, PlacementStatus.EMBEDDED),
            PlacementOutcome(1, placement, PlacementStatus.SKIPPED, "page 9 does not exist"),
            PlacementOutcome(2, placement, PlacementStatus.FALLBACK, "image could not be embedded"),
        ],
    )

    assert [outcome.index for outcome in result.embedded] == [0]
    assert [outcome.index for outcome in result.skipped] == [1]
    assert [outcome.index for outcome in result.fallbacks] == [2]
    assert result.failed == []
    assert "skipped" in str(result.skipped[0])
