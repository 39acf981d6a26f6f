from __future__ import annotations

import pytest
from reportlab.lib.pagesizes import A4, LETTER

from pdfworks.core.config import DEFAULT_CONFIG, EngineConfig, FontVariant


def test_defaults() -> None:
    config = EngineConfig()

    assert config.page_size == A4
    assert config.image_margin == 20
    assert config.page_number_margin == 30
    assert config.owner_password_suffix == "_owner"
    assert config.font_for(FontVariant.BOLD) == "Helvetica-Bold"
    assert config.font_for(FontVariant.BOLD_OBLIQUE) == "Helvetica-BoldOblique"
    assert DEFAULT_CONFIG == config


def test_font_for_unknown_variant_uses_fallback() -> None:
    config = EngineConfig(fonts={FontVariant.REGULAR: "Courier"})

    assert config.font_for(FontVariant.REGULAR) == "Courier"
    assert config.font_for(FontVariant.BOLD) == config.fallback_font


def test_with_updates_ignores_none() -> None:
    config = DEFAULT_CONFIG.with_updates(image_margin=5.0, owner_password_suffix=None)

    assert config.image_margin == 5.0
    assert config.owner_password_suffix == "_owner"
    assert DEFAULT_CONFIG.image_margin == 20


def test_from_env_reads_variables() -> None:
    config = EngineConfig.from_env(
        {
            "PDFWORKS_PAGE_SIZE": "letter",
            "PDFWORKS_IMAGE_MARGIN": "36",
            "PDFWORKS_OWNER_SUFFIX": "-admin",
        }
    )

    assert config.page_size == LETTER
    assert config.image_margin == 36.0
    assert config.owner_password_suffix == "-admin"


def test_from_env_empty_environment_gives_defaults() -> None:
    assert EngineConfig.from_env({}) == EngineConfig()


@pytest.mark.parametrize(
    "environ",
    [
        {"PDFWORKS_PAGE_SIZE": "A0"},
        {"PDFWORKS_IMAGE_MARGIN": "wide"},
        {"PDFWORKS_IMAGE_MARGIN": "-1"},
    ],
)
def test_from_env_rejects_invalid_values(environ: dict) -> None:
    with pytest.raises(ValueError):
        EngineConfig.from_env(environ)
