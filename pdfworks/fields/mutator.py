"""Apply a batch of field placements to a document."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from ..core.config import DEFAULT_CONFIG, EngineConfig
from ..core.document import clone_document, load_document, page_size, serialize
from ..core.overlay import PageOverlay
from ..core.utils import Source, get_logger
from .embedder import ContentEmbedder
from .types import (
    EmbedResult,
    FieldPlacement,
    PlacementOutcome,
    PlacementStatus,
    SignerDetails,
)

LOGGER = get_logger("pdfworks.fields")


def embed_fields(
    source: Source,
    placements: Iterable[FieldPlacement],
    *,
    signer: SignerDetails | None = None,
    config: EngineConfig | None = None,
) -> EmbedResult:
    """Embed ``placements`` into ``source`` and report each placement's outcome.

    Placements are drawn in the given order, so later ones cover earlier
    ones. A placement whose page number does not exist is skipped.
    Placements with an empty value take their value from ``signer`` when
    given.

    Raises:
        ParseError: If ``source`` is not a loadable PDF document.
    """

    config = config or DEFAULT_CONFIG
    reader = load_document(source)
    writer = clone_document(reader)
    embedder = ContentEmbedder(config)

    overlays: dict[int, PageOverlay] = {}
    outcomes: list[PlacementOutcome] = []
    total_pages = len(writer.pages)

    for index, placement in enumerate(placements):
        page_index = placement.page_number - 1
        if not 0 <= page_index < total_pages:
            LOGGER.debug(
                "Skipping placement %d: page %d not in document of %d page(s)",
                index,
                placement.page_number,
                total_pages,
            )
            outcomes.append(
                PlacementOutcome(
                    index,
                    placement,
                    PlacementStatus.SKIPPED,
                    f"page {placement.page_number} does not exist",
                )
            )
            continue

        if not placement.value and signer is not None:
            placement = replace(placement, value=signer.value_for(placement.field_kind))

        overlay = overlays.get(page_index)
        if overlay is None:
            overlay = PageOverlay(page_size(writer.pages[page_index]))
            overlays[page_index] = overlay
        outcomes.append(embedder.embed(overlay.canvas, overlay.size, placement, index=index))

    for page_index in sorted(overlays):
        overlays[page_index].apply(writer.pages[page_index])

    data = serialize(writer)
    result = EmbedResult(data=data, outcomes=outcomes)
    LOGGER.info(
        "Embedded %d placement(s): %d fallback, %d skipped, %d failed",
        len(outcomes),
        len(result.fallbacks),
        len(result.skipped),
        len(result.failed),
    )
    return result


def apply_field_placements(
    source: Source,
    placements: Iterable[FieldPlacement],
    *,
    signer: SignerDetails | None = None,
    config: EngineConfig | None = None,
) -> bytes:
    """Return the bytes of ``source`` with ``placements`` embedded."""

    return embed_fields(source, placements, signer=signer, config=config).data


__all__ = ["embed_fields", "apply_field_placements"]
