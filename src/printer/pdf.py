"""Render a decoder key and secret message as an A4 PDF worksheet."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Sequence

from multicrypto.generator import DecoderKeyCharacter, PuzzleCharacter
from project_config import get_section

from .text import DEFAULT_BLANK

_LOGGER = logging.getLogger(__name__)

PAGE_CONFIG = get_section("pdf.page", {})
RENDER_CONFIG = get_section("pdf.rendering", {})

PAGE_WIDTH_CM = float(PAGE_CONFIG.get("width_cm", 21.0))
PAGE_HEIGHT_CM = float(PAGE_CONFIG.get("height_cm", 29.7))
DEFAULT_MARGIN_CM = float(PAGE_CONFIG.get("margin_cm", 2.0))
FOOTER_OFFSET_CM = float(PAGE_CONFIG.get("footer_offset_cm", 1.0))
TITLE_FONT_SIZE = int(RENDER_CONFIG.get("title_font_size", 16))
BODY_FONT_SIZE = int(RENDER_CONFIG.get("body_font_size", 11))
LINE_SPACING_CM = float(RENDER_CONFIG.get("line_spacing_cm", 0.75))

KEY_COLUMNS = 2


def _message_lines(puzzle: Sequence[PuzzleCharacter], blank: str) -> List[str]:
    return [f"{ch} = {blank}" if ch.is_math_problem() else str(ch) for ch in puzzle]


def export_pdf(
    clues: Sequence[DecoderKeyCharacter],
    puzzle: Sequence[PuzzleCharacter],
    out_path: str | Path,
    *,
    margin_cm: float = DEFAULT_MARGIN_CM,
    blank: str = DEFAULT_BLANK,
) -> Dict[str, Any]:
    """Write the worksheet to ``out_path`` and return output metadata.

    The first page holds the decoder key in two columns; the secret message
    follows on as many pages as it needs.
    """

    from matplotlib.backends.backend_pdf import PdfPages
    import matplotlib.pyplot as plt

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    usable_h_cm = PAGE_HEIGHT_CM - 2 * margin_cm
    # one line is reserved for the page title
    lines_per_page = max(1, int(usable_h_cm / LINE_SPACING_CM) - 2)
    message = _message_lines(puzzle, blank)
    message_pages = max(1, math.ceil(len(message) / lines_per_page))

    def y_at(line: int) -> float:
        return 1 - (margin_cm + line * LINE_SPACING_CM) / PAGE_HEIGHT_CM

    def x_at(cm: float) -> float:
        return cm / PAGE_WIDTH_CM

    def new_page(title: str):
        fig = plt.figure(figsize=(PAGE_WIDTH_CM / 2.54, PAGE_HEIGHT_CM / 2.54))
        fig.text(x_at(margin_cm), y_at(0), title, ha="left", va="top",
                 fontsize=TITLE_FONT_SIZE, weight="bold")
        return fig

    def footer(fig, page: int, total: int) -> None:
        fig.text(0.5, FOOTER_OFFSET_CM / PAGE_HEIGHT_CM, f"{page} / {total}",
                 ha="center", va="bottom", fontsize=8)

    total_pages = 1 + message_pages
    with PdfPages(out_path) as pdf:
        fig = new_page("Decoder Key")
        per_column = math.ceil(len(clues) / KEY_COLUMNS)
        column_w_cm = (PAGE_WIDTH_CM - 2 * margin_cm) / KEY_COLUMNS
        for index, clue in enumerate(clues):
            column, row = divmod(index, per_column)
            fig.text(
                x_at(margin_cm + column * column_w_cm),
                y_at(row + 2),
                f"{clue.letter}: {clue.clue} = {blank}",
                ha="left", va="top", fontsize=BODY_FONT_SIZE, family="monospace",
            )
        footer(fig, 1, total_pages)
        pdf.savefig(fig)
        plt.close(fig)

        for page in range(message_pages):
            fig = new_page("Secret Message")
            chunk = message[page * lines_per_page:(page + 1) * lines_per_page]
            for row, line in enumerate(chunk):
                fig.text(x_at(margin_cm), y_at(row + 2), line,
                         ha="left", va="top", fontsize=BODY_FONT_SIZE, family="monospace")
            footer(fig, page + 2, total_pages)
            pdf.savefig(fig)
            plt.close(fig)

    _LOGGER.info("wrote %d page(s) to %s", total_pages, out_path)
    return {"pdf_path": str(out_path), "pages": total_pages}


__all__ = ["export_pdf"]
