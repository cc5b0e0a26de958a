"""Pillow renderer for the Open Graph card."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from functools import lru_cache
from io import BytesIO
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from shot_card.exceptions import RenderError
from shot_card.schema import ResolvedCoffee

WIDTH = 1200
HEIGHT = 630
PADDING = 80
BACKGROUND = "#f4ecec"
INK = "#1b1818"
MUTED = "#655d5d"

TITLE_SIZE = 64
TITLE_GAP = 60
SUBTITLE_SIZE = 24
SUBTITLE_GAP = 20
ROW_SIZE = 32
ROW_GAP = 24
BADGE_SIZE = 40
BADGE_TEXT_SIZE = 20
BADGE_GAP = 20
EMPTY_SIZE = 28
FOOTER_SIZE = 20
DATE_SIZE = 16

SUBTITLE = "Recent Coffee Selections:"
EMPTY_MESSAGE = "No coffee data available"
FOOTER = "Coffee Tracking & Analytics"

logger = logging.getLogger(__name__)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


@lru_cache(maxsize=32)
def load_font(font_path: str | None, size: int) -> Font:
    """Load a font once per (path, size); missing files fall back to Pillow's default."""
    if not font_path or not Path(font_path).is_file():
        logger.warning("Font file not found (%s), using default font", font_path)
        return ImageFont.load_default(size=size)
    try:
        return ImageFont.truetype(font_path, size)
    except OSError as exc:
        raise RenderError(f"Failed to load font {font_path}: {exc}") from exc


def _text_size(draw: ImageDraw.ImageDraw, text: str, font: Font) -> tuple[int, int]:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    return int(right - left), int(bottom - top)


def render_card(
    coffees: Sequence[ResolvedCoffee],
    *,
    accent: str,
    title: str,
    font_path: str | None = None,
    today: date | None = None,
) -> bytes:
    """Draw the card and return PNG bytes.

    Args:
        coffees: Up to three resolved coffees, most recent first.
        accent: CSS hex color used for the numbered badges.
        title: Heading shown at the top of the card.
        font_path: Optional TrueType/OpenType font file.
        today: Date shown in the footer. Defaults to today.

    Returns:
        A 1200x630 PNG image.
    """
    today = today or date.today()
    image = Image.new("RGB", (WIDTH, HEIGHT), BACKGROUND)
    draw = ImageDraw.Draw(image)

    title_font = load_font(font_path, TITLE_SIZE)
    draw.text((PADDING, PADDING), title, font=title_font, fill=INK)
    content_top = PADDING + TITLE_SIZE + TITLE_GAP

    footer_font = load_font(font_path, FOOTER_SIZE)
    date_font = load_font(font_path, DATE_SIZE)
    footer_w, footer_h = _text_size(draw, FOOTER, footer_font)
    month_label = today.strftime("%B %Y")
    date_w, date_h = _text_size(draw, month_label, date_font)
    footer_top = HEIGHT - PADDING - max(footer_h, date_h)
    draw.text((PADDING, footer_top), FOOTER, font=footer_font, fill=MUTED)
    draw.text((WIDTH - PADDING - date_w, footer_top + (footer_h - date_h) // 2), month_label, font=date_font, fill=MUTED)

    if coffees:
        list_height = len(coffees) * BADGE_SIZE + (len(coffees) - 1) * ROW_GAP
    else:
        list_height = EMPTY_SIZE
    block_height = SUBTITLE_SIZE + SUBTITLE_GAP + list_height
    y = content_top + max(0, (footer_top - content_top - block_height) // 2)

    draw.text((PADDING, y), SUBTITLE, font=load_font(font_path, SUBTITLE_SIZE), fill=MUTED)
    y += SUBTITLE_SIZE + SUBTITLE_GAP

    if not coffees:
        draw.text((PADDING, y), EMPTY_MESSAGE, font=load_font(font_path, EMPTY_SIZE), fill=MUTED)
    else:
        badge_font = load_font(font_path, BADGE_TEXT_SIZE)
        row_font = load_font(font_path, ROW_SIZE)
        for index, coffee in enumerate(coffees, start=1):
            draw.ellipse((PADDING, y, PADDING + BADGE_SIZE, y + BADGE_SIZE), fill=accent)
            number = str(index)
            num_left, num_top, num_right, num_bottom = draw.textbbox((0, 0), number, font=badge_font)
            draw.text(
                (
                    PADDING + (BADGE_SIZE - (num_right - num_left)) / 2 - num_left,
                    y + (BADGE_SIZE - (num_bottom - num_top)) / 2 - num_top,
                ),
                number,
                font=badge_font,
                fill=BACKGROUND,
            )
            label_left, label_top, _, label_bottom = draw.textbbox((0, 0), coffee.label, font=row_font)
            draw.text(
                (
                    PADDING + BADGE_SIZE + BADGE_GAP - label_left,
                    y + (BADGE_SIZE - (label_bottom - label_top)) / 2 - label_top,
                ),
                coffee.label,
                font=row_font,
                fill=INK,
            )
            y += BADGE_SIZE + ROW_GAP

    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
