"""Pixel <-> em conversion against a configurable base font size."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ...utils.number_format import format_number, parse_number
from .unit_tables import PIXEL_EM_DECIMALS

logger = logging.getLogger(__name__)

PIXEL_EM_FIELDS = ("pixels", "ems", "base_size")


@dataclass(frozen=True)
class PixelEmState:
    pixels: str
    ems: str
    base_size: str


def pixels_to_ems(pixels: float, base_size: float) -> float:
    if base_size <= 0:
        raise ValueError("Base size must be greater than zero.")
    return pixels / base_size


def ems_to_pixels(ems: float, base_size: float) -> float:
    if base_size <= 0:
        raise ValueError("Base size must be greater than zero.")
    return ems * base_size


def sync_pixel_em(state: PixelEmState, changed: str) -> PixelEmState:
    """
    Recompute the dependent field after ``changed`` was edited.

    ``pixels`` rewrites ems. ``ems`` rewrites pixels. ``base_size`` also rewrites
    pixels from the current ems, so the em value stays authoritative while the
    base is adjusted. Unparseable inputs or a non-positive base change nothing.
    """
    if changed not in PIXEL_EM_FIELDS:
        raise ValueError(f"Unknown pixel/em field: {changed}")

    base = parse_number(state.base_size)
    if base is None or base <= 0:
        logger.debug("Skipping pixel/em sync; invalid base size %r", state.base_size)
        return state

    if changed == "pixels":
        pixels = parse_number(state.pixels)
        if pixels is None:
            return state
        return replace(state, ems=format_number(pixels_to_ems(pixels, base), PIXEL_EM_DECIMALS))

    ems = parse_number(state.ems)
    if ems is None:
        return state
    return replace(state, pixels=format_number(ems_to_pixels(ems, base), PIXEL_EM_DECIMALS))
