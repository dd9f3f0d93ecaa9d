"""Text parsing and formatting helpers shared by the table and the bound editors."""
from __future__ import annotations

import math

EMPTY_VALUE = "—"


def parse_bound(text: str) -> float | None:
    """
    Parse an inline-edited number. Returns None for anything that is not a
    finite number; callers keep the previous value in that case.
    A decimal comma is accepted.
    """
    try:
        value = float(text.strip().replace(",", "."))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def format_pressure(value: float | None) -> str:
    if value is None:
        return EMPTY_VALUE
    if value < 1e-4:
        return f"{value:.3e}"
    if value < 1:
        return f"{value:.5f}"
    return f"{value:.3f}"


def format_boiling_point(value: float | None) -> str:
    return EMPTY_VALUE if value is None else f"{value:.1f}"


def format_bound(value: float | None) -> str:
    """Short form of an axis or slider bound (3 significant digits)."""
    if value is None:
        return "auto"
    return f"{value:.3g}"


def format_hover_value(value: float) -> str:
    """Chart hover readout: 2-digit scientific notation below 0.001, else 4 decimals."""
    if value < 1e-3:
        return f"{value:.2e}"
    return f"{value:.4f}"
