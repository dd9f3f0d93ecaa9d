"""
Configuration & Defaults
========================
Central registry for application names and the initial values of every
user-adjustable setting.

Exports:
    VISIBLE_APP_NAME (str): Window title.
    DEFAULT_SELECTION (tuple[str, ...]): Compounds selected on start-up.
    DEFAULT_* : Initial slider bounds, cursor positions and axis limits.
    COMPOUND_COLORS (tuple[str, ...]): Curve palette, indexed by registry position.
"""
from pahvapor.core.antoine import PressureUnit

ORG_ID = "pahvapor"
APP_ID = "pah-vapor-explorer"
VISIBLE_APP_NAME = "PAH Vapor Pressure Explorer"

DEFAULT_SELECTION: tuple[str, ...] = (
    "Naphthalene",
    "Phenanthrene",
    "Pyrene",
    "Fluoranthene",
    "Benzo[ghi]perylene",
)

# Temperature slider (°C)
DEFAULT_TEMPERATURE_MIN: float = -80.0
DEFAULT_TEMPERATURE_MAX: float = 600.0
DEFAULT_TEMPERATURE: float = 150.0
# Hard limits for the typed bounds; the floor stays above -C of every compound
TEMPERATURE_FLOOR: float = -150.0
TEMPERATURE_CEILING: float = 1000.0

# Reference pressure slider (Torr)
DEFAULT_PRESSURE_REF_MIN: float = 0.05
DEFAULT_PRESSURE_REF_MAX: float = 100.0
DEFAULT_PRESSURE_REF: float = 10.0
PRESSURE_REF_FLOOR: float = 0.001

# Pressure axis (Torr); None as maximum means auto-range
DEFAULT_AXIS_MIN: float = 0.05
DEFAULT_AXIS_MAX: float | None = None
AXIS_MIN_FLOOR: float = 0.0001

DEFAULT_UNIT: PressureUnit = PressureUnit.TORR
DEFAULT_LOG_SCALE: bool = True

COMPOUND_COLORS: tuple[str, ...] = (
    "#00f5d4", "#fee440", "#f15bb5", "#9b5de5", "#00bbf9",
    "#fb5607", "#8ecae6", "#a8dadc", "#e9c46a", "#f4a261",
    "#52b788", "#2a9d8f", "#e76f51", "#ffd166",
)

CURSOR_COLOR = "#00f5d4"
REFERENCE_COLOR = "#fee440"
