"""
Antoine Engine
==============
Forward and inverse evaluation of the Antoine equation and pressure unit
conversion.

    log10(P / mmHg) = A - B / (C + T / °C)

Results that have no finite value are never returned as inf/NaN from the
scalar functions: `vapor_pressure` raises `DomainUndefinedError` and
`boiling_temperature` returns None.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from pahvapor.core.errors import DomainUndefinedError, InvalidArgumentError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class PressureUnit(StrEnum):
    TORR = "Torr"
    MMHG = "mmHg"
    PA = "Pa"
    ATM = "atm"
    BAR = "bar"


@dataclass(frozen=True)
class UnitMetadata:
    label: str
    factor: float  # multiplier applied to a value in mmHg


# Torr and mmHg are numerically identical for display purposes.
UNIT_METADATA: dict[PressureUnit, UnitMetadata] = {
    PressureUnit.TORR: UnitMetadata(label="Torr", factor=1.0),
    PressureUnit.MMHG: UnitMetadata(label="mmHg", factor=1.0),
    PressureUnit.PA: UnitMetadata(label="Pa", factor=133.322),
    PressureUnit.ATM: UnitMetadata(label="atm", factor=1.0 / 760.0),
    PressureUnit.BAR: UnitMetadata(label="bar", factor=0.00133322),
}


def resolve_unit(unit: PressureUnit | str) -> PressureUnit:
    """Accept either the enum member or its string value."""
    try:
        return PressureUnit(unit)
    except ValueError:
        raise InvalidArgumentError(f"Unknown pressure unit: {unit!r}") from None


def convert_pressure(value_mmhg: float, unit: PressureUnit | str) -> float:
    """Convert a pressure in mmHg to the given display unit."""
    return value_mmhg * UNIT_METADATA[resolve_unit(unit)].factor


def to_mmhg(value: float, unit: PressureUnit | str) -> float:
    """Convert a pressure in the given display unit back to mmHg."""
    return value / UNIT_METADATA[resolve_unit(unit)].factor


def vapor_pressure(A: float, B: float, C: float, temperature_c: float) -> float:
    """
    Vapor pressure according to the Antoine equation.

    Args:
        A, B, C: Antoine coefficients (mmHg, °C convention).
        temperature_c: Temperature in °C.

    Returns:
        Vapor pressure in mmHg.

    Raises:
        DomainUndefinedError: if C + T is zero or the result is not finite.
    """
    denominator = C + temperature_c
    if denominator == 0:
        raise DomainUndefinedError(
            f"Antoine equation is singular at T = {temperature_c} °C (C + T = 0)."
        )
    try:
        pressure = 10.0 ** (A - B / denominator)
    except OverflowError:
        raise DomainUndefinedError(
            f"Vapor pressure overflows at T = {temperature_c} °C."
        ) from None
    if not math.isfinite(pressure):
        raise DomainUndefinedError(f"Vapor pressure is not finite at T = {temperature_c} °C.")
    return pressure


def boiling_temperature(A: float, B: float, C: float, pressure_mmhg: float) -> float | None:
    """
    Temperature at which the vapor pressure equals `pressure_mmhg`.

    Args:
        A, B, C: Antoine coefficients (mmHg, °C convention).
        pressure_mmhg: Ambient pressure in mmHg, strictly positive.

    Returns:
        Boiling temperature in °C, or None when the inverted equation has no
        real solution (A - log10(P) <= 0).

    Raises:
        InvalidArgumentError: if the pressure is not a positive finite number.
    """
    if not math.isfinite(pressure_mmhg) or pressure_mmhg <= 0:
        raise InvalidArgumentError(
            f"Pressure must be a positive finite number, got {pressure_mmhg}."
        )
    denominator = A - math.log10(pressure_mmhg)
    if denominator <= 0:
        return None
    return B / denominator - C


def vapor_pressure_curve(
    A: float,
    B: float,
    C: float,
    temperatures: npt.ArrayLike
) -> npt.NDArray[np.float64]:
    """
    Vectorised `vapor_pressure` over temperatures in °C.
    Entries with no finite value are NaN. A scalar input gives a 0-d array.
    """
    t_array = np.asarray(temperatures, dtype=np.float64)
    denominator = C + t_array
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        pressures = np.power(10.0, A - B / denominator)
    return np.where((denominator == 0) | ~np.isfinite(pressures), np.nan, pressures)
