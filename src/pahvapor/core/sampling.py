"""
Sampling & Query Layer
======================
Turns a selection of compounds plus the current cursor/axis settings into
the data the presentation layer draws: a curve grid for the chart and a list
of summary rows for the table.

All functions are pure. Nothing is cached; every call recomputes from its
arguments.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
import math
from typing import Iterable, Mapping, TYPE_CHECKING

import numpy as np

from pahvapor.core.antoine import (
    PressureUnit, resolve_unit, convert_pressure, to_mmhg,
    vapor_pressure, boiling_temperature, vapor_pressure_curve
)
from pahvapor.core.compounds import CompoundRegistry, DEFAULT_REGISTRY
from pahvapor.core.errors import DomainUndefinedError, InvalidRangeError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Phase(StrEnum):
    LIQUID = "liquid"
    VAPOR = "vapor"


@dataclass(frozen=True)
class SamplePoint:
    """One temperature sample with the pressure of every compound defined there."""
    temperature_c: float
    pressures: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class SampleGrid:
    """Ordered temperature samples for plotting vapor pressure curves."""
    points: tuple[SamplePoint, ...]
    names: tuple[str, ...]
    unit: PressureUnit
    step: int

    def __len__(self) -> int:
        return len(self.points)

    def temperatures(self) -> npt.NDArray[np.float64]:
        return np.array([p.temperature_c for p in self.points], dtype=np.float64)

    def series(self, name: str) -> npt.NDArray[np.float64]:
        """Pressure values of one compound; missing samples are NaN."""
        return np.array(
            [p.pressures.get(name, np.nan) for p in self.points],
            dtype=np.float64
        )

    def nearest(self, temperature_c: float) -> SamplePoint | None:
        """Sample closest to `temperature_c`, or None for an empty grid."""
        if not self.points:
            return None
        index = int(np.argmin(np.abs(self.temperatures() - temperature_c)))
        return self.points[index]


@dataclass(frozen=True)
class SummaryRow:
    """
    Values shown in the summary table for one compound.

    `phase` is a single-component heuristic: vapor when the cursor temperature
    is at or above the boiling point at the reference pressure. It ignores
    mixture effects and metastable states.
    """
    name: str
    vapor_pressure: float | None
    boiling_point_c: float | None
    phase: Phase


def sampling_step(t_min: float, t_max: float) -> int:
    """
    Temperature step for the curve grid.

    Wider ranges use coarser steps so the point count stays in the low
    hundreds:
        width > 200 °C -> 5 °C
        width >  50 °C -> 2 °C
        otherwise      -> 1 °C
    """
    width = t_max - t_min
    if width > 200:
        return 5
    if width > 50:
        return 2
    return 1


def build_curve_grid(
    selected_names: Iterable[str],
    t_min: float,
    t_max: float,
    unit: PressureUnit | str,
    registry: CompoundRegistry = DEFAULT_REGISTRY
) -> SampleGrid:
    """
    Sample vapor pressure curves of the selected compounds.

    Samples start at `t_min` and advance by `sampling_step`; the last sample
    may fall short of `t_max` when the range is not a multiple of the step.

    Raises:
        InvalidRangeError: if t_min >= t_max.
        CompoundNotFoundError: if a selected name is not in the registry.
    """
    if not t_min < t_max:
        raise InvalidRangeError(f"Temperature range is empty: min={t_min}, max={t_max}.")

    unit = resolve_unit(unit)
    records = registry.records(selected_names)
    step = sampling_step(t_min, t_max)
    n_samples = math.floor((t_max - t_min) / step + 1e-9) + 1
    temperatures = t_min + step * np.arange(n_samples, dtype=np.float64)

    columns: dict[str, npt.NDArray[np.float64]] = {}
    for record in records:
        pressures = vapor_pressure_curve(record.A, record.B, record.C, temperatures)
        undefined = int(np.count_nonzero(np.isnan(pressures)))
        if undefined:
            logger.debug(f"{record.name}: omitting {undefined} undefined samples.")
        columns[record.name] = convert_pressure(pressures, unit)

    points = tuple(
        SamplePoint(
            temperature_c=float(t),
            pressures={
                name: float(values[i])
                for name, values in columns.items()
                if not np.isnan(values[i])
            }
        )
        for i, t in enumerate(temperatures)
    )

    logger.debug(
        f"Built curve grid: {len(points)} samples, step {step} °C, "
        f"{len(records)} compounds, unit {unit}."
    )
    return SampleGrid(points=points, names=tuple(columns.keys()), unit=unit, step=step)


def summarize(
    selected_names: Iterable[str],
    temperature_c: float,
    pressure_ref: float,
    unit: PressureUnit | str,
    registry: CompoundRegistry = DEFAULT_REGISTRY
) -> list[SummaryRow]:
    """
    Point evaluation for the summary table.

    Args:
        selected_names: Compounds to include; output follows registry order.
        temperature_c: Cursor temperature in °C.
        pressure_ref: Reference pressure in the display unit.
        unit: Display unit for both input and output pressures.
    """
    unit = resolve_unit(unit)
    pressure_ref_mmhg = to_mmhg(pressure_ref, unit)

    rows: list[SummaryRow] = []
    for record in registry.records(selected_names):
        try:
            vp: float | None = convert_pressure(
                vapor_pressure(record.A, record.B, record.C, temperature_c), unit
            )
        except DomainUndefinedError as e:
            logger.debug(f"{record.name}: {e}")
            vp = None

        bp = boiling_temperature(record.A, record.B, record.C, pressure_ref_mmhg)
        phase = Phase.VAPOR if bp is not None and temperature_c >= bp else Phase.LIQUID
        rows.append(SummaryRow(name=record.name, vapor_pressure=vp, boiling_point_c=bp, phase=phase))

    return rows


def reference_line(pressure_ref_mmhg: float, unit: PressureUnit | str) -> float:
    """Reference pressure in the display unit, for the horizontal guide line."""
    return convert_pressure(pressure_ref_mmhg, unit)


def axis_domain(
    axis_min_mmhg: float,
    axis_max_mmhg: float | None,
    unit: PressureUnit | str
) -> tuple[float, float | None]:
    """Pressure axis bounds in the display unit; an upper bound of None means auto."""
    lo = convert_pressure(axis_min_mmhg, unit)
    hi = convert_pressure(axis_max_mmhg, unit) if axis_max_mmhg is not None else None
    return lo, hi
