"""Computational core: compound registry, Antoine engine and sampling layer."""
from pahvapor.core.antoine import (
    PressureUnit, UNIT_METADATA, convert_pressure, to_mmhg,
    vapor_pressure, boiling_temperature, vapor_pressure_curve
)
from pahvapor.core.compounds import CompoundRecord, CompoundRegistry, PAH_COMPOUNDS, DEFAULT_REGISTRY
from pahvapor.core.errors import (
    PahVaporError, CompoundNotFoundError, DomainUndefinedError,
    InvalidArgumentError, InvalidRangeError
)
from pahvapor.core.sampling import (
    Phase, SamplePoint, SampleGrid, SummaryRow,
    sampling_step, build_curve_grid, summarize, reference_line, axis_domain
)
