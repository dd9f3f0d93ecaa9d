"""
Compound Registry
=================
Static catalog of polyaromatic hydrocarbons with their Antoine coefficients.

The coefficients follow the convention
    log10(P / mmHg) = A - B / (C + T / °C)

Melting point, boiling point and molar mass are reference values shown to the
user; they do not enter any calculation.

Exports:
    CompoundRecord: Immutable data for one compound.
    CompoundRegistry: Ordered, read-only lookup of records by name.
    PAH_COMPOUNDS: The built-in table.
    DEFAULT_REGISTRY: Registry loaded with PAH_COMPOUNDS.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from pahvapor.core.errors import CompoundNotFoundError


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class CompoundRecord:
    """Antoine coefficients and physical metadata of a single compound."""
    name: str
    A: float
    B: float
    C: float
    melting_point_c: float
    boiling_point_c: float
    molar_mass_g_per_mol: float

    @property
    def coefficients(self) -> tuple[float, float, float]:
        return self.A, self.B, self.C


class CompoundRegistry:
    """
    Read-only collection of compounds keyed by display name.
    Iteration order is the order in which records were supplied.
    """
    def __init__(self, records: Iterable[CompoundRecord]) -> None:
        self._records: dict[str, CompoundRecord] = {}
        for record in records:
            if record.name in self._records:
                raise ValueError(f"Duplicate compound name '{record.name}'.")
            self._records[record.name] = record

    def get(self, name: str) -> CompoundRecord:
        """Retrieve a compound by name."""
        try:
            return self._records[name]
        except KeyError:
            raise CompoundNotFoundError(name) from None

    def names(self) -> list[str]:
        """List all compound names in registry order."""
        return list(self._records.keys())

    def records(self, names: Iterable[str]) -> list[CompoundRecord]:
        """
        Resolve a selection into records, ordered by the registry
        rather than by the selection.
        """
        wanted = set(names)
        for name in wanted:
            if name not in self._records:
                raise CompoundNotFoundError(name)
        return [record for name, record in self._records.items() if name in wanted]

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[CompoundRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)


# ------------------------------------------------------------------------------
# Built-in catalog
# ------------------------------------------------------------------------------
PAH_COMPOUNDS: tuple[CompoundRecord, ...] = (
    CompoundRecord("Naphthalene", A=7.01065, B=1733.71, C=202.700,
                   melting_point_c=80, boiling_point_c=218, molar_mass_g_per_mol=128.2),
    CompoundRecord("Acenaphthylene", A=7.0685, B=1887.0, C=196.0,
                   melting_point_c=92, boiling_point_c=280, molar_mass_g_per_mol=152.2),
    CompoundRecord("9H-Fluorene", A=7.0200, B=1975.0, C=196.0,
                   melting_point_c=116, boiling_point_c=295, molar_mass_g_per_mol=166.2),
    CompoundRecord("Phenanthrene", A=7.0600, B=2100.0, C=196.0,
                   melting_point_c=101, boiling_point_c=340, molar_mass_g_per_mol=178.2),
    CompoundRecord("Anthracene", A=6.9800, B=2180.0, C=185.0,
                   melting_point_c=216, boiling_point_c=342, molar_mass_g_per_mol=178.2),
    CompoundRecord("4H-Cyclopenta[def]phenanthrene", A=7.050, B=2250.0, C=190.0,
                   melting_point_c=174, boiling_point_c=360, molar_mass_g_per_mol=190.2),
    CompoundRecord("Pyrene", A=7.0150, B=2320.0, C=190.0,
                   melting_point_c=150, boiling_point_c=393, molar_mass_g_per_mol=202.3),
    CompoundRecord("Fluoranthene", A=7.0300, B=2300.0, C=188.0,
                   melting_point_c=111, boiling_point_c=384, molar_mass_g_per_mol=202.3),
    CompoundRecord("beta-Pyrene", A=7.0400, B=2400.0, C=185.0,
                   melting_point_c=181, boiling_point_c=404, molar_mass_g_per_mol=202.3),
    CompoundRecord("2-methyl-Fluoranthene", A=7.020, B=2350.0, C=187.0,
                   melting_point_c=120, boiling_point_c=395, molar_mass_g_per_mol=216.3),
    CompoundRecord("Cyclopenta[cd]pyrene", A=7.020, B=2420.0, C=185.0,
                   melting_point_c=170, boiling_point_c=420, molar_mass_g_per_mol=226.3),
    CompoundRecord("Cyclopenta[cd]pyrene isomer", A=7.010, B=2440.0, C=184.0,
                   melting_point_c=175, boiling_point_c=425, molar_mass_g_per_mol=226.3),
    CompoundRecord("Benzo[c]phenanthrene", A=6.9900, B=2450.0, C=183.0,
                   melting_point_c=68, boiling_point_c=425, molar_mass_g_per_mol=228.3),
    CompoundRecord("Benzo[ghi]perylene", A=6.9700, B=2700.0, C=178.0,
                   melting_point_c=278, boiling_point_c=500, molar_mass_g_per_mol=276.3),
)

DEFAULT_REGISTRY = CompoundRegistry(PAH_COMPOUNDS)
