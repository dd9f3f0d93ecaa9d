"""Tests for the built-in compound registry."""
import dataclasses

import pytest

from pahvapor.core.compounds import CompoundRecord, CompoundRegistry, DEFAULT_REGISTRY, PAH_COMPOUNDS
from pahvapor.core.errors import CompoundNotFoundError


class TestDefaultRegistry:

    def test_has_fourteen_compounds(self):
        assert len(DEFAULT_REGISTRY) == 14
        assert len(PAH_COMPOUNDS) == 14

    def test_names_keep_table_order(self):
        names = DEFAULT_REGISTRY.names()
        assert names[0] == "Naphthalene"
        assert names[-1] == "Benzo[ghi]perylene"
        assert names == [record.name for record in PAH_COMPOUNDS]

    def test_naphthalene_constants(self):
        record = DEFAULT_REGISTRY.get("Naphthalene")
        assert record.coefficients == (7.01065, 1733.71, 202.700)
        assert record.melting_point_c == 80
        assert record.boiling_point_c == 218
        assert record.molar_mass_g_per_mol == pytest.approx(128.2)

    def test_unknown_name_raises_not_found(self):
        with pytest.raises(CompoundNotFoundError) as exc_info:
            DEFAULT_REGISTRY.get("Benzene")
        assert "Benzene" in str(exc_info.value)

    def test_not_found_is_a_key_error(self):
        with pytest.raises(KeyError):
            DEFAULT_REGISTRY.get("Benzene")

    def test_contains(self):
        assert "Pyrene" in DEFAULT_REGISTRY
        assert "Benzene" not in DEFAULT_REGISTRY


class TestRegistryRecords:

    def test_records_follow_registry_order_not_selection_order(self):
        records = DEFAULT_REGISTRY.records(["Pyrene", "Naphthalene", "Anthracene"])
        assert [r.name for r in records] == ["Naphthalene", "Anthracene", "Pyrene"]

    def test_records_reject_unknown_names(self):
        with pytest.raises(CompoundNotFoundError):
            DEFAULT_REGISTRY.records(["Naphthalene", "Benzene"])

    def test_empty_selection(self):
        assert DEFAULT_REGISTRY.records([]) == []


class TestCustomRegistry:

    def test_duplicate_names_rejected(self):
        record = CompoundRecord("X", A=7.0, B=1500.0, C=200.0,
                                melting_point_c=0, boiling_point_c=100, molar_mass_g_per_mol=100.0)
        with pytest.raises(ValueError):
            CompoundRegistry([record, record])

    def test_records_are_immutable(self):
        record = DEFAULT_REGISTRY.get("Naphthalene")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.A = 1.0
