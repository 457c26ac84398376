"""Tests for the bundled demo dataset.

Covers:
- Size, unique ids and symbols, sector coverage
- Producer invariants: change and change_percent consistent with prices
- Every record passes the default filters
- Timestamps anchored to the as-of moment
- find_by_symbol lookups
"""

import datetime

import pytest

from Quant_Trade.data.fallback import (
    SECTOR_OPTIONS,
    SECTORS,
    build_fallback_dataset,
    find_by_symbol,
    load_fallback_dataset,
)
from Quant_Trade.models import ALL_SECTORS, FilterCriteria, Instrument
from Quant_Trade.query.predicate import matches


class TestBuildFallbackDataset:
    """Tests for build_fallback_dataset()."""

    def test_thirty_instruments(self, dataset: tuple[Instrument, ...]) -> None:
        assert isinstance(dataset, tuple)
        assert len(dataset) == 30

    def test_unique_ids_and_symbols(self, dataset: tuple[Instrument, ...]) -> None:
        assert len({r.id for r in dataset}) == 30
        assert len({r.symbol for r in dataset}) == 30

    def test_sectors_known(self, dataset: tuple[Instrument, ...]) -> None:
        assert {r.sector for r in dataset} <= set(SECTORS)

    def test_change_fields_consistent(self, dataset: tuple[Instrument, ...]) -> None:
        for record in dataset:
            assert record.change == pytest.approx(
                record.current_price - record.previous_close, abs=0.011
            )
            assert record.change_percent == pytest.approx(
                record.change / record.previous_close * 100, abs=0.011
            )

    def test_all_pass_default_filters(self, dataset: tuple[Instrument, ...]) -> None:
        """Default bounds must not silently hide any demo record."""
        assert all(matches(r, FilterCriteria()) for r in dataset)

    def test_timestamps_not_after_as_of(
        self, dataset: tuple[Instrument, ...], as_of: datetime.datetime
    ) -> None:
        assert all(r.last_updated < as_of for r in dataset)
        assert dataset[0].last_updated == as_of - datetime.timedelta(hours=1)

    def test_deterministic(self, as_of: datetime.datetime) -> None:
        assert build_fallback_dataset(as_of) == build_fallback_dataset(as_of)


class TestLoadFallbackDataset:
    """Tests for the cached process-wide dataset."""

    def test_cached(self) -> None:
        assert load_fallback_dataset() is load_fallback_dataset()


class TestSectorOptions:
    """Tests for the sector option list."""

    def test_sentinel_first(self) -> None:
        assert SECTOR_OPTIONS[0] == ALL_SECTORS
        assert SECTOR_OPTIONS[1:] == SECTORS


class TestFindBySymbol:
    """Tests for find_by_symbol()."""

    def test_found_case_insensitive(self, dataset: tuple[Instrument, ...]) -> None:
        record = find_by_symbol(dataset, "nvda")
        assert record is not None
        assert record.name == "NVIDIA Corporation"

    def test_missing(self, dataset: tuple[Instrument, ...]) -> None:
        assert find_by_symbol(dataset, "ZZZZ") is None
