"""
Integration tests for the persisted cost basis stores.

Tests cover:
- JSON file store lifecycle (lazy creation, put/get, corrupt file)
- SQLAlchemy store against a SQLite file
- CostBasisStore reading through both backends
"""

import json

import pytest

from wallet_gains.core.exceptions import CostBasisStoreError
from wallet_gains.domain.models import TokenHolding
from wallet_gains.repositories.json_file import JsonFileKeyValueStore
from wallet_gains.repositories.sqlalchemy import SqlAlchemyKeyValueStore, create_engine_for_url
from wallet_gains.services import CostBasisStore, GainsCalculator, TokenEligibilityFilter
from wallet_gains.services.cost_basis_store import cost_basis_key

from tests.conftest import MINT_A, MINT_B, WALLET, FakeHoldingsSource, signals_for


@pytest.fixture
def json_store(tmp_path) -> JsonFileKeyValueStore:
    return JsonFileKeyValueStore(tmp_path / "nested" / "cost-basis.json")


@pytest.fixture
def sqlite_store(tmp_path):
    engine = create_engine_for_url(f"sqlite:///{tmp_path / 'cost-basis.db'}")
    yield SqlAlchemyKeyValueStore(engine)
    engine.dispose()


# =============================================================================
# JSON FILE STORE
# =============================================================================


class TestJsonFileKeyValueStore:
    """Tests for JsonFileKeyValueStore."""

    def test_file_created_empty_on_first_use(self, json_store: JsonFileKeyValueStore):
        """
        GIVEN no file on disk
        WHEN the store is initialized
        THEN an empty JSON object is written, parent directories included
        """
        assert not json_store.path.exists()

        json_store.ensure_initialized()

        assert json.loads(json_store.path.read_text()) == {}

    def test_get_missing_key_returns_none(self, json_store: JsonFileKeyValueStore):
        assert json_store.get("missing") is None
        assert json_store.path.exists()

    def test_put_then_get(self, json_store: JsonFileKeyValueStore):
        json_store.put("a", 10.5)
        json_store.put("b", 3.0)
        json_store.put("a", 12.0)

        assert json_store.get("a") == 12.0
        assert json_store.get("b") == 3.0
        assert json.loads(json_store.path.read_text()) == {"a": 12.0, "b": 3.0}

    def test_values_survive_new_instance(self, json_store: JsonFileKeyValueStore):
        json_store.put("a", 7.0)

        assert JsonFileKeyValueStore(json_store.path).get("a") == 7.0

    def test_no_temporary_file_left_behind(self, json_store: JsonFileKeyValueStore):
        json_store.put("a", 1.0)

        assert [p.name for p in json_store.path.parent.iterdir()] == ["cost-basis.json"]

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "cost-basis.json"
        path.write_text("{not json")

        with pytest.raises(CostBasisStoreError):
            JsonFileKeyValueStore(path).get("a")

    def test_non_object_file_raises(self, tmp_path):
        path = tmp_path / "cost-basis.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(CostBasisStoreError):
            JsonFileKeyValueStore(path).get("a")

    def test_invalid_utf8_file_raises(self, tmp_path):
        path = tmp_path / "cost-basis.json"
        path.write_bytes(b'{"a": \xff\xfe}')

        with pytest.raises(CostBasisStoreError):
            JsonFileKeyValueStore(path).get("a")

    def test_empty_file_reads_as_empty_object(self, tmp_path):
        path = tmp_path / "cost-basis.json"
        path.write_text("")

        assert JsonFileKeyValueStore(path).get("a") is None


# =============================================================================
# SQLALCHEMY STORE
# =============================================================================


class TestSqlAlchemyKeyValueStore:
    """Tests for SqlAlchemyKeyValueStore on SQLite."""

    def test_get_missing_key_returns_none(self, sqlite_store: SqlAlchemyKeyValueStore):
        assert sqlite_store.get("missing") is None

    def test_put_then_get(self, sqlite_store: SqlAlchemyKeyValueStore):
        sqlite_store.put("a", 10.5)

        assert sqlite_store.get("a") == 10.5

    def test_put_replaces_existing_value(self, sqlite_store: SqlAlchemyKeyValueStore):
        sqlite_store.put("a", 10.5)
        sqlite_store.put("a", 4.0)

        assert sqlite_store.get("a") == 4.0

    def test_initialization_is_idempotent(self, sqlite_store: SqlAlchemyKeyValueStore):
        sqlite_store.ensure_initialized()
        sqlite_store.ensure_initialized()
        sqlite_store.put("a", 1.0)

        assert sqlite_store.get("a") == 1.0


# =============================================================================
# COST BASIS STORE OVER REAL BACKENDS
# =============================================================================


class TestCostBasisStoreBackends:
    """CostBasisStore reading through persisted stores."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("backend", ["json_store", "sqlite_store"])
    async def test_record_then_read(self, request, backend):
        """
        GIVEN a cost basis recorded for (wallet, mint A)
        WHEN both mints are looked up
        THEN A returns the value and B returns 0
        """
        backing = request.getfixturevalue(backend)
        backing.put(cost_basis_key(WALLET, MINT_A), 5.0)
        store = CostBasisStore(backing)

        assert await store.get_cost_basis(WALLET, MINT_A) == 5.0
        assert await store.get_cost_basis(WALLET, MINT_B) == 0.0

    @pytest.mark.asyncio
    async def test_reads_hand_edited_json_file(self, tmp_path):
        path = tmp_path / "cost-basis.json"
        path.write_text(json.dumps({cost_basis_key(WALLET, MINT_A): 42}))

        store = CostBasisStore(JsonFileKeyValueStore(path))

        assert await store.get_cost_basis(WALLET, MINT_A) == 42.0

    @pytest.mark.asyncio
    async def test_corrupt_json_file_reads_as_zero(self, tmp_path):
        path = tmp_path / "cost-basis.json"
        path.write_text("garbage")

        store = CostBasisStore(JsonFileKeyValueStore(path))

        assert await store.get_cost_basis(WALLET, MINT_A) == 0.0

    @pytest.mark.asyncio
    async def test_invalid_utf8_json_file_reads_as_zero(self, tmp_path):
        path = tmp_path / "cost-basis.json"
        path.write_bytes(b'{"a": \xff\xfe}')

        store = CostBasisStore(JsonFileKeyValueStore(path))

        assert await store.get_cost_basis(WALLET, MINT_A) == 0.0

    @pytest.mark.asyncio
    async def test_value_too_large_for_float_reads_as_zero(self, tmp_path):
        path = tmp_path / "cost-basis.json"
        path.write_text('{"%s": %s}' % (cost_basis_key(WALLET, MINT_A), "9" * 400))

        store = CostBasisStore(JsonFileKeyValueStore(path))

        assert await store.get_cost_basis(WALLET, MINT_A) == 0.0

    @pytest.mark.asyncio
    async def test_unreadable_file_keeps_holdings_in_report(self, tmp_path, caches, price_oracle, price_sources):
        """
        GIVEN an eligible holding priced 2.0 x 10 and an undecodable cost basis file
        WHEN gains are calculated
        THEN the holding is still reported, with cost basis 0
        """
        path = tmp_path / "cost-basis.json"
        path.write_bytes(b"\xff")
        price_sources[0].prices = {MINT_A: 2.0}
        calculator = GainsCalculator(
            holdings_source=FakeHoldingsSource([TokenHolding(MINT_A, 10.0)]),
            eligibility_filter=TokenEligibilityFilter(signals=signals_for({MINT_A}), cache=caches.metadata),
            price_oracle=price_oracle,
            cost_basis_store=CostBasisStore(JsonFileKeyValueStore(path)),
        )

        results = await calculator.calculate_gains(WALLET)

        assert [r.total_value for r in results] == [20.0]
        assert results[0].cost_basis == 0.0
        assert results[0].unrealized_gain == 20.0
