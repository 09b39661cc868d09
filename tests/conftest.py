"""
Pytest configuration and fixtures for wallet gains tests.

This module provides:
- Known-valid Solana addresses and mints
- A manual clock for TTL tests
- Deterministic fakes for price sources, holdings, signals and storage
- Cache, service and API client fixtures
"""

import asyncio
from pathlib import Path
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from wallet_gains.api.deps import get_app_context
from wallet_gains.app_context import AppContext
from wallet_gains.cache import CacheSet
from wallet_gains.config.settings import Settings, reset_settings
from wallet_gains.core.address import WalletAddress
from wallet_gains.core.exceptions import (
    CostBasisStoreError,
    EligibilitySignalError,
    HoldingsFetchError,
    SourceUnavailableError,
)
from wallet_gains.domain.models import PriceSourceName, TokenHolding
from wallet_gains.services import (
    CostBasisStore,
    GainsCalculator,
    PriceOracle,
    TokenEligibilityFilter,
)
from wallet_gains.main import app


# =============================================================================
# ADDRESS CONSTANTS
# =============================================================================

WALLET = "4Qkev8aNZcqFNSRhQzwyLMFSsi94jHqE8WNVTJzTP99F"
OTHER_WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
MINT_A = "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"
MINT_B = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
MINT_C = "So11111111111111111111111111111111111111112"


# =============================================================================
# CLOCK
# =============================================================================


class ManualClock:
    """Monotonic timer that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


# =============================================================================
# FAKE COLLABORATORS
# =============================================================================


class FakePriceSource:
    """
    Price source with scripted answers per mint.

    `prices` maps mint -> price; `fail` makes every call raise
    SourceUnavailableError; `delay` makes every call sleep first.
    """

    def __init__(
        self,
        name: PriceSourceName,
        prices: Optional[dict[str, float]] = None,
        fail: bool = False,
        delay: float = 0.0,
    ):
        self.name = name
        self.prices = prices or {}
        self.fail = fail
        self.delay = delay
        self.calls: list[str] = []

    async def fetch_price(self, mint: str) -> float:
        self.calls.append(mint)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise SourceUnavailableError(self.name.value, "scripted failure")
        return self.prices.get(mint, 0.0)


class FakeHoldingsSource:
    """Holdings source returning a fixed list, or raising HoldingsFetchError."""

    def __init__(self, holdings: Optional[list[TokenHolding]] = None, fail: bool = False):
        self.holdings = holdings or []
        self.fail = fail
        self.calls: list[WalletAddress] = []

    async def get_holdings(self, wallet: WalletAddress) -> list[TokenHolding]:
        self.calls.append(wallet)
        if self.fail:
            raise HoldingsFetchError(str(wallet), "connection refused")
        return list(self.holdings)


class FakeSignal:
    """Eligibility signal with a scripted answer per mint."""

    def __init__(self, name: str, results: Optional[dict[str, bool]] = None, default: bool = False, fail: bool = False):
        self.name = name
        self.results = results or {}
        self.default = default
        self.fail = fail
        self.calls: list[str] = []

    async def evaluate(self, mint: str) -> bool:
        self.calls.append(mint)
        if self.fail:
            raise EligibilitySignalError(self.name, "scripted failure")
        return self.results.get(mint, self.default)


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore; `fail` simulates an unreadable store."""

    def __init__(self, data: Optional[dict[str, float]] = None, fail: bool = False):
        self.data = dict(data or {})
        self.fail = fail
        self.initialized = False

    def ensure_initialized(self) -> None:
        self.initialized = True

    def get(self, key: str) -> Optional[float]:
        if self.fail:
            raise CostBasisStoreError("store is corrupt")
        self.ensure_initialized()
        return self.data.get(key)

    def put(self, key: str, value: float) -> None:
        if self.fail:
            raise CostBasisStoreError("store is corrupt")
        self.ensure_initialized()
        self.data[key] = value


def signals_for(eligible_mints: set[str]) -> list[FakeSignal]:
    """Three signals where exactly two are true for the given mints."""
    marks = {mint: True for mint in eligible_mints}
    return [
        FakeSignal("volume", marks),
        FakeSignal("social_traction", marks),
        FakeSignal("age_liquidity"),
    ]


# =============================================================================
# SETTINGS AND CACHES
# =============================================================================


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment and the user's home directory."""
    reset_settings()
    return Settings(_env_file=None, data_dir=tmp_path)


@pytest.fixture
def caches(settings: Settings, clock: ManualClock) -> CacheSet:
    return CacheSet.from_settings(settings, timer=clock)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def price_sources() -> list[FakePriceSource]:
    """CoinGecko, DexScreener, Raydium fakes with no prices."""
    return [
        FakePriceSource(PriceSourceName.COINGECKO),
        FakePriceSource(PriceSourceName.DEXSCREENER),
        FakePriceSource(PriceSourceName.RAYDIUM),
    ]


@pytest.fixture
def price_oracle(price_sources, caches) -> PriceOracle:
    return PriceOracle(sources=price_sources, cache=caches.prices, source_timeout_seconds=0.5)


@pytest.fixture
def key_value_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def cost_basis_store(key_value_store) -> CostBasisStore:
    return CostBasisStore(key_value_store)


@pytest.fixture
def holdings_source() -> FakeHoldingsSource:
    return FakeHoldingsSource()


@pytest.fixture
def make_calculator(holdings_source, price_oracle, cost_basis_store, caches):
    """Factory building a GainsCalculator around the given eligibility signals."""

    def _make(signals: list[FakeSignal]) -> GainsCalculator:
        return GainsCalculator(
            holdings_source=holdings_source,
            eligibility_filter=TokenEligibilityFilter(signals=signals, cache=caches.metadata),
            price_oracle=price_oracle,
            cost_basis_store=cost_basis_store,
        )

    return _make


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def api_holdings() -> FakeHoldingsSource:
    return FakeHoldingsSource()


@pytest.fixture
def api_prices() -> FakePriceSource:
    """The first-priority source; the other two never have prices."""
    return FakePriceSource(PriceSourceName.COINGECKO)


@pytest.fixture
def api_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def api_context(settings, api_holdings, api_prices, api_store) -> AppContext:
    """AppContext where every token passes the eligibility check."""
    return AppContext(
        settings.model_copy(update={"eligibility_signal_default": True}),
        holdings_source=api_holdings,
        price_sources=[
            api_prices,
            FakePriceSource(PriceSourceName.DEXSCREENER),
            FakePriceSource(PriceSourceName.RAYDIUM),
        ],
        key_value_store=api_store,
    )


@pytest.fixture
def client(api_context: AppContext) -> TestClient:
    """Provide FastAPI test client bound to the fake AppContext."""
    app.dependency_overrides[get_app_context] = lambda: api_context
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
