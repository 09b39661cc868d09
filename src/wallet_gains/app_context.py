"""Application context for in-process service management.

Owns everything that lives for the whole process: the caches, the HTTP and
RPC clients and the storage engine. Services built here are shared by all
requests.
"""

import logging
from typing import Optional

import httpx
from sqlalchemy import Engine

from wallet_gains.cache import CacheSet
from wallet_gains.config.settings import Settings, get_settings
from wallet_gains.providers import (
    CoinGeckoPriceSource,
    DexScreenerPriceSource,
    RaydiumPriceSource,
    SolanaHoldingsSource,
    default_signals,
)
from wallet_gains.providers.holdings_provider import HoldingsSource
from wallet_gains.providers.price_source import PriceSource
from wallet_gains.repositories.json_file import JsonFileKeyValueStore
from wallet_gains.repositories.protocols import KeyValueStore
from wallet_gains.repositories.sqlalchemy import SqlAlchemyKeyValueStore, create_engine_for_url
from wallet_gains.services import (
    CostBasisStore,
    GainsCalculator,
    PriceOracle,
    TokenEligibilityFilter,
)

logger = logging.getLogger(__name__)


class AppContext:
    """
    Process-wide service container.

    Collaborators are created lazily on first access; `aclose` releases
    network clients and the database engine.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        holdings_source: Optional[HoldingsSource] = None,
        price_sources: Optional[list[PriceSource]] = None,
        key_value_store: Optional[KeyValueStore] = None,
    ):
        self._settings = settings or get_settings()
        self._holdings_source = holdings_source
        self._price_sources = price_sources
        self._key_value_store = key_value_store

        self._http_client: Optional[httpx.AsyncClient] = None
        self._engine: Optional[Engine] = None
        self._caches: Optional[CacheSet] = None
        self._cost_basis_store: Optional[CostBasisStore] = None
        self._gains_calculator: Optional[GainsCalculator] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def caches(self) -> CacheSet:
        if self._caches is None:
            self._caches = CacheSet.from_settings(self._settings)
        return self._caches

    @property
    def cost_basis_store(self) -> CostBasisStore:
        if self._cost_basis_store is None:
            self._cost_basis_store = CostBasisStore(self._get_key_value_store())
        return self._cost_basis_store

    @property
    def gains_calculator(self) -> GainsCalculator:
        if self._gains_calculator is None:
            settings = self._settings
            self._gains_calculator = GainsCalculator(
                holdings_source=self._get_holdings_source(),
                eligibility_filter=TokenEligibilityFilter(
                    signals=default_signals(settings.eligibility_signal_default),
                    cache=self.caches.metadata,
                ),
                price_oracle=PriceOracle(
                    sources=self._get_price_sources(),
                    cache=self.caches.prices,
                    source_timeout_seconds=settings.price_source_timeout_seconds,
                ),
                cost_basis_store=self.cost_basis_store,
            )
        return self._gains_calculator

    async def aclose(self) -> None:
        """Release network clients and the database engine."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        if isinstance(self._holdings_source, SolanaHoldingsSource):
            await self._holdings_source.close()
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._settings.price_source_timeout_seconds,
                headers={"User-Agent": f"{self._settings.app_name}/{self._settings.app_version}"},
                follow_redirects=True,
            )
        return self._http_client

    def _get_price_sources(self) -> list[PriceSource]:
        """Price sources in fallback priority order."""
        if self._price_sources is None:
            settings = self._settings
            client = self._get_http_client()
            timeout = settings.price_source_timeout_seconds
            self._price_sources = [
                CoinGeckoPriceSource(client, settings.coingecko_api_url, settings.coingecko_api_key, timeout),
                DexScreenerPriceSource(client, settings.dexscreener_api_url, settings.dexscreener_api_key, timeout),
                RaydiumPriceSource(client, settings.raydium_api_url, timeout_seconds=timeout),
            ]
        return self._price_sources

    def _get_holdings_source(self) -> HoldingsSource:
        if self._holdings_source is None:
            self._holdings_source = SolanaHoldingsSource.from_url(
                self._settings.solana_rpc_url,
                timeout_seconds=self._settings.rpc_timeout_seconds,
            )
        return self._holdings_source

    def _get_key_value_store(self) -> KeyValueStore:
        if self._key_value_store is None:
            settings = self._settings
            if settings.cost_basis_backend == "sqlite":
                self._engine = create_engine_for_url(settings.get_database_url())
                self._key_value_store = SqlAlchemyKeyValueStore(self._engine)
            else:
                self._key_value_store = JsonFileKeyValueStore(settings.get_cost_basis_path())
            logger.info("Cost basis storage: %s", settings.cost_basis_backend)
        return self._key_value_store
