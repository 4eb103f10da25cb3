"""
Dashboard store - the aggregate collection of chain configurations.

Owns the loaded chains, the persisted favorites set, the price cache and
the loading state machine:

    EMPTY -> LOADING -> LOADED
                     -> ERROR
    LOADED / ERROR -> LOADING   (any reload)
    ERROR -> LOADED             (clear_error)
"""

import asyncio
import json
from datetime import datetime
from enum import Enum
from functools import partial
from typing import Any, Dict, List, Optional

from loguru import logger

from ..data.config import ConfigManager
from ..data.converters import convert_all, from_directory, from_local
from ..data.errors import PersistenceError
from ..data.models import ChainConfig, PriceIndexEntry
from ..data.pipelines.price_oracle import build_price_index
from ..data.registry import DataRegistry
from ..data.storage import JsonFileStorage, KeyValueStorage
from .selection import ActiveChainSelector, BlockchainSelector, select_default_chain


class LoadingStatus(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class NetworkType(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


class ConfigSource(str, Enum):
    MAINNET_DIRECTORY = "https://chains.cosmos.directory"
    TESTNET_DIRECTORY = "https://chains.testcosmos.directory"
    LOCAL = "local"


def detect_network_type(hostname: str) -> NetworkType:
    if hostname and "testnet" in hostname:
        return NetworkType.TESTNET
    return NetworkType.MAINNET


class DashboardStore:
    def __init__(
        self,
        registry: Optional[DataRegistry] = None,
        storage: Optional[KeyValueStorage] = None,
        selector: Optional[ActiveChainSelector] = None,
        config: Optional[ConfigManager] = None,
        hostname: Optional[str] = None,
    ):
        config = config or ConfigManager()
        self.registry = registry or DataRegistry(config=config)
        self.storage = storage or JsonFileStorage(config.storage_path)
        self.selector = selector or BlockchainSelector()
        self.hostname = hostname if hostname is not None else config.hostname
        self.mirror_host = config.mirror_host
        self.favorites_key = config.favorites_key
        self.default_favorites = config.default_favorites

        self.status = LoadingStatus.EMPTY
        self.source = ConfigSource.MAINNET_DIRECTORY
        self.network_type = NetworkType.MAINNET
        self.chains: Dict[str, ChainConfig] = {}
        self.favorites: Dict[str, bool] = self._load_favorites()
        self.prices: Dict[str, Any] = {}
        self.price_index: Dict[str, PriceIndexEntry] = {}
        self.last_updated: Optional[datetime] = None
        self.last_error: Optional[str] = None
        self.price_task: Optional[asyncio.Task] = None

    # Read accessors

    @property
    def length(self) -> int:
        return len(self.chains)

    @property
    def is_loading(self) -> bool:
        return self.status == LoadingStatus.LOADING

    @property
    def has_error(self) -> bool:
        return self.status == LoadingStatus.ERROR

    @property
    def favorite_chains(self) -> List[ChainConfig]:
        return [chain for name, chain in self.chains.items() if self.favorites.get(name)]

    # Loading

    async def initial(self):
        self.status = LoadingStatus.LOADING
        await self.load_from_local()

    async def load_from_registry(self):
        """Remote load; ignored unless nothing has been loaded yet"""
        if self.status != LoadingStatus.EMPTY:
            logger.debug(f"Registry load skipped, status is {self.status.value}")
            return
        if self.source == ConfigSource.LOCAL:
            await self.load_from_local()
            return
        self.status = LoadingStatus.LOADING
        try:
            records = await self.registry.directory.fetch_chains(self.source.value)
            converted = convert_all(
                {str(i): r for i, r in enumerate(records)},
                partial(from_directory, mirror=self.mirror_host),
            )
            self.chains.update(converted)
            self.refresh_prices()
            self._loaded()
        except Exception as e:
            self._failed(e, "Failed to load from registry")

    async def load_from_local(self):
        self.status = LoadingStatus.LOADING
        try:
            self.network_type = detect_network_type(self.hostname)
            self.chains.update(self.load_local_config(self.network_type))
            self.setup_default()
            self._loaded()
        except Exception as e:
            self._failed(e, "Failed to load from local")

    def load_local_config(self, network: NetworkType) -> Dict[str, ChainConfig]:
        """Convert a local bundle without touching store state"""
        records = self.registry.local.enumerate(network)
        return convert_all(records, from_local)

    def setup_default(self) -> Optional[str]:
        if not self.chains:
            return None
        selected = select_default_chain(self.chains, self.favorites, self.selector)
        self.refresh_prices()
        return selected

    def refresh_prices(self) -> Optional[asyncio.Task]:
        """
        Rebuild the price index now; fetch prices in the background.
        A fetch still pending for an older asset set is cancelled. Outside
        an event loop only the index is rebuilt.
        """
        coin_ids, self.price_index = build_price_index(self.chains)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, price fetch not scheduled")
            return None
        if self.price_task and not self.price_task.done():
            self.price_task.cancel()
        self.price_task = loop.create_task(self._fetch_prices(coin_ids))
        return self.price_task

    async def load_prices(self):
        await self.refresh_prices()

    async def _fetch_prices(self, coin_ids: List[str]):
        try:
            prices = await self.registry.prices.fetch_prices(coin_ids)
        except Exception as e:
            logger.warning(f"Error loading prices: {e}")
            return
        # only the fetch for the current asset set may publish
        if asyncio.current_task() is self.price_task:
            self.prices = prices

    def _loaded(self):
        self.status = LoadingStatus.LOADED
        self.last_updated = datetime.now()
        logger.info(f"Dashboard loaded, {self.length} chains")

    def _failed(self, error: Exception, context: str):
        self.status = LoadingStatus.ERROR
        self.last_error = str(error) or context
        logger.error(f"{context}: {error}")

    # User actions

    async def set_config_source(self, source: ConfigSource):
        self.source = ConfigSource(source)
        await self.initial()

    def toggle_favorite(self, chain_name: str) -> bool:
        self.favorites[chain_name] = not self.favorites.get(chain_name, False)
        try:
            self.storage.write(self.favorites_key, json.dumps(self.favorites))
        except PersistenceError as e:
            logger.error(f"Could not persist favorites: {e}")
        return self.favorites[chain_name]

    def clear_error(self):
        self.last_error = None
        self.status = LoadingStatus.LOADED

    def _load_favorites(self) -> Dict[str, bool]:
        try:
            raw = self.storage.read(self.favorites_key)
        except PersistenceError as e:
            logger.warning(f"Could not read favorites, using defaults: {e}")
            return dict(self.default_favorites)
        if raw is None:
            return dict(self.default_favorites)
        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("favorites must be a JSON object")
        except ValueError as e:
            logger.warning(f"Malformed favorites, using defaults: {e}")
            return dict(self.default_favorites)
        return {str(k): bool(v) for k, v in data.items()}
