from pathlib import Path
from typing import Optional

from .config import ConfigManager
from .sources.coingecko import CoinGecko
from .sources.cosmos_directory import CosmosDirectory
from .sources.local_bundle import LocalBundle
from .pipelines.price_oracle import PriceOracle

class DataRegistry:
    def __init__(self, local_root: Optional[Path] = None, config: Optional[ConfigManager] = None):
        config = config or ConfigManager()
        self.coingecko = CoinGecko()
        self.directory = CosmosDirectory()
        self.local = LocalBundle(local_root or config.local_bundle_dir)
        self.prices = PriceOracle(self.coingecko, config.price_currencies)
