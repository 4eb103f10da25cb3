"""
Price enrichment - derive the CoinGecko lookup from the aggregated asset set.
"""

from typing import Dict, List, Mapping, Sequence, Tuple, Any

from loguru import logger

from ..models import ChainConfig, PriceIndexEntry
from ..sources.coingecko import CoinGecko


def build_price_index(chains: Mapping[str, ChainConfig]) -> Tuple[List[str], Dict[str, PriceIndexEntry]]:
    """
    Returns (distinct coin ids, denom -> price index entry).
    Every denom unit is indexed, with or without a coin id; on denom
    collision the later asset wins.
    """
    coin_ids: List[str] = []
    seen = set()
    index: Dict[str, PriceIndexEntry] = {}
    for chain in chains.values():
        for asset in chain.assets or []:
            if asset.coingecko_id and asset.coingecko_id not in seen:
                seen.add(asset.coingecko_id)
                coin_ids.append(asset.coingecko_id)
            for unit in asset.denom_units:
                index[unit.denom] = PriceIndexEntry(
                    coin_id=asset.coingecko_id or "",
                    exponent=unit.exponent,
                    symbol=asset.symbol,
                )
    return coin_ids, index


class PriceOracle:
    def __init__(self, coingecko: CoinGecko, currencies: Sequence[str] = ("usd", "cny")):
        self.coingecko = coingecko
        self.currencies = tuple(currencies)

    async def fetch_prices(self, coin_ids: Sequence[str]) -> Dict[str, Any]:
        if not coin_ids:
            return {}
        prices = await self.coingecko.simple_prices(coin_ids, self.currencies, include_24hr_change=True)
        logger.info(f"Fetched prices for {len(prices)} of {len(coin_ids)} coins")
        return prices
