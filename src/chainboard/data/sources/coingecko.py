from typing import Dict, Any, Iterable, Sequence
from .base import DataSource
from ..http_client import get_json

class CoinGecko(DataSource):
    name = "coingecko"
    BASE = "https://api.coingecko.com/api/v3"

    async def health(self) -> Dict[str, Any]:
        try:
            await get_json(f"{self.BASE}/ping")
            return {"ok": True}
        except Exception as e:
            return {"ok": False, "error": str(e)}

    async def simple_prices(
        self,
        ids: Iterable[str],
        vs_currencies: Sequence[str] = ("usd", "cny"),
        include_24hr_change: bool = True,
    ) -> Dict[str, Dict[str, float]]:
        """One batched /simple/price call: {coin_id: {currency: price, currency_24h_change: pct}}"""
        params = {
            "ids": ",".join(ids),
            "vs_currencies": ",".join(vs_currencies),
            "include_24hr_change": "true" if include_24hr_change else "false",
        }
        return await get_json(f"{self.BASE}/simple/price", params=params)
