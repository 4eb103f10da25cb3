from typing import Dict, Any, List
from loguru import logger

from .base import DataSource
from ..errors import TransportError
from ..http_client import get_json

class CosmosDirectory(DataSource):
    """cosmos.directory chain listing; the source URL picks mainnet or testnet"""
    name = "cosmos.directory"
    BASE = "https://chains.cosmos.directory"

    async def health(self) -> Dict[str, Any]:
        try:
            await get_json(self.BASE)
            return {"ok": True}
        except Exception as e:
            return {"ok": False, "error": str(e)}

    async def fetch_chains(self, source_url: str) -> List[Dict[str, Any]]:
        data = await get_json(source_url)
        chains = data.get("chains") if isinstance(data, dict) else None
        if not isinstance(chains, list):
            raise TransportError(f"{source_url} returned no chain list")
        logger.info(f"Fetched {len(chains)} chains from {source_url}")
        return chains
