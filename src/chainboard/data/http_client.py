import aiohttp, asyncio
from loguru import logger
from typing import Optional, Dict, Any
from contextlib import asynccontextmanager

from .errors import TransportError

DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=15)

@asynccontextmanager
async def http_session(timeout: aiohttp.ClientTimeout = DEFAULT_TIMEOUT):
    async with aiohttp.ClientSession(timeout=timeout) as s:
        yield s

async def get_json(url: str, params: Optional[Dict[str, Any]]=None, headers: Optional[Dict[str,str]]=None):
    try:
        async with http_session() as s:
            async with s.get(url, params=params, headers=headers) as r:
                r.raise_for_status()
                return await r.json(content_type=None)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        logger.debug(f"GET {url} failed: {e!r}")
        raise TransportError(f"GET {url} failed: {e}") from e
