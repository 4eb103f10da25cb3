"""
Record factories and fake collaborators for the chainboard test suite
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock


def local_record(chain_name, **overrides):
    record = {
        "chain_name": chain_name,
        "addr_prefix": chain_name[:4],
        "api": [f"https://rest.{chain_name}.network"],
        "rpc": [f"https://rpc.{chain_name}.network"],
        "sdk_version": "0.47.10",
        "coin_type": "118",
        "logo": f"/logos/{chain_name}.svg",
        "assets": [
            {
                "base": f"u{chain_name[:4]}",
                "symbol": chain_name[:4].upper(),
                "exponent": "6",
                "coingecko_id": chain_name,
                "logo": f"/logos/{chain_name}.svg",
            }
        ],
    }
    record.update(overrides)
    return record


def directory_record(chain_name, /, **overrides):
    record = {
        "chain_name": chain_name,
        "chain_id": f"{chain_name}-1",
        "pretty_name": chain_name.title(),
        "bech32_prefix": chain_name[:4],
        "image": f"https://raw.githubusercontent.com/cosmos/chain-registry/master/{chain_name}/images/{chain_name}.png",
        "best_apis": {
            "rest": [{"address": f"https://rest.{chain_name}.network", "provider": "Polkachu"}],
            "rpc": [{"address": f"https://rpc.{chain_name}.network", "provider": "Polkachu"}],
        },
        "versions": {
            "application_version": "v15.0.0",
            "cosmos_sdk_version": "0.47.10",
            "tendermint_version": "0.37.4",
        },
        "assets": [
            {
                "name": chain_name,
                "base": f"u{chain_name[:4]}",
                "display": chain_name[:4],
                "symbol": chain_name[:4].upper(),
                "coingecko_id": chain_name,
                "denom_units": [
                    {"denom": f"u{chain_name[:4]}", "exponent": 0},
                    {"denom": chain_name[:4], "exponent": 6},
                ],
            }
        ],
    }
    record.update(overrides)
    return record


class FakeLocal:
    """Local bundle keyed by network name; raises `error` when set"""

    def __init__(self, bundles=None, error=None):
        self.bundles = bundles or {}
        self.error = error
        self.calls = []

    def enumerate(self, network):
        self.calls.append(network)
        if self.error:
            raise self.error
        return self.bundles.get(network.value, {})


class FakeDirectory:
    """Directory service; `gate` holds the fetch open until set"""

    def __init__(self, chains=None, error=None, gate=None):
        self.chains = chains or []
        self.error = error
        self.gate = gate
        self.calls = []

    async def fetch_chains(self, source_url):
        self.calls.append(source_url)
        if self.gate is not None:
            await self.gate.wait()
        if self.error:
            raise self.error
        return self.chains


def fake_registry(local=None, directory=None, prices=None, price_error=None):
    fetch = AsyncMock(return_value=prices if prices is not None else {})
    if price_error:
        fetch.side_effect = price_error
    return SimpleNamespace(
        local=local or FakeLocal(),
        directory=directory or FakeDirectory(),
        prices=SimpleNamespace(fetch_prices=fetch),
    )

