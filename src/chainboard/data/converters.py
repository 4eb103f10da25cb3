"""
Schema converters - map the local bundle format and the cosmos.directory
format onto the canonical ChainConfig.
"""

from typing import Any, Dict, Mapping, Optional, Union

from loguru import logger
from pydantic import ValidationError

from .endpoints import normalize_endpoints
from .errors import ConversionError
from .models import (
    Asset,
    ChainConfig,
    Codebase,
    DenomUnit,
    DirectoryChain,
    Endpoints,
    LocalConfig,
    ProviderChain,
    RegistryChain,
    Versions,
)

REGISTRY_RAW_HOST = "https://raw.githubusercontent.com/cosmos/chain-registry/master"
MIRROR_HOST = "https://registry.ping.pub"


def path_rewrite(path: Optional[str], mirror: str = MIRROR_HOST) -> str:
    """Serve chain-registry images from our own mirror; other URLs pass through."""
    if not path:
        return ""
    if path.startswith(REGISTRY_RAW_HOST):
        return mirror + path[len(REGISTRY_RAW_HOST):]
    return path


def get_logo(logo_uris: Optional[Mapping[str, str]], mirror: str = MIRROR_HOST) -> Optional[str]:
    if not logo_uris:
        return None
    src = logo_uris.get("svg") or logo_uris.get("png") or logo_uris.get("jpeg")
    return path_rewrite(src, mirror)


def _local_asset(asset) -> Asset:
    exponent = int(asset.exponent)
    return Asset(
        name=asset.base,
        base=asset.base,
        display=asset.symbol,
        symbol=asset.symbol,
        logo_uris={"svg": asset.logo},
        coingecko_id=asset.coingecko_id,
        exponent=exponent,
        denom_units=[
            DenomUnit(denom=asset.base, exponent=0),
            DenomUnit(denom=asset.symbol.lower(), exponent=exponent),
        ],
    )


def from_local(raw: Union[Mapping[str, Any], LocalConfig]) -> ChainConfig:
    try:
        lc = LocalConfig.model_validate(raw)
        provider_chain = None
        if lc.provider_chain is not None:
            provider_chain = ProviderChain(api=normalize_endpoints(lc.provider_chain.api))
        return ChainConfig(
            chain_name=lc.chain_name,
            pretty_name=lc.registry_name or lc.chain_name,
            bech32_prefix=lc.addr_prefix,
            bech32_consensus_prefix=(
                lc.consensus_prefix if lc.consensus_prefix is not None else lc.addr_prefix + "valcons"
            ),
            coin_type=lc.coin_type,
            assets=[_local_asset(a) for a in lc.assets],
            endpoints=Endpoints(
                rest=normalize_endpoints(lc.api),
                rpc=normalize_endpoints(lc.rpc),
            ),
            logo=lc.logo,
            versions=Versions(cosmos_sdk=lc.sdk_version),
            features=lc.features,
            theme_color=lc.theme_color,
            provider_chain=provider_chain,
            keplr_features=lc.keplr_features,
            keplr_price_step=lc.keplr_price_step,
        )
    except (ValidationError, ValueError, TypeError, AttributeError) as e:
        logger.error(f"Error converting local config: {e}")
        raise ConversionError("local", str(e)) from e


def from_directory(raw: Union[Mapping[str, Any], DirectoryChain], mirror: str = MIRROR_HOST) -> ChainConfig:
    try:
        src = DirectoryChain.model_validate(raw)
        v = src.versions
        return ChainConfig(
            chain_name=src.chain_name,
            pretty_name=src.pretty_name,
            chain_id=src.chain_id,
            bech32_prefix=src.bech32_prefix,
            bech32_consensus_prefix=src.bech32_prefix + "valcons",
            assets=src.assets,
            endpoints=src.best_apis,
            logo=path_rewrite(src.image, mirror),
            versions=Versions(
                application=(v.application_version if v else None) or "",
                cosmos_sdk=(v.cosmos_sdk_version if v else None) or "",
                tendermint=(v.tendermint_version if v else None) or "",
            ),
        )
    except (ValidationError, ValueError, TypeError) as e:
        logger.error(f"Error converting directory config: {e}")
        raise ConversionError("directory", str(e)) from e


def to_registry_chain(raw: Union[Mapping[str, Any], DirectoryChain]) -> RegistryChain:
    try:
        src = DirectoryChain.model_validate(raw)
        codebase = None
        if src.versions:
            codebase = Codebase(
                recommended_version=src.versions.application_version,
                cosmos_sdk_version=src.versions.cosmos_sdk_version,
                tendermint_version=src.versions.tendermint_version,
            )
        return RegistryChain(
            chain_name=src.chain_name,
            chain_id=src.chain_id,
            bech32_prefix=src.bech32_prefix,
            pretty_name=src.pretty_name,
            apis=src.best_apis,
            explorers=src.explorers,
            codebase=codebase,
            logo_uris={"svg": src.image} if src.image else None,
        )
    except (ValidationError, ValueError, TypeError) as e:
        logger.error(f"Error creating chain from directory: {e}")
        raise ConversionError("directory", str(e)) from e


def convert_all(records: Mapping[str, Any], converter) -> Dict[str, ChainConfig]:
    """Convert every record before anything is merged; duplicate chain names keep the last one."""
    out: Dict[str, ChainConfig] = {}
    for ident, record in records.items():
        conf = converter(record)
        if conf.chain_name in out:
            logger.debug(f"{ident}: chain {conf.chain_name} overrides an earlier record")
        out[conf.chain_name] = conf
    return out
