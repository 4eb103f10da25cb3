from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, List, Dict, Any, Union
from datetime import datetime
from enum import Enum


def provider_from_address(address: str) -> str:
    """rpc.cosmos.network -> cosmos; anything with fewer than two segments is its own provider"""
    parts = str(address).split(".")
    return parts[-2] if len(parts) >= 2 else address


class EndpointKind(str, Enum):
    RPC = "rpc"
    REST = "rest"
    GRPC = "grpc"


class Endpoint(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    address: str
    provider: str = ""
    kind: Optional[EndpointKind] = Field(default=None, alias="type")
    is_active: Optional[bool] = Field(default=None, alias="isActive")
    last_checked: Optional[datetime] = Field(default=None, alias="lastChecked")

    @model_validator(mode="after")
    def _fill_provider(self) -> "Endpoint":
        if not self.provider:
            self.provider = provider_from_address(self.address)
        return self


class Endpoints(BaseModel):
    rest: List[Endpoint] = Field(default_factory=list)
    rpc: List[Endpoint] = Field(default_factory=list)
    grpc: List[Endpoint] = Field(default_factory=list)


class DenomUnit(BaseModel):
    model_config = ConfigDict(extra="allow")

    denom: str
    exponent: int


class Asset(BaseModel):
    # cosmos.directory asset summaries send base/display as {denom, exponent}
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    base: Optional[Union[str, DenomUnit]] = None
    display: Optional[Union[str, DenomUnit]] = ""
    symbol: str = ""
    name: str = ""
    exponent: Optional[int] = None
    coingecko_id: Optional[str] = ""
    logo_uris: Dict[str, str] = Field(default_factory=dict, alias="logo_URIs")
    denom_units: List[DenomUnit] = Field(default_factory=list)


class Versions(BaseModel):
    application: Optional[str] = None
    cosmos_sdk: Optional[str] = None
    tendermint: Optional[str] = None


class ProviderChain(BaseModel):
    api: List[Endpoint] = Field(default_factory=list)


class PriceStep(BaseModel):
    low: float
    average: float
    high: float


class ChainConfig(BaseModel):
    """Canonical chain configuration every raw source is converted into"""
    model_config = ConfigDict(frozen=True)

    chain_name: str
    pretty_name: str
    chain_id: Optional[str] = None
    bech32_prefix: str
    bech32_consensus_prefix: str
    coin_type: Optional[str] = None
    assets: List[Asset] = Field(default_factory=list)
    endpoints: Endpoints = Field(default_factory=Endpoints)
    logo: str = ""
    versions: Versions = Field(default_factory=Versions)
    features: Optional[List[str]] = None
    theme_color: Optional[str] = None
    provider_chain: Optional[ProviderChain] = None
    keplr_features: Optional[List[str]] = None
    keplr_price_step: Optional[PriceStep] = None


# Raw local bundle format

RawEndpointValue = Union[str, List[Union[str, Dict[str, Any]]], None]


class LocalAsset(BaseModel):
    base: str
    symbol: str
    exponent: Union[str, int]
    coingecko_id: str = ""
    logo: str = ""


class LocalProviderChain(BaseModel):
    api: RawEndpointValue = None


class LocalConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    chain_name: str
    addr_prefix: str
    consensus_prefix: Optional[str] = None
    registry_name: Optional[str] = None
    alias: Optional[str] = None
    api: RawEndpointValue = None
    rpc: RawEndpointValue = None
    provider_chain: Optional[LocalProviderChain] = None
    assets: List[LocalAsset] = Field(default_factory=list)
    coin_type: Optional[str] = None
    logo: str = ""
    theme_color: Optional[str] = None
    min_tx_fee: Optional[str] = None
    sdk_version: Optional[str] = None
    features: Optional[List[str]] = None
    keplr_price_step: Optional[PriceStep] = None
    keplr_features: Optional[List[str]] = None


# Raw cosmos.directory format

class DirectoryVersions(BaseModel):
    application_version: Optional[str] = None
    cosmos_sdk_version: Optional[str] = None
    tendermint_version: Optional[str] = None


class Explorer(BaseModel):
    name: Optional[str] = None
    kind: Optional[str] = None
    url: Optional[str] = None
    tx_page: Optional[str] = None
    account_page: Optional[str] = None


class DirectoryChain(BaseModel):
    model_config = ConfigDict(extra="allow")

    chain_name: str
    chain_id: str
    bech32_prefix: str
    pretty_name: str = ""
    assets: List[Asset] = Field(default_factory=list)
    best_apis: Endpoints = Field(default_factory=Endpoints)
    image: Optional[str] = None
    versions: Optional[DirectoryVersions] = None
    explorers: Optional[List[Explorer]] = None
    network_type: Optional[str] = None
    coingecko_id: Optional[str] = None
    symbol: Optional[str] = None
    denom: Optional[str] = None
    display: Optional[str] = None
    decimals: Optional[int] = None
    height: Optional[int] = None
    cosmwasm_enabled: Optional[bool] = None


class Codebase(BaseModel):
    recommended_version: Optional[str] = None
    cosmos_sdk_version: Optional[str] = None
    tendermint_version: Optional[str] = None


class RegistryChain(BaseModel):
    """chain-registry shaped view of a directory record"""
    chain_name: str
    chain_id: str
    bech32_prefix: str
    pretty_name: str = ""
    apis: Endpoints = Field(default_factory=Endpoints)
    explorers: Optional[List[Explorer]] = None
    codebase: Optional[Codebase] = None
    logo_uris: Optional[Dict[str, str]] = None


class PriceIndexEntry(BaseModel):
    coin_id: str
    exponent: int
    symbol: str
