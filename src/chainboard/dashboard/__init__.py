from .selection import ActiveChainSelector, BlockchainSelector, select_default_chain
from .store import ConfigSource, DashboardStore, LoadingStatus, NetworkType, detect_network_type

__all__ = [
    "ActiveChainSelector",
    "BlockchainSelector",
    "ConfigSource",
    "DashboardStore",
    "LoadingStatus",
    "NetworkType",
    "detect_network_type",
    "select_default_chain",
]
