from abc import ABC, abstractmethod
from typing import Mapping, Optional

from loguru import logger

from ..data.models import ChainConfig


class ActiveChainSelector(ABC):
    """The 'current chain' the rest of the application works against"""

    @property
    @abstractmethod
    def chain_name(self) -> str:
        ...

    @abstractmethod
    def set_current(self, name: str) -> None:
        ...


class BlockchainSelector(ActiveChainSelector):
    def __init__(self, chain_name: str = ""):
        self._chain_name = chain_name

    @property
    def chain_name(self) -> str:
        return self._chain_name

    def set_current(self, name: str) -> None:
        logger.info(f"Active chain set to {name}")
        self._chain_name = name


def select_default_chain(
    chains: Mapping[str, ChainConfig],
    favorites: Mapping[str, bool],
    selector: ActiveChainSelector,
) -> Optional[str]:
    """
    Pick the active chain after a load: first favorite present in chains,
    else the first chain. An existing selection is never replaced.
    Returns the chain that was selected, or None when nothing changed.
    """
    if not chains or selector.chain_name:
        return None
    for name, enabled in favorites.items():
        if enabled and name in chains:
            selector.set_current(name)
            return name
    first = next(iter(chains))
    selector.set_current(first)
    return first
