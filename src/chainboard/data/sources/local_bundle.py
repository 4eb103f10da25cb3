import json
from pathlib import Path
from typing import Dict, Any
from loguru import logger

from ..errors import LocalEnumerationError

class LocalBundle:
    """
    Chain configs shipped with the application, one JSON file per chain:
    <root>/mainnet/*.json and <root>/testnet/*.json
    """
    name = "local"

    def __init__(self, root: Path):
        self.root = Path(root)

    def enumerate(self, network) -> Dict[str, Dict[str, Any]]:
        """Map file identity -> parsed record, in filename order"""
        folder = self.root / getattr(network, "value", network)
        out: Dict[str, Dict[str, Any]] = {}
        try:
            for path in sorted(folder.glob("*.json")):
                with open(path, "r", encoding="utf-8") as f:
                    out[path.stem] = json.load(f)
        except (OSError, ValueError) as e:
            raise LocalEnumerationError(f"Failed to read local bundle {folder}: {e}") from e
        logger.debug(f"Enumerated {len(out)} local configs from {folder}")
        return out
