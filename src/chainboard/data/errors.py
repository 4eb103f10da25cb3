"""
Error kinds raised by the data layer and caught at the dashboard store boundary.
"""


class ChainboardError(Exception):
    """Base class for every error raised by chainboard"""


class ConversionError(ChainboardError):
    """A raw chain record could not be mapped onto ChainConfig"""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        super().__init__(f"Failed to convert {stage} config: {message}")


class TransportError(ChainboardError):
    """Remote fetch failed or returned an unusable payload"""


class LocalEnumerationError(ChainboardError):
    """Bundled local configuration could not be read"""


class PersistenceError(ChainboardError):
    """Reading or writing persisted user preferences failed"""
