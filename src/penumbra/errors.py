class PenumbraError(Exception):
    """Base error for Penumbra domain exceptions."""


class MapInvariantError(PenumbraError):
    """Raised when a map would be built in an inconsistent state (e.g. wrong buffer length)."""


class UnknownBiomeError(PenumbraError, KeyError):
    """Raised when a biome name does not match any registered biome."""


class ConfigError(PenumbraError):
    """Raised when settings values cannot produce a valid level."""
