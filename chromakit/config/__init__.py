from .ranges import (
    AlphaProfile,
    ChannelRange,
    RangeRegistry,
    DEFAULT_RANGES,
    CHANNEL_KEYS,
    range_of,
    resolve_ranges,
    validate_range,
)

__all__ = [
    "AlphaProfile",
    "ChannelRange",
    "RangeRegistry",
    "DEFAULT_RANGES",
    "CHANNEL_KEYS",
    "range_of",
    "resolve_ranges",
    "validate_range",
]
