"""Audio formats accepted at the system boundary."""

from audioparams.core.channel_layout import (
    LAYOUT_2POINT1,
    LAYOUT_5POINT1,
    LAYOUT_7POINT1,
    LAYOUT_MONO,
    LAYOUT_STEREO,
)


class AudioConstants:
    """Sample rates and channel layouts offered to users and accepted on input.

    Advisory only: the conversion engine works with any positive rate and
    any layout.
    """

    SUPPORTED_SAMPLE_RATES: tuple[int, ...] = (
        8000,    # Telephony
        11025,
        16000,   # Wideband speech
        22050,
        24000,
        32000,
        44100,   # CD
        48000,   # Video
        88200,
        96000,
        176400,
        192000,
    )

    SUPPORTED_CHANNEL_LAYOUTS: tuple[int, ...] = (
        LAYOUT_MONO,
        LAYOUT_STEREO,
        LAYOUT_2POINT1,
        LAYOUT_5POINT1,
        LAYOUT_7POINT1,
    )


def is_supported_sample_rate(sample_rate: int) -> bool:
    return sample_rate in AudioConstants.SUPPORTED_SAMPLE_RATES


def is_supported_channel_layout(mask: int) -> bool:
    """Check a native channel mask against the registry (0 is never supported)."""
    return mask in AudioConstants.SUPPORTED_CHANNEL_LAYOUTS
