"""Audio stream parameters with exact time, sample and byte arithmetic.

- Rational: exact fraction used for time values and time bases
- SampleFormat: PCM sample encodings and their sizes
- ChannelLayout: native speaker masks or opaque channel sets
- AudioParams: stream shape plus the conversion engine
"""

__version__ = "0.1.0"

__all__ = [
    "AudioConstants",
    "AudioParams",
    "Channel",
    "ChannelLayout",
    "ChannelOrder",
    "Rational",
    "SampleFormat",
    "StreamConfig",
    "load_streams",
]

from audioparams.core.rational import Rational
from audioparams.core.sample_format import SampleFormat
from audioparams.core.channel_layout import Channel, ChannelLayout, ChannelOrder
from audioparams.core.constants import AudioConstants
from audioparams.core.audio_params import AudioParams
from audioparams.core.stream_config import StreamConfig, load_streams
