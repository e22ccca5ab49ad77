"""Audio stream parameters and time/sample/byte conversion."""

import math
from fractions import Fraction
from typing import Union

from audioparams.core.channel_layout import ChannelLayout
from audioparams.core.constants import (
    AudioConstants,
    is_supported_channel_layout,
    is_supported_sample_rate,
)
from audioparams.core.rational import Rational
from audioparams.core.sample_format import SampleFormat


TimeValue = Union[Rational, Fraction, int, float]


def _exact_time(time: TimeValue) -> "Rational | None":
    """Rational form of an exact time value, None for floats."""
    if isinstance(time, Rational):
        return time
    if isinstance(time, (int, Fraction)):
        return Rational(time.numerator, time.denominator)
    return None


def _div_trunc(dividend: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(dividend) // divisor
    return -quotient if dividend < 0 else quotient


class AudioParams:
    """Shape of an audio stream: rate, channel layout and sample format.

    Also carries stream metadata (enabled flag, stream index, duration and
    time base) which does not take part in equality or conversion. The
    duration is a sample count.

    Conversions never raise. On an invalid instance (see ``is_valid``) they
    return 0 or ``Rational(0, 1)``; callers validate once when the stream is
    acquired.
    """

    SUPPORTED_SAMPLE_RATES = AudioConstants.SUPPORTED_SAMPLE_RATES
    SUPPORTED_CHANNEL_LAYOUTS = AudioConstants.SUPPORTED_CHANNEL_LAYOUTS

    def __init__(
        self,
        sample_rate: int = 0,
        channel_layout: Union[int, ChannelLayout] = 0,
        format: SampleFormat = SampleFormat.INVALID,
    ) -> None:
        """Initialize audio parameters.

        Args:
            sample_rate: Sample rate in Hz, 0 when unknown
            channel_layout: Native channel mask or a ChannelLayout
            format: Sample format of one channel sample
        """
        self._sample_rate = int(sample_rate)
        self._format = format
        self.channel_layout = channel_layout

        self._enabled = True
        self._stream_index = 0
        self._duration = 0
        self._time_base = self.sample_rate_as_time_base()

    @property
    def sample_rate(self) -> int:
        """Sample rate in Hz."""
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, sample_rate: int) -> None:
        # The time base is left alone once constructed
        self._sample_rate = int(sample_rate)

    @property
    def channel_layout(self) -> ChannelLayout:
        return self._channel_layout

    @channel_layout.setter
    def channel_layout(self, layout: Union[int, ChannelLayout]) -> None:
        if isinstance(layout, ChannelLayout):
            self._channel_layout = layout
        else:
            self._channel_layout = ChannelLayout.from_mask(layout)

    @property
    def channel_layout_mask(self) -> int:
        """Native channel mask, 0 if the layout is not mask based."""
        return self._channel_layout.channel_layout_mask

    @property
    def channel_count(self) -> int:
        return self._channel_layout.channel_count

    @property
    def format(self) -> SampleFormat:
        return self._format

    @format.setter
    def format(self, format: SampleFormat) -> None:
        self._format = format

    @property
    def time_base(self) -> Rational:
        """Duration of one tick, 1/sample_rate unless overridden."""
        return self._time_base

    @time_base.setter
    def time_base(self, time_base: Rational) -> None:
        self._time_base = time_base

    def sample_rate_as_time_base(self) -> Rational:
        if self._sample_rate <= 0:
            return Rational(0, 1)
        return Rational(1, self._sample_rate)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    @property
    def stream_index(self) -> int:
        return self._stream_index

    @stream_index.setter
    def stream_index(self, stream_index: int) -> None:
        self._stream_index = int(stream_index)

    @property
    def duration(self) -> int:
        """Stream length in samples."""
        return self._duration

    @duration.setter
    def duration(self, duration: int) -> None:
        self._duration = int(duration)

    @property
    def duration_time(self) -> Rational:
        """Stream length in seconds."""
        return self.samples_to_time(self._duration)

    @property
    def bytes_per_sample_per_channel(self) -> int:
        return self._format.bytes_per_sample

    @property
    def bits_per_sample(self) -> int:
        return self._format.bits_per_sample

    @property
    def bytes_per_frame(self) -> int:
        """Bytes holding one sample of every channel."""
        return self.channel_count * self.bytes_per_sample_per_channel

    def is_valid(self) -> bool:
        return (
            self._sample_rate > 0
            and self._format is not SampleFormat.INVALID
            and self.channel_count > 0
        )

    def is_supported(self) -> bool:
        """Valid, with a rate and native layout listed in the registry."""
        return (
            self.is_valid()
            and is_supported_sample_rate(self._sample_rate)
            and is_supported_channel_layout(self.channel_layout_mask)
        )

    # Conversions

    def time_to_samples(self, time: TimeValue) -> int:
        """Nearest sample index to ``time`` seconds.

        Rational, Fraction and int times are converted exactly. Floats go
        through floating point; NaN and infinities give 0.
        """
        if not self.is_valid():
            return 0

        exact = _exact_time(time)
        if exact is not None:
            return (exact * self._sample_rate).rounded()

        scaled = float(time) * self._sample_rate
        if not math.isfinite(scaled):
            return 0
        magnitude = abs(scaled)
        rounded = math.floor(magnitude)
        if magnitude - rounded >= 0.5:
            rounded += 1
        return -rounded if scaled < 0 else rounded

    def samples_to_time(self, samples: int) -> Rational:
        if not self.is_valid():
            return Rational(0, 1)
        return Rational(samples, self._sample_rate)

    def samples_to_bytes(self, samples: int) -> int:
        if not self.is_valid():
            return 0
        return samples * self.bytes_per_frame

    def samples_to_bytes_per_channel(self, samples: int) -> int:
        if not self.is_valid():
            return 0
        return samples * self.bytes_per_sample_per_channel

    def bytes_to_samples(self, nb_bytes: int) -> int:
        """Whole frames in ``nb_bytes``; partial frames are dropped."""
        if not self.is_valid():
            return 0
        return _div_trunc(nb_bytes, self.bytes_per_frame)

    def bytes_to_time(self, nb_bytes: int) -> Rational:
        return self.samples_to_time(self.bytes_to_samples(nb_bytes))

    def bytes_per_channel_to_time(self, nb_bytes: int) -> Rational:
        if not self.is_valid():
            return Rational(0, 1)
        return self.samples_to_time(_div_trunc(nb_bytes, self.bytes_per_sample_per_channel))

    def time_to_bytes(self, time: TimeValue) -> int:
        return self.samples_to_bytes(self.time_to_samples(time))

    def time_to_bytes_per_channel(self, time: TimeValue) -> int:
        return self.samples_to_bytes_per_channel(self.time_to_samples(time))

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AudioParams):
            return NotImplemented
        return (
            self._sample_rate == other._sample_rate
            and self._channel_layout == other._channel_layout
            and self._format is other._format
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"AudioParams(sample_rate={self._sample_rate}, "
            f"channel_layout={self._channel_layout.name!r}, "
            f"format={self._format.value!r})"
        )
