"""PCM sample encodings and their per-sample sizes."""

from enum import Enum
from typing import Optional

import numpy as np


class SampleFormat(Enum):
    """Binary encoding of one sample of one channel.

    Packed formats interleave channels in a single buffer, planar formats
    (``P`` suffix) keep one buffer per channel.
    """

    INVALID = "invalid"

    U8 = "u8"
    S16 = "s16"
    S32 = "s32"
    S64 = "s64"
    F32 = "f32"
    F64 = "f64"

    U8P = "u8p"
    S16P = "s16p"
    S32P = "s32p"
    S64P = "s64p"
    F32P = "f32p"
    F64P = "f64p"

    @classmethod
    def from_string(cls, name: str) -> "SampleFormat":
        """Look up a format by short name.

        Accepts FFmpeg's float spellings (``flt``, ``dblp``, ...). Unknown
        names map to INVALID.
        """
        key = name.strip().lower()
        key = _FFMPEG_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.INVALID

    @property
    def is_valid(self) -> bool:
        return self is not SampleFormat.INVALID

    @property
    def is_planar(self) -> bool:
        return self in _PLANAR_TO_PACKED

    @property
    def is_packed(self) -> bool:
        return self.is_valid and not self.is_planar

    def packed_equivalent(self) -> "SampleFormat":
        return _PLANAR_TO_PACKED.get(self, self)

    def planar_equivalent(self) -> "SampleFormat":
        return _PACKED_TO_PLANAR.get(self, self)

    @property
    def numpy_dtype(self) -> Optional[np.dtype]:
        """Element type of one sample, None for INVALID."""
        if self is SampleFormat.INVALID:
            return None
        # A valid format missing from the table is a programming error
        return _SAMPLE_DTYPES[self.packed_equivalent()]

    @property
    def bytes_per_sample(self) -> int:
        """Bytes per sample per channel (0 for INVALID)."""
        dtype = self.numpy_dtype
        return 0 if dtype is None else dtype.itemsize

    @property
    def bits_per_sample(self) -> int:
        """Bits per sample per channel (0 for INVALID)."""
        return self.bytes_per_sample * 8

    def __str__(self) -> str:
        return self.value


# Keyed by packed format; planar variants share their packed sizes
_SAMPLE_DTYPES: dict[SampleFormat, np.dtype] = {
    SampleFormat.U8: np.dtype(np.uint8),
    SampleFormat.S16: np.dtype("<i2"),
    SampleFormat.S32: np.dtype("<i4"),
    SampleFormat.S64: np.dtype("<i8"),
    SampleFormat.F32: np.dtype("<f4"),
    SampleFormat.F64: np.dtype("<f8"),
}

_PLANAR_TO_PACKED: dict[SampleFormat, SampleFormat] = {
    SampleFormat.U8P: SampleFormat.U8,
    SampleFormat.S16P: SampleFormat.S16,
    SampleFormat.S32P: SampleFormat.S32,
    SampleFormat.S64P: SampleFormat.S64,
    SampleFormat.F32P: SampleFormat.F32,
    SampleFormat.F64P: SampleFormat.F64,
}

_PACKED_TO_PLANAR: dict[SampleFormat, SampleFormat] = {
    packed: planar for planar, packed in _PLANAR_TO_PACKED.items()
}

_FFMPEG_ALIASES = {
    "flt": "f32",
    "dbl": "f64",
    "fltp": "f32p",
    "dblp": "f64p",
}
