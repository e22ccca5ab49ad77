"""Channel layouts: native speaker masks or opaque channel sets."""

from dataclasses import dataclass, field
from enum import Enum, IntFlag


class Channel(IntFlag):
    """Speaker positions, using FFmpeg's native mask bits."""

    FRONT_LEFT = 0x1
    FRONT_RIGHT = 0x2
    FRONT_CENTER = 0x4
    LOW_FREQUENCY = 0x8
    BACK_LEFT = 0x10
    BACK_RIGHT = 0x20
    FRONT_LEFT_OF_CENTER = 0x40
    FRONT_RIGHT_OF_CENTER = 0x80
    BACK_CENTER = 0x100
    SIDE_LEFT = 0x200
    SIDE_RIGHT = 0x400
    TOP_CENTER = 0x800
    TOP_FRONT_LEFT = 0x1000
    TOP_FRONT_CENTER = 0x2000
    TOP_FRONT_RIGHT = 0x4000
    TOP_BACK_LEFT = 0x8000
    TOP_BACK_CENTER = 0x10000
    TOP_BACK_RIGHT = 0x20000


class ChannelOrder(Enum):
    """How a layout describes its channels."""

    NATIVE = "native"
    """Channels identified by a speaker mask, in mask bit order."""
    OPAQUE = "opaque"
    """Only the channel count is known."""


LAYOUT_MONO = int(Channel.FRONT_CENTER)
LAYOUT_STEREO = int(Channel.FRONT_LEFT | Channel.FRONT_RIGHT)
LAYOUT_2POINT1 = LAYOUT_STEREO | int(Channel.LOW_FREQUENCY)
LAYOUT_SURROUND = LAYOUT_STEREO | int(Channel.FRONT_CENTER)
LAYOUT_QUAD = LAYOUT_STEREO | int(Channel.BACK_LEFT | Channel.BACK_RIGHT)
LAYOUT_5POINT0 = LAYOUT_SURROUND | int(Channel.SIDE_LEFT | Channel.SIDE_RIGHT)
LAYOUT_5POINT1 = LAYOUT_5POINT0 | int(Channel.LOW_FREQUENCY)
LAYOUT_7POINT1 = LAYOUT_5POINT1 | int(Channel.BACK_LEFT | Channel.BACK_RIGHT)

NAMED_LAYOUTS: dict[str, int] = {
    "mono": LAYOUT_MONO,
    "stereo": LAYOUT_STEREO,
    "2.1": LAYOUT_2POINT1,
    "3.0": LAYOUT_SURROUND,
    "quad": LAYOUT_QUAD,
    "5.0": LAYOUT_5POINT0,
    "5.1": LAYOUT_5POINT1,
    "7.1": LAYOUT_7POINT1,
}

_MAX_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class ChannelLayout:
    """Channel count plus, for native layouts, the speaker mask.

    Equality covers order, count and mask. The description of an opaque
    layout is informational only.
    """

    order: ChannelOrder = ChannelOrder.NATIVE
    channel_count: int = 0
    mask: int = 0
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.channel_count < 0:
            raise ValueError(f"Channel count must be non-negative, got {self.channel_count}")
        if not 0 <= self.mask <= _MAX_MASK:
            raise ValueError(f"Channel mask out of range: {self.mask:#x}")
        if self.order is ChannelOrder.OPAQUE and self.mask:
            raise ValueError("Opaque layouts carry no channel mask")

    @classmethod
    def from_mask(cls, mask: int) -> "ChannelLayout":
        """Native layout; channel count is the number of set bits."""
        mask = int(mask)
        if not 0 <= mask <= _MAX_MASK:
            raise ValueError(f"Channel mask out of range: {mask:#x}")
        return cls(ChannelOrder.NATIVE, bin(mask).count("1"), mask)

    @classmethod
    def opaque(cls, channel_count: int, description: str = "") -> "ChannelLayout":
        """Layout known only by its channel count."""
        return cls(ChannelOrder.OPAQUE, int(channel_count), 0, description)

    @classmethod
    def from_name(cls, name: str) -> "ChannelLayout":
        """Native layout by name (``"stereo"``, ``"5.1"``, ...).

        Raises:
            ValueError: If name is not a known layout
        """
        key = name.strip().lower()
        if key not in NAMED_LAYOUTS:
            raise ValueError(f"Unknown channel layout: {name}")
        return cls.from_mask(NAMED_LAYOUTS[key])

    @property
    def is_native(self) -> bool:
        return self.order is ChannelOrder.NATIVE

    @property
    def channel_layout_mask(self) -> int:
        """Speaker mask, or 0 when the layout has no native mask."""
        return self.mask if self.is_native else 0

    @property
    def channels(self) -> tuple[Channel, ...]:
        """Speaker positions in buffer order (empty for opaque layouts)."""
        if not self.is_native:
            return ()
        return tuple(ch for ch in Channel if self.mask & ch)

    @property
    def name(self) -> str:
        if not self.is_native:
            return self.description or f"{self.channel_count} channels"
        for layout_name, layout_mask in NAMED_LAYOUTS.items():
            if layout_mask == self.mask:
                return layout_name
        return f"{self.mask:#x}"

    def __str__(self) -> str:
        return self.name
