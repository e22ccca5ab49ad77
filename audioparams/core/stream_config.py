"""Audio stream descriptions loaded from YAML files.

A file holds either a single stream mapping or a ``streams`` list::

    streams:
      - sample_rate: 48000
        channel_layout: stereo
        format: s16
      - sample_rate: 44100
        channel_layout: {channels: 6, description: "ambisonic"}
        format: f32p
        time_base: 1/1000
        stream_index: 1
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog
import yaml

from audioparams.core.audio_params import AudioParams
from audioparams.core.channel_layout import ChannelLayout, ChannelOrder
from audioparams.core.rational import Rational
from audioparams.core.sample_format import SampleFormat


logger = structlog.get_logger(__name__)


def _parse_layout(value: Any) -> ChannelLayout:
    """Layout from a name, an integer mask or an opaque channel mapping."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid channel_layout: {value!r}")
    if isinstance(value, int):
        return ChannelLayout.from_mask(value)
    if isinstance(value, str):
        return ChannelLayout.from_name(value)
    if isinstance(value, dict):
        if "channels" not in value:
            raise ValueError("Opaque channel_layout requires 'channels'")
        return ChannelLayout.opaque(int(value["channels"]), str(value.get("description", "")))
    raise ValueError(f"Invalid channel_layout: {value!r}")


def _format_layout(layout: ChannelLayout) -> Union[str, int, Dict]:
    if layout.order is ChannelOrder.OPAQUE:
        return {"channels": layout.channel_count, "description": layout.description}
    name = layout.name
    return name if not name.startswith("0x") else layout.mask


@dataclass
class StreamConfig:
    """One audio stream as written in a stream file.

    Fields:
        sample_rate: Rate in Hz (0 leaves the stream invalid)
        channel_layout: Layout of the stream
        format: Sample format
        time_base: Override for the default 1/sample_rate time base
        enabled: Whether the stream is used
        stream_index: Index of the stream in its container
        duration: Length in samples
    """

    sample_rate: int = 0
    channel_layout: ChannelLayout = ChannelLayout()
    format: SampleFormat = SampleFormat.INVALID
    time_base: Optional[Rational] = None
    enabled: bool = True
    stream_index: int = 0
    duration: int = 0

    @classmethod
    def from_dict(cls, data: Dict) -> "StreamConfig":
        """Build a stream description from a parsed YAML mapping.

        Raises:
            ValueError: If a field has the wrong type or an unknown value
        """
        if not isinstance(data, dict):
            raise ValueError("Stream entry must be a dictionary")

        try:
            sample_rate = int(data.get("sample_rate", 0))
            layout = _parse_layout(data.get("channel_layout", 0))

            format_name = data.get("format", SampleFormat.INVALID.value)
            if not isinstance(format_name, str):
                raise ValueError(f"'format' must be a string, got {format_name!r}")
            sample_format = SampleFormat.from_string(format_name)

            enabled = data.get("enabled", True)
            if not isinstance(enabled, bool):
                raise ValueError(f"'enabled' must be true or false, got {enabled!r}")

            time_base = data.get("time_base")
            if time_base is not None:
                time_base = Rational.from_string(str(time_base))

            return cls(
                sample_rate=sample_rate,
                channel_layout=layout,
                format=sample_format,
                time_base=time_base,
                enabled=enabled,
                stream_index=int(data.get("stream_index", 0)),
                duration=int(data.get("duration", 0)),
            )
        except (TypeError, ZeroDivisionError) as e:
            raise ValueError(f"Invalid stream entry: {e}") from e

    @classmethod
    def from_params(cls, params: AudioParams) -> "StreamConfig":
        time_base = params.time_base
        if time_base == params.sample_rate_as_time_base():
            time_base = None
        return cls(
            sample_rate=params.sample_rate,
            channel_layout=params.channel_layout,
            format=params.format,
            time_base=time_base,
            enabled=params.enabled,
            stream_index=params.stream_index,
            duration=params.duration,
        )

    def to_params(self) -> AudioParams:
        params = AudioParams(self.sample_rate, self.channel_layout, self.format)
        if self.time_base is not None:
            params.time_base = self.time_base
        params.enabled = self.enabled
        params.stream_index = self.stream_index
        params.duration = self.duration
        return params

    def to_dict(self) -> Dict:
        """Convert to a YAML-ready dictionary."""
        data: Dict[str, Any] = {
            "sample_rate": self.sample_rate,
            "channel_layout": _format_layout(self.channel_layout),
            "format": self.format.value,
            "enabled": self.enabled,
            "stream_index": self.stream_index,
            "duration": self.duration,
        }
        if self.time_base is not None:
            data["time_base"] = str(self.time_base)
        return data


def load_stream_configs(file_path: Union[str, Path]) -> List[StreamConfig]:
    """Load stream descriptions from a YAML file.

    Args:
        file_path: Path to YAML stream file

    Returns:
        Stream descriptions in file order

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML file is invalid
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Stream file not found: {file_path}")

    logger.info("Loading streams from YAML", file_path=str(file_path))

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML file: {e}") from e

    if isinstance(data, dict) and "streams" in data:
        entries = data["streams"]
        if not isinstance(entries, list):
            raise ValueError("'streams' must be a list")
    elif isinstance(data, dict):
        entries = [data]
    else:
        raise ValueError("YAML file must contain a dictionary")

    configs = [StreamConfig.from_dict(entry) for entry in entries]

    logger.info(
        "Streams loaded",
        count=len(configs),
        invalid=sum(1 for c in configs if not c.to_params().is_valid())
    )
    return configs


def load_streams(file_path: Union[str, Path]) -> List[AudioParams]:
    """Load a YAML stream file as AudioParams.

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML file is invalid
    """
    return [config.to_params() for config in load_stream_configs(file_path)]
