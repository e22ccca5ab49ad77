"""Tests for YAML stream descriptions."""

from pathlib import Path

import pytest
import yaml

from audioparams.core.audio_params import AudioParams
from audioparams.core.channel_layout import LAYOUT_STEREO, ChannelLayout, ChannelOrder
from audioparams.core.rational import Rational
from audioparams.core.sample_format import SampleFormat
from audioparams.core.stream_config import StreamConfig, load_stream_configs, load_streams


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "streams.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestStreamConfig:
    """Test stream entry parsing."""

    def test_from_dict_named_layout(self) -> None:
        """Test a typical stream entry."""
        config = StreamConfig.from_dict(
            {"sample_rate": 48000, "channel_layout": "stereo", "format": "s16"}
        )
        params = config.to_params()

        assert params == AudioParams(48000, LAYOUT_STEREO, SampleFormat.S16)
        assert params.time_base == Rational(1, 48000)
        assert params.is_valid()

    def test_from_dict_metadata(self) -> None:
        """Test metadata and time base override."""
        config = StreamConfig.from_dict({
            "sample_rate": 44100,
            "channel_layout": 3,
            "format": "fltp",
            "time_base": "1/1000",
            "enabled": False,
            "stream_index": 2,
            "duration": 441000,
        })
        params = config.to_params()

        assert params.format is SampleFormat.F32P
        assert params.channel_layout_mask == LAYOUT_STEREO
        assert params.time_base == Rational(1, 1000)
        assert params.enabled is False
        assert params.stream_index == 2
        assert params.duration_time == 10

    def test_opaque_layout(self) -> None:
        """Test channel mapping produces an opaque layout."""
        config = StreamConfig.from_dict({
            "sample_rate": 48000,
            "channel_layout": {"channels": 4, "description": "ambisonic"},
            "format": "f32",
        })
        assert config.channel_layout.order is ChannelOrder.OPAQUE
        assert config.channel_layout.channel_count == 4
        assert config.to_params().channel_layout_mask == 0

    def test_missing_fields_give_invalid_stream(self) -> None:
        """Test an empty entry loads as invalid parameters."""
        params = StreamConfig.from_dict({}).to_params()
        assert not params.is_valid()
        assert params == AudioParams()

    def test_unknown_format_is_invalid(self) -> None:
        """Test unknown formats load as INVALID."""
        config = StreamConfig.from_dict({"sample_rate": 48000, "channel_layout": "mono", "format": "s24"})
        assert config.format is SampleFormat.INVALID
        assert not config.to_params().is_valid()

    @pytest.mark.parametrize("enabled", ["false", "0", "no", 0, 1, None])
    def test_enabled_must_be_bool(self, enabled: object) -> None:
        """Test quoted or numeric enabled values are rejected."""
        entry = {"sample_rate": 48000, "channel_layout": "stereo", "format": "s16", "enabled": enabled}
        with pytest.raises(ValueError, match="'enabled' must be true or false"):
            StreamConfig.from_dict(entry)

    def test_enabled_from_yaml_bool(self) -> None:
        """Test YAML booleans are accepted."""
        data = yaml.safe_load("sample_rate: 48000\nchannel_layout: stereo\nformat: s16\nenabled: no\n")
        assert StreamConfig.from_dict(data).enabled is False

    @pytest.mark.parametrize(
        "entry",
        [
            {"channel_layout": "9.1"},
            {"channel_layout": {"description": "no count"}},
            {"channel_layout": [1, 2]},
            {"format": 16},
            {"time_base": "1/0"},
            {"sample_rate": None},
            {"sample_rate": "fast"},
        ],
    )
    def test_invalid_entries(self, entry: dict) -> None:
        """Test malformed entries raise ValueError."""
        with pytest.raises(ValueError):
            StreamConfig.from_dict(entry)

    def test_params_round_trip(self) -> None:
        """Test conversion to and from AudioParams keeps metadata."""
        params = AudioParams(96000, ChannelLayout.from_name("5.1"), SampleFormat.S32)
        params.stream_index = 5
        params.duration = 96000
        params.time_base = Rational(1, 90000)

        restored = StreamConfig.from_params(params).to_params()
        assert restored == params
        assert restored.stream_index == 5
        assert restored.duration == 96000
        assert restored.time_base == Rational(1, 90000)

    def test_to_dict(self) -> None:
        """Test YAML-ready dictionary."""
        params = AudioParams(48000, LAYOUT_STEREO, SampleFormat.S16)
        data = StreamConfig.from_params(params).to_dict()

        assert data == {
            "sample_rate": 48000,
            "channel_layout": "stereo",
            "format": "s16",
            "enabled": True,
            "stream_index": 0,
            "duration": 0,
        }
        assert StreamConfig.from_dict(data).to_params() == params


class TestLoadStreams:
    """Test loading YAML files."""

    def test_single_mapping(self, tmp_path: Path) -> None:
        """Test a file holding one stream."""
        path = _write(tmp_path, "sample_rate: 48000\nchannel_layout: stereo\nformat: s16\n")
        streams = load_streams(path)
        assert streams == [AudioParams(48000, LAYOUT_STEREO, SampleFormat.S16)]

    def test_stream_list(self, tmp_path: Path) -> None:
        """Test a file with a streams list."""
        data = {
            "streams": [
                {"sample_rate": 48000, "channel_layout": "stereo", "format": "s16"},
                {"sample_rate": 44100, "channel_layout": "5.1", "format": "f32p", "stream_index": 1},
            ]
        }
        path = _write(tmp_path, yaml.safe_dump(data))

        streams = load_streams(path)
        assert len(streams) == 2
        assert streams[1].channel_count == 6
        assert streams[1].stream_index == 1

        configs = load_stream_configs(str(path))
        assert [c.sample_rate for c in configs] == [48000, 44100]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Stream file not found"):
            load_streams(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test syntax errors raise ValueError."""
        path = _write(tmp_path, "streams: [\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_streams(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """Test top-level lists are rejected."""
        path = _write(tmp_path, "- 48000\n- 44100\n")
        with pytest.raises(ValueError, match="must contain a dictionary"):
            load_streams(path)

    def test_streams_not_a_list(self, tmp_path: Path) -> None:
        """Test streams must be a list."""
        path = _write(tmp_path, "streams: 3\n")
        with pytest.raises(ValueError, match="must be a list"):
            load_streams(path)
