"""Shared test fixtures and configuration."""

import pytest

from audioparams.core.audio_params import AudioParams
from audioparams.core.channel_layout import LAYOUT_5POINT1, LAYOUT_STEREO
from audioparams.core.sample_format import SampleFormat


@pytest.fixture
def sample_rate() -> int:
    """Sample rate for tests."""
    return 48000


@pytest.fixture
def stereo_s16(sample_rate: int) -> AudioParams:
    """48kHz stereo PCM16 stream."""
    return AudioParams(sample_rate, LAYOUT_STEREO, SampleFormat.S16)


@pytest.fixture
def surround_f32p() -> AudioParams:
    """44.1kHz 5.1 planar float stream."""
    return AudioParams(44100, LAYOUT_5POINT1, SampleFormat.F32P)


@pytest.fixture
def invalid_params() -> AudioParams:
    """Default constructed (invalid) parameters."""
    return AudioParams()


@pytest.fixture(params=[8000, 22050, 44100, 48000, 96000, 192000])
def valid_params(request: pytest.FixtureRequest) -> AudioParams:
    """Valid parameters across common rates."""
    return AudioParams(request.param, LAYOUT_5POINT1, SampleFormat.S32)
