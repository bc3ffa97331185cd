"""Data models and configuration classes."""

from dataclasses import dataclass
from enum import Enum


class TrackState(Enum):
    """Track state enumeration."""

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"
    DISPOSED = "disposed"


@dataclass
class BackendConfig:
    """Configuration for audio backends."""

    asset_root: str = "assets"
    """Directory that relative track paths are resolved against."""

    frequency: int = 44100
    """Mixer sample rate (Hz). Default: 44100."""

    channels: int = 2
    """Number of output channels. Default: 2 (stereo)."""

    buffer: int = 512
    """Mixer buffer size in samples. Default: 512."""
