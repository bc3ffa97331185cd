"""
musicmanager - named music tracks on top of a pluggable audio backend.

This package keeps a registry of music tracks keyed by name, with
play, pause, stop, looping, seek and dispose operations forwarded to
the backend's track handles. A pygame backend is used by default and a
null backend is provided for tests.
"""

from musicmanager.api.tracks import TrackRegistry
from musicmanager.backends.null_backend import NullBackend
from musicmanager.core.models import BackendConfig, TrackState
from musicmanager.core.exceptions import (
    AudioError,
    BackendError,
    TrackNotFound,
    TrackNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "TrackRegistry",
    "NullBackend",
    "BackendConfig",
    "TrackState",
    "AudioError",
    "BackendError",
    "TrackNotFound",
    "TrackNotFoundError",
]
