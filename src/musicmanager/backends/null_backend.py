"""Null backend for testing (no actual audio output)."""

import time
from typing import Dict, List, Optional
from musicmanager.core.exceptions import BackendError
from musicmanager.core.interfaces import IAudioBackend, ITrack
from musicmanager.core.models import BackendConfig, TrackState
from musicmanager.utils.log import get_logger
from musicmanager.utils.validate import resolve_asset_path

logger = get_logger(__name__)


class NullTrack(ITrack):
    """Null track implementation for testing."""

    def __init__(self, track_id: str, path: str):
        self.track_id = track_id
        self.path = path
        self._state = TrackState.STOPPED
        self._volume = 1.0
        self._looping = False
        self._position = 0.0
        self._start_time: float = 0.0

    def play(self) -> None:
        """Start playback from the current position."""
        if self._state == TrackState.DISPOSED:
            raise BackendError("Track has been disposed", self.path)
        if self._state == TrackState.PLAYING:
            return
        self._start_time = time.monotonic()
        self._state = TrackState.PLAYING
        logger.debug(f"NullTrack {self.track_id}: playing from {self._position:.3f}s")

    def pause(self) -> None:
        """Pause playback."""
        if self._state == TrackState.PLAYING:
            self._position = self.get_position()
            self._state = TrackState.PAUSED
            logger.debug(f"NullTrack {self.track_id}: paused")

    def stop(self) -> None:
        """Stop playback."""
        if self._state == TrackState.DISPOSED:
            return
        self._position = 0.0
        self._state = TrackState.STOPPED
        logger.debug(f"NullTrack {self.track_id}: stopped")

    def get_volume(self) -> float:
        return self._volume

    def set_volume(self, volume: float) -> None:
        """Set volume."""
        self._volume = volume
        logger.debug(f"NullTrack {self.track_id}: volume={volume}")

    def is_looping(self) -> bool:
        return self._looping

    def set_looping(self, looping: bool) -> None:
        """Set looping flag."""
        self._looping = looping
        logger.debug(f"NullTrack {self.track_id}: looping={looping}")

    def get_position(self) -> float:
        """Get position, advancing with the clock while playing."""
        if self._state == TrackState.PLAYING:
            return self._position + (time.monotonic() - self._start_time)
        return self._position

    def set_position(self, position: float) -> None:
        """Set position."""
        self._position = position
        if self._state == TrackState.PLAYING:
            self._start_time = time.monotonic()
        logger.debug(f"NullTrack {self.track_id}: position={position}")

    def is_playing(self) -> bool:
        return self._state == TrackState.PLAYING

    @property
    def state(self) -> TrackState:
        """Current track state."""
        return self._state

    def dispose(self) -> None:
        """Dispose track. Queries keep returning the last known state."""
        if self._state == TrackState.PLAYING:
            self._position = self.get_position()
        self._state = TrackState.DISPOSED
        logger.debug(f"NullTrack {self.track_id}: disposed")


class NullBackend(IAudioBackend):
    """Null backend implementation for testing."""

    def __init__(self, config: Optional[BackendConfig] = None):
        self._config = config or BackendConfig(asset_root="")
        self._initialized = False
        self._tracks: Dict[str, NullTrack] = {}
        self._next_track_id = 0
        self.created_paths: List[str] = []

    def initialize(self) -> None:
        """Initialize backend."""
        if self._initialized:
            return
        self._initialized = True
        logger.info("NullBackend initialized")

    def create_track(self, path: str) -> ITrack:
        """Create a track. The file is never opened."""
        self.initialize()
        resolved = str(resolve_asset_path(self._config.asset_root, path))
        track_id = f"null_{self._next_track_id}"
        self._next_track_id += 1
        track = NullTrack(track_id, resolved)
        self._tracks[track_id] = track
        self.created_paths.append(resolved)
        logger.debug(f"Created NullTrack {track_id} for {resolved}")
        return track

    def shutdown(self) -> None:
        """Shutdown backend."""
        for track in self._tracks.values():
            if track.state != TrackState.DISPOSED:
                track.dispose()
        self._tracks.clear()
        self._initialized = False
        logger.info("NullBackend shut down")
