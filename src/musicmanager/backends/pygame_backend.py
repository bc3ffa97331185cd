"""Backend playing tracks through pygame's music stream."""

from typing import Optional

import pygame

from musicmanager.core.exceptions import BackendError
from musicmanager.core.interfaces import IAudioBackend, ITrack
from musicmanager.core.models import BackendConfig, TrackState
from musicmanager.utils.log import get_logger
from musicmanager.utils.validate import resolve_asset_path

logger = get_logger(__name__)


class PygameTrack(ITrack):
    """
    Track backed by ``pygame.mixer.music``.

    pygame has a single music stream, so only the track that last started
    playing is attached to it. Every other track only keeps its settings
    until its next play() call.
    """

    def __init__(self, backend: "PygameBackend", path: str):
        self._backend = backend
        self.path = path
        self._state = TrackState.STOPPED
        self._volume = 1.0
        self._looping = False
        # Position while not playing
        self._position = 0.0
        # Offset the stream was last started from; get_pos() counts from it
        self._stream_offset = 0.0
        # A seek or looping change made while paused; resume must restart
        self._restart_pending = False

    @property
    def state(self) -> TrackState:
        """Current track state."""
        return self._state

    @property
    def owns_stream(self) -> bool:
        """Whether this track is the one loaded into the music stream."""
        return self._backend.active_track is self

    def play(self) -> None:
        """Start playback, or resume it after pause()."""
        if self._state == TrackState.DISPOSED:
            raise BackendError("Track has been disposed", self.path)
        if self._state == TrackState.PLAYING and self.owns_stream:
            return
        if (
            self._state == TrackState.PAUSED
            and self.owns_stream
            and not self._restart_pending
        ):
            pygame.mixer.music.unpause()
        else:
            self._backend.attach(self)
            self._start_stream(self._position)
        self._state = TrackState.PLAYING
        logger.debug(f"PygameTrack {self.path}: playing")

    def pause(self) -> None:
        if self._state == TrackState.PLAYING and self.owns_stream:
            self._position = self.get_position()
            pygame.mixer.music.pause()
            self._state = TrackState.PAUSED
            logger.debug(f"PygameTrack {self.path}: paused at {self._position:.3f}s")

    def stop(self) -> None:
        if self._state == TrackState.DISPOSED:
            return
        if self.owns_stream:
            pygame.mixer.music.stop()
        self._position = 0.0
        self._restart_pending = False
        self._state = TrackState.STOPPED
        logger.debug(f"PygameTrack {self.path}: stopped")

    def get_volume(self) -> float:
        return self._volume

    def set_volume(self, volume: float) -> None:
        self._volume = volume
        if self.owns_stream:
            pygame.mixer.music.set_volume(volume)

    def is_looping(self) -> bool:
        return self._looping

    def set_looping(self, looping: bool) -> None:
        """
        Set looping flag.

        pygame fixes the loop count when the stream starts, so a playing
        track is restarted at its current position to apply the change.
        """
        if looping == self._looping:
            return
        if self._state == TrackState.PLAYING and self.owns_stream:
            position = self.get_position()
            self._looping = looping
            self._start_stream(position)
        else:
            self._looping = looping
            if self._state == TrackState.PAUSED:
                self._restart_pending = True
        logger.debug(f"PygameTrack {self.path}: looping={looping}")

    def get_position(self) -> float:
        if self._state != TrackState.PLAYING or not self.owns_stream:
            return self._position
        elapsed_ms = pygame.mixer.music.get_pos()
        if elapsed_ms < 0:
            return self._stream_offset
        return self._stream_offset + elapsed_ms / 1000.0

    def set_position(self, position: float) -> None:
        self._position = position
        if self._state == TrackState.PLAYING and self.owns_stream:
            self._start_stream(position)
        elif self._state == TrackState.PAUSED:
            self._restart_pending = True
        logger.debug(f"PygameTrack {self.path}: position={position}")

    def is_playing(self) -> bool:
        if self._state == TrackState.PLAYING:
            if not self.owns_stream:
                # Another track took over the stream
                self._state = TrackState.STOPPED
                self._position = 0.0
            elif not pygame.mixer.music.get_busy():
                logger.debug(f"PygameTrack {self.path}: reached the end")
                self._state = TrackState.STOPPED
                self._position = 0.0
        return self._state == TrackState.PLAYING

    def dispose(self) -> None:
        if self.owns_stream:
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
            self._backend.detach(self)
        self._state = TrackState.DISPOSED
        logger.debug(f"PygameTrack {self.path}: disposed")

    def _start_stream(self, start: float) -> None:
        loops = -1 if self._looping else 0
        try:
            pygame.mixer.music.play(loops=loops, start=start)
        except pygame.error as e:
            raise BackendError(str(e), self.path) from e
        pygame.mixer.music.set_volume(self._volume)
        self._stream_offset = start
        self._restart_pending = False


class PygameBackend(IAudioBackend):
    """Audio backend built on ``pygame.mixer``."""

    def __init__(self, config: Optional[BackendConfig] = None):
        self._config = config or BackendConfig()
        self._active: Optional[PygameTrack] = None

    @property
    def active_track(self) -> Optional[PygameTrack]:
        """Track currently loaded into the music stream."""
        return self._active

    def initialize(self) -> None:
        """Initialize the mixer unless something else already did."""
        if pygame.mixer.get_init():
            return
        pygame.mixer.init(
            frequency=self._config.frequency,
            channels=self._config.channels,
            buffer=self._config.buffer,
        )
        logger.info(
            f"pygame mixer initialized ({self._config.frequency} Hz, "
            f"{self._config.channels} channels)"
        )

    def create_track(self, path: str) -> ITrack:
        """
        Create a track for a file under the asset root.

        Args:
            path: Track path, relative to ``BackendConfig.asset_root``.

        Returns:
            PygameTrack in the stopped state.

        Raises:
            FileNotFoundError: If the resolved file does not exist.
        """
        resolved = resolve_asset_path(self._config.asset_root, path)
        if not resolved.is_file():
            raise FileNotFoundError(f"Track file not found: {resolved}")
        self.initialize()
        logger.debug(f"Created PygameTrack for {resolved}")
        return PygameTrack(self, str(resolved))

    def attach(self, track: PygameTrack) -> None:
        """Load a track's file into the music stream."""
        if self._active is track:
            return
        if self._active is not None:
            self._active.stop()
        try:
            pygame.mixer.music.load(track.path)
        except pygame.error as e:
            raise BackendError(str(e), track.path) from e
        self._active = track

    def detach(self, track: PygameTrack) -> None:
        if self._active is track:
            self._active = None

    def shutdown(self) -> None:
        """Stop the stream and close the mixer."""
        if not pygame.mixer.get_init():
            return
        pygame.mixer.music.stop()
        self._active = None
        pygame.mixer.quit()
        logger.info("pygame mixer shut down")
