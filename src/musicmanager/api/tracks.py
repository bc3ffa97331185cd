"""TrackRegistry - main public API."""

from typing import Dict, List, Optional
from musicmanager.core.exceptions import TrackNotFoundError
from musicmanager.core.interfaces import IAudioBackend, ITrack
from musicmanager.core.models import BackendConfig
from musicmanager.utils.log import get_logger
from musicmanager.utils.validate import validate_position, validate_volume

logger = get_logger(__name__)


class TrackRegistry:
    """
    Named music tracks on top of an audio backend.

    Maps track names to backend track handles. Every operation except
    load() looks the name up first and raises TrackNotFoundError when it
    is missing.

    Not thread-safe: guard the registry with a lock when sharing it
    between threads.
    """

    def __init__(
        self,
        backend: Optional[IAudioBackend] = None,
        config: Optional[BackendConfig] = None,
    ):
        """
        Initialize TrackRegistry.

        Args:
            backend: Optional backend implementation (default: PygameBackend).
            config: Configuration for the default backend. Ignored when a
                backend is given.
        """
        self._backend = backend
        if self._backend is None:
            # Lazy import so pygame is only needed for the default backend
            from musicmanager.backends.pygame_backend import PygameBackend
            self._backend = PygameBackend(config)

        self._tracks: Dict[str, ITrack] = {}

    @property
    def backend(self) -> IAudioBackend:
        return self._backend

    def load(self, name: str, path: str) -> None:
        """
        Create a track from an audio file and register it under ``name``.

        A track already registered under ``name`` is replaced without
        being disposed.

        Args:
            name: Key that identifies the track.
            path: Track path inside the asset root.

        Raises:
            FileNotFoundError: If the backend cannot find the file.
        """
        track = self._backend.create_track(path)
        if name in self._tracks:
            logger.debug(f"Replacing track {name!r}")
        self._tracks[name] = track
        logger.debug(f"Loaded track {name!r} from {path}")

    def play(self, name: str, volume: float = 1.0) -> None:
        """
        Play a track.

        Args:
            name: Key that identifies the track.
            volume: Volume (0.0 to 1.0). Default: 1.0. Applied even when
                the track is already playing.

        Raises:
            TrackNotFoundError: If no track is registered under ``name``.
        """
        track = self._get(name)
        volume = validate_volume(volume)
        track.set_volume(volume)
        track.play()
        logger.debug(f"Playing track {name!r} at volume {volume}")

    def pause(self, name: str) -> None:
        """Pause a track's playback."""
        self._get(name).pause()
        logger.debug(f"Paused track {name!r}")

    def stop(self, name: str) -> None:
        """Stop a track's playback."""
        self._get(name).stop()
        logger.debug(f"Stopped track {name!r}")

    def loop(self, name: str) -> None:
        """
        Make a track repeat until stop() is called.

        Only sets the looping flag; call play() to start the track.
        """
        self._get(name).set_looping(True)
        logger.debug(f"Looping track {name!r}")

    def is_playing(self, name: str) -> bool:
        return self._get(name).is_playing()

    def is_looping(self, name: str) -> bool:
        return self._get(name).is_looping()

    def get_position(self, name: str) -> float:
        """Get a track's playback position in seconds."""
        return self._get(name).get_position()

    def set_position(self, name: str, position: float) -> None:
        """Set a track's playback position in seconds."""
        self._get(name).set_position(validate_position(position))

    def dispose(self, name: str) -> None:
        """
        Release the resources held by a track.

        The track stays registered under ``name``. Using it after this
        call is up to the backend; most backends refuse to play it.

        Raises:
            TrackNotFoundError: If no track is registered under ``name``.
        """
        self._get(name).dispose()
        logger.debug(f"Disposed track {name!r}")

    def dispose_all(self) -> None:
        """Dispose every registered track. Entries stay registered."""
        for name in self.names():
            self.dispose(name)

    def close(self) -> None:
        """Dispose every track and shut the backend down."""
        self.dispose_all()
        self._backend.shutdown()

    def names(self) -> List[str]:
        """Get the names of all registered tracks."""
        return list(self._tracks.keys())

    def _get(self, name: str) -> ITrack:
        track = self._tracks.get(name)
        if track is None:
            raise TrackNotFoundError(name)
        return track

    def __contains__(self, name: object) -> bool:
        return name in self._tracks

    def __len__(self) -> int:
        return len(self._tracks)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
