"""Protocol interfaces for audio backend abstraction."""

from typing import Protocol


class ITrack(Protocol):
    """Interface for a music track handle."""

    def play(self) -> None:
        """Start or resume playback."""
        ...

    def pause(self) -> None:
        """Pause playback (can be resumed with play)."""
        ...

    def stop(self) -> None:
        """Stop playback and rewind."""
        ...

    def get_volume(self) -> float:
        """Get volume (0.0 to 1.0)."""
        ...

    def set_volume(self, volume: float) -> None:
        """Set volume (0.0 to 1.0)."""
        ...

    def is_looping(self) -> bool:
        """Whether playback repeats when it reaches the end."""
        ...

    def set_looping(self, looping: bool) -> None:
        """Set the looping flag."""
        ...

    def get_position(self) -> float:
        """Get playback position in seconds."""
        ...

    def set_position(self, position: float) -> None:
        """Set playback position in seconds."""
        ...

    def is_playing(self) -> bool:
        """Whether the track is currently playing."""
        ...

    def dispose(self) -> None:
        """Release the resources held by this track."""
        ...


class IAudioBackend(Protocol):
    """Interface for audio backend implementation."""

    def initialize(self) -> None:
        """Initialize the backend. Safe to call more than once."""
        ...

    def create_track(self, path: str) -> ITrack:
        """
        Create a track handle for an audio file.

        Args:
            path: Track path, relative to the backend's asset root.

        Returns:
            A stopped, non-looping track.

        Raises:
            FileNotFoundError: If the backend cannot find the file.
        """
        ...

    def shutdown(self) -> None:
        """Shutdown the backend and free all resources."""
        ...
