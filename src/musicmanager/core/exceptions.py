"""Exception classes for musicmanager."""


class AudioError(Exception):
    """Base exception for music manager errors."""
    pass


class TrackNotFoundError(AudioError):
    """Raised when an operation names a track that was never loaded."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} not found.")


class BackendError(AudioError):
    """Raised when a backend cannot carry out a track operation."""

    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        if path:
            super().__init__(f"Backend error ({path}): {message}")
        else:
            super().__init__(f"Backend error: {message}")


# Short alias
TrackNotFound = TrackNotFoundError
