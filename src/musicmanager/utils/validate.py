"""Validation utilities."""

from pathlib import Path


def validate_volume(volume: float) -> float:
    """Validate and clamp volume to [0.0, 1.0]."""
    if volume < 0.0:
        return 0.0
    if volume > 1.0:
        return 1.0
    return volume


def validate_position(position: float) -> float:
    """Clamp a position in seconds to be non-negative."""
    if position < 0.0:
        return 0.0
    return position


def resolve_asset_path(asset_root: str, path: str) -> Path:
    """Resolve a track path against the asset root. Absolute paths win."""
    path_obj = Path(path)
    if path_obj.is_absolute():
        return path_obj
    return Path(asset_root) / path_obj
