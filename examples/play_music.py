"""Example: Play a music track with pygame."""

import sys
import time
from pathlib import Path

from musicmanager import BackendConfig, TrackRegistry

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python play_music.py <path_to_music_file>")
        sys.exit(1)

    music_path = Path(sys.argv[1])
    if not music_path.exists():
        print(f"Error: File not found: {music_path}")
        sys.exit(1)

    config = BackendConfig(asset_root=str(music_path.parent))

    with TrackRegistry(config=config) as tracks:
        tracks.load("bgm", music_path.name)

        print("Playing...")
        tracks.play("bgm", 0.8)

        try:
            while tracks.is_playing("bgm"):
                print(f"\r{tracks.get_position('bgm'):6.1f}s", end="", flush=True)
                time.sleep(0.1)
            print("\nPlayback completed")
        except KeyboardInterrupt:
            print("\nInterrupted, stopping...")
            tracks.stop("bgm")
    print("Backend shut down")
