"""
Adapter pattern: an advanced media player behind the simple player interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from utils.logging_config import get_logger

logger = get_logger(__name__)


class MediaPlayer(ABC):
    """Target interface used by the client."""

    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> str:
        pass


class AdvancedMediaPlayer:
    """Adaptee with a different, format-specific interface."""

    def play_vlc(self, file_name: str) -> str:
        return f"Playing vlc file: {file_name}"

    def play_mp4(self, file_name: str) -> str:
        return f"Playing mp4 file: {file_name}"


class MediaAdapter(MediaPlayer):
    """Translates ``play(type, name)`` into the adaptee's per-format calls."""

    def __init__(self, player: Optional[AdvancedMediaPlayer] = None):
        self.player = player or AdvancedMediaPlayer()
        self._handlers = {
            'vlc': self.player.play_vlc,
            'mp4': self.player.play_mp4,
        }

    @property
    def supported_types(self) -> List[str]:
        return sorted(self._handlers)

    def play(self, audio_type: str, file_name: str) -> str:
        handler = self._handlers.get(audio_type.lower())
        if handler is None:
            logger.warning(f"Unsupported media type '{audio_type}' for {file_name}")
            return f"Unsupported media type: {audio_type}"
        return handler(file_name)


def main():
    print("Client: I can work just fine with the MediaPlayer objects:")
    media_player: MediaPlayer = MediaAdapter()
    print(media_player.play("vlc", "movie.vlc"))
    print(media_player.play("mp4", "movie.mp4"))


if __name__ == "__main__":
    main()
