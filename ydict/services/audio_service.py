"""Service for playing pronunciation audio."""

import io
import logging
import threading

import numpy as np
import requests
from pydub import AudioSegment

from ydict.config import YDictConfig
from ydict.exceptions import AudioPlaybackError

logger = logging.getLogger(__name__)


class AudioService:
    """Fetch, decode and play MP3 pronunciation audio (stateless service)."""

    def __init__(self, config: YDictConfig):
        """Initialize the audio service.

        Args:
            config: Configuration holding fetch and wait timeouts
        """
        self.config = config

    def fetch(self, url: str) -> bytes:
        """Download the audio file.

        Raises:
            AudioPlaybackError: On transport failure or non-200 status
        """
        try:
            response = requests.get(url, timeout=self.config.audio_fetch_timeout)
        except requests.RequestException as e:
            raise AudioPlaybackError(f"Cannot fetch audio from {url}: {e}") from e

        if response.status_code != 200:
            raise AudioPlaybackError(
                f"Audio request got an unexpected status code {response.status_code}"
            )
        return response.content

    @staticmethod
    def decode(data: bytes) -> AudioSegment:
        """Decode MP3 bytes.

        Raises:
            AudioPlaybackError: If the data cannot be decoded
        """
        try:
            return AudioSegment.from_file(io.BytesIO(data), format="mp3")
        except Exception as e:
            raise AudioPlaybackError(f"Cannot decode audio: {e}") from e

    @staticmethod
    def stream(segment: AudioSegment) -> None:
        """Play a decoded segment on the default output device and block until done.

        Raises:
            AudioPlaybackError: If the output device fails
        """
        try:
            # PortAudio is loaded on import
            import sounddevice as sd

            samples = np.array(segment.get_array_of_samples())
            if segment.channels > 1:
                samples = samples.reshape((-1, segment.channels))

            sd.play(samples, samplerate=segment.frame_rate)
            sd.wait()
        except Exception as e:
            raise AudioPlaybackError(f"Cannot play audio: {e}") from e

    def play(self, url: str) -> None:
        """Fetch, decode and play audio from a URL.

        Raises:
            AudioPlaybackError: If any step fails
        """
        logger.debug(f"Playing audio from {url}")
        self.stream(self.decode(self.fetch(url)))

    def play_with_timeout(self, url: str, timeout: float | None = None) -> bool:
        """Play audio on a background thread, waiting at most ``timeout`` seconds.

        Whichever comes first wins: playback completion or the timeout. On
        timeout the daemon thread is abandoned and may be cut off when the
        process exits. Playback errors are logged and count as completion.

        Args:
            url: Audio URL
            timeout: Seconds to wait (defaults to config.audio_wait_timeout)

        Returns:
            True if playback finished (or failed) before the timeout
        """
        if timeout is None:
            timeout = self.config.audio_wait_timeout

        done = threading.Event()

        def _run():
            try:
                self.play(url)
            except AudioPlaybackError as e:
                logger.warning(f"Audio playback failed: {e}")
            finally:
                done.set()

        thread = threading.Thread(target=_run, name="ydict-audio", daemon=True)
        thread.start()

        finished = done.wait(timeout)
        if not finished:
            logger.debug(f"Audio playback still running after {timeout}s, not waiting")
        return finished
