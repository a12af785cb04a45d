"""Turns APU samples into audio buffers for a playback device.

The APU produces samples at a rate that is not exactly the device rate,
so the buffered samples are resampled to the number of frames the device
asks for.
"""

from __future__ import annotations

import contextlib
import struct
import threading
import wave
from collections import deque
from pathlib import Path
from typing import Deque, List, Optional, Sequence, Tuple, Union

SAMPLE_RATE = 44100
CHANNELS = 2
RING_BUFFER_FRAMES = SAMPLE_RATE * 5  # 5 seconds of audio
DEFAULT_RESAMPLING_RATIO = 1.00456238751
DEFAULT_SYNTH_FILE = "audio-synth.wav"
DEFAULT_PLAYED_FILE = "audio-played.wav"

Frame = Tuple[float, float]
_SILENCE: Frame = (0.0, 0.0)


def _resample(frames: Sequence[Frame], n_out: int) -> List[Frame]:
    """Linearly resample ``frames`` into ``n_out`` frames."""
    n_in = len(frames)
    if n_in == 0:
        return [_SILENCE] * n_out
    step = n_in / n_out if n_out else 0.0
    out: List[Frame] = []
    for i in range(n_out):
        pos = i * step
        j = int(pos)
        t = pos - j
        l0, r0 = frames[j]
        l1, r1 = frames[min(j + 1, n_in - 1)]
        out.append((l0 + (l1 - l0) * t, r0 + (r1 - r0) * t))
    return out


def _open_wav(path: Union[str, Path]) -> wave.Wave_write:
    writer = wave.open(str(path), "wb")
    writer.setnchannels(CHANNELS)
    writer.setsampwidth(2)
    writer.setframerate(SAMPLE_RATE)
    return writer


def _write_wav_frames(writer: wave.Wave_write, frames: Sequence[Frame]) -> None:
    values = []
    for left, right in frames:
        for sample in (left, right):
            clamped = min(max(sample, -1.0), 1.0)
            values.append(int(round(clamped * 32767)))
    writer.writeframes(struct.pack(f"<{len(values)}h", *values))


class AudioHandler:
    """Buffers stereo samples from the emulator and renders device buffers.

    A positive ``resampling_ratio`` is the number of emulator frames that
    make up one device frame; a negative ratio means unbound emulation
    speed, where everything buffered is squeezed into each request.
    """

    def __init__(self, resampling_ratio: float = DEFAULT_RESAMPLING_RATIO) -> None:
        self.resampling_ratio = resampling_ratio
        self._volume = 1.0
        self._lock = threading.Lock()
        self._ring: Deque[Frame] = deque()
        self._pending: List[Frame] = []
        self._error_comp = 0.0
        self._synth_writer: Optional[wave.Wave_write] = None
        self._played_writer: Optional[wave.Wave_write] = None

    @property
    def volume(self) -> float:
        return self._volume

    def set_volume(self, vol: float) -> None:
        """Set the output volume, clamped to the range 0-1."""
        self._volume = min(max(float(vol), 0.0), 1.0)

    @property
    def available_frames(self) -> int:
        """Frames waiting in the ring buffer."""
        with self._lock:
            return len(self._ring)

    def on_audio_sample_ready(self, left: float, right: float) -> None:
        """Queue one stereo frame; dropped when the ring buffer is full."""
        with self._lock:
            if len(self._ring) < RING_BUFFER_FRAMES:
                self._ring.append((left, right))

    def _take(self, count: int) -> List[Frame]:
        with self._lock:
            count = min(count, len(self._ring))
            return [self._ring.popleft() for _ in range(count)]

    def render(self, requested_frames: int) -> List[Frame]:
        """Produce ``requested_frames`` stereo frames for the playback device."""
        if requested_frames < 0:
            raise ValueError(f"requested_frames must not be negative, got {requested_frames}")
        ratio = self.resampling_ratio
        if ratio < 0:
            return self._render_unbound(requested_frames)
        return self._render_fixed_rate(requested_frames, ratio)

    def _render_fixed_rate(self, requested_frames: int, ratio: float) -> List[Frame]:
        # the fractional part of the needed frames accumulates until it
        # amounts to one extra frame
        f_needed = requested_frames * ratio
        needed = int(f_needed)
        self._error_comp += f_needed - needed
        if self._error_comp >= 1.0:
            needed += 1
            self._error_comp -= 1.0

        if len(self._pending) < needed:
            self._pending.extend(self._take(needed - len(self._pending)))

        if len(self._pending) < needed:
            # not enough frames yet: keep what we have and stay silent
            return [_SILENCE] * requested_frames

        frames = self._pending[:needed]
        del self._pending[:needed]

        out = _resample(frames, requested_frames)
        if self._synth_writer is not None:
            _write_wav_frames(self._synth_writer, frames)
        if self._played_writer is not None:
            _write_wav_frames(self._played_writer, out)
        return self._apply_volume(out)

    def _render_unbound(self, requested_frames: int) -> List[Frame]:
        frames = self._take(RING_BUFFER_FRAMES)
        return self._apply_volume(_resample(frames, requested_frames))

    def _apply_volume(self, frames: List[Frame]) -> List[Frame]:
        vol = self._volume
        return [(left * vol, right * vol) for left, right in frames]

    def enable_synthesized_file_output(self, path: Union[str, Path] = DEFAULT_SYNTH_FILE) -> None:
        """Record the frames taken from the emulator to a WAV file."""
        if self._synth_writer is None:
            with contextlib.suppress(OSError):
                self._synth_writer = _open_wav(path)

    def enable_played_file_output(self, path: Union[str, Path] = DEFAULT_PLAYED_FILE) -> None:
        """Record the resampled frames sent to the device to a WAV file."""
        if self._played_writer is None:
            with contextlib.suppress(OSError):
                self._played_writer = _open_wav(path)

    @property
    def synthesized_file_output_enabled(self) -> bool:
        return self._synth_writer is not None

    @property
    def played_file_output_enabled(self) -> bool:
        return self._played_writer is not None

    def close(self) -> None:
        """Finish and close any WAV files being written."""
        for writer in (self._synth_writer, self._played_writer):
            if writer is not None:
                writer.close()
        self._synth_writer = None
        self._played_writer = None

    def __enter__(self) -> "AudioHandler":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()