"""Decode raw PCM16 speech payloads into normalized float audio buffers."""

from __future__ import annotations

import base64
import binascii
import io
import wave
from dataclasses import dataclass, field

import numpy as np

PCM16_SCALE = 32768.0


class AudioDecodeError(ValueError):
    """Raised when a payload cannot be decoded into PCM16 samples."""


@dataclass
class AudioBuffer:
    """Per-channel float samples in ``[-1.0, 1.0)``."""

    number_of_channels: int
    length: int
    sample_rate: int
    channels: np.ndarray = field(repr=False)

    @classmethod
    def empty(cls, number_of_channels: int, length: int, sample_rate: int) -> "AudioBuffer":
        if number_of_channels < 1:
            raise AudioDecodeError("An audio buffer needs at least one channel.")
        if sample_rate <= 0:
            raise AudioDecodeError("Sample rate must be positive.")
        data = np.zeros((number_of_channels, max(0, length)), dtype=np.float32)
        return cls(number_of_channels, max(0, length), sample_rate, data)

    @property
    def duration(self) -> float:
        return self.length / self.sample_rate

    def get_channel_data(self, channel: int) -> np.ndarray:
        """Return a writable view of one channel."""
        return self.channels[channel]

    def to_wav_bytes(self) -> bytes:
        interleaved = self.channels.T.reshape(-1)
        with io.BytesIO() as buffer:
            with wave.open(buffer, "wb") as wave_file:
                wave_file.setnchannels(self.number_of_channels)
                wave_file.setsampwidth(2)
                wave_file.setframerate(self.sample_rate)
                wave_file.writeframes(encode_pcm16(interleaved))
            return buffer.getvalue()


class AudioContext:
    """Playback context that owns buffer creation for one session."""

    def __init__(self, sample_rate: int = 24000) -> None:
        self.sample_rate = sample_rate
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def create_buffer(self, number_of_channels: int, length: int, sample_rate: int) -> AudioBuffer:
        if self._closed:
            raise RuntimeError("Audio context has been closed.")
        return AudioBuffer.empty(number_of_channels, length, sample_rate)

    def close(self) -> None:
        self._closed = True


class AudioContextProvider:
    """Create the shared audio context on first use and dispose it on shutdown."""

    def __init__(self, sample_rate: int = 24000) -> None:
        self._sample_rate = sample_rate
        self._context: AudioContext | None = None

    @property
    def created(self) -> bool:
        return self._context is not None

    def get(self) -> AudioContext:
        if self._context is None:
            self._context = AudioContext(sample_rate=self._sample_rate)
        return self._context

    def dispose(self) -> None:
        if self._context is not None:
            self._context.close()
            self._context = None


def decode_base64(payload: str) -> bytes:
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise AudioDecodeError(f"Audio payload is not valid base64: {exc}") from exc


def decode_audio_data(
    data: bytes,
    ctx: AudioContext,
    sample_rate: int,
    num_channels: int,
) -> AudioBuffer:
    """Turn little-endian PCM16 bytes into a de-interleaved float buffer.

    Sample ``i`` belongs to channel ``i % num_channels``. Samples that do not
    fill a whole frame are dropped.
    """

    if num_channels < 1:
        raise AudioDecodeError("Channel count must be at least 1.")
    if len(data) % 2:
        raise AudioDecodeError("PCM16 payload has an odd number of bytes.")

    samples = np.frombuffer(data, dtype="<i2")
    frame_count = samples.size // num_channels
    buffer = ctx.create_buffer(num_channels, frame_count, sample_rate)

    frames = samples[: frame_count * num_channels].reshape(frame_count, num_channels)
    for channel in range(num_channels):
        buffer.get_channel_data(channel)[:] = frames[:, channel].astype(np.float32) / PCM16_SCALE
    return buffer


def encode_pcm16(samples: np.ndarray) -> bytes:
    """Quantize float samples to little-endian PCM16 bytes."""
    scaled = np.round(np.asarray(samples, dtype=np.float64) * PCM16_SCALE)
    return np.clip(scaled, -32768, 32767).astype("<i2").tobytes()


def decode_base64_audio(
    payload: str,
    ctx: AudioContext,
    sample_rate: int,
    num_channels: int,
) -> AudioBuffer:
    return decode_audio_data(decode_base64(payload), ctx, sample_rate, num_channels)


__all__ = [
    "AudioBuffer",
    "AudioContext",
    "AudioContextProvider",
    "AudioDecodeError",
    "decode_audio_data",
    "decode_base64",
    "decode_base64_audio",
    "encode_pcm16",
]
