# pocketgb

`pocketgb` is a set of building blocks for a Game Boy (DMG) emulator. It
covers the timing and buffering parts of the audio path, a memory bus
abstraction, and the settings and serial log that an emulator front end
keeps. It has no dependencies outside the standard library.

## Modules

- **`pocketgb.sequencer`**
  - `FrameSequencer` is the APU's eight-step frame sequencer. Call
    `step()` once per machine cycle. Every 2048 calls it returns a
    `FrameEvent`: `LENGTH_TIMER` on frames 0 and 4,
    `LENGTH_TIMER_AND_SWEEP` on frames 2 and 6, and `ENVELOPE` on
    frame 7. Every other call returns `FrameEvent.NONE`.
  - `current_frame` gives the index of the next frame.
  - `reset()` clears both counters. `reset_frame_counter()` clears only
    the frame index.
- **`pocketgb.filter`**
  - `HighPassFilter` is a second-order biquad high pass filter with
    Q = 1/√2.
  - It passes samples through unchanged until `set_cutoff(fc, fs)` is
    called.
  - `process(x)` filters one sample.
- **`pocketgb.ringbuffer`**
  - `RingBuffer(size, default)` is a circular buffer. Its size must be a
    power of two; any other size raises `ValueError`.
  - `write()` overwrites the oldest value.
  - `snapshot(count)` returns values starting from the oldest one. With
    no count it returns the whole buffer.
- **`pocketgb.bus`**
  - `Bus` is an abstract byte-addressed bus. Subclasses provide `read8`
    and `write8`.
  - `read16` and `write16` are little endian. They raise `ValueError`
    above address `0xFFFE`.
  - `RamBus` is a flat 64 KiB RAM bus. It masks written values to a byte
    and raises `ValueError` for addresses outside `0x0000`–`0xFFFF`.
- **`pocketgb.audio`**
  - `AudioHandler` buffers stereo samples from the emulator
    (`on_audio_sample_ready(left, right)`) and renders device buffers.
  - `render(n)` returns `n` `(left, right)` tuples with volume applied.
  - With a positive `resampling_ratio`, each request takes
    `n * ratio` buffered frames and resamples them linearly. The
    fractional part carries over between calls. If too few frames are
    buffered, the frames are kept and silence is returned.
  - With a negative ratio (unbound speed), everything buffered is
    squeezed into the request.
  - `set_volume()` clamps the volume to 0–1.
  - `enable_synthesized_file_output()` and `enable_played_file_output()`
    record 16-bit WAV files. `close()` finishes them; the handler is also
    a context manager.
- **`pocketgb.config`**
  - `EmulationSpeed`, `InputFn` and their labels come from
    `emulation_speed_to_str()` and `input_fn_to_str()`.
  - `InputConfig` maps each input function to a key name. The defaults
    are W/A/S/D, N, M, Enter, 0 and P.
  - `AppConfig` holds the front-end settings. `to_dict()` and
    `from_dict()` cover the persisted part: `recentRomsFolder`,
    `recentRomsPath`, `inputCfg` and `audioVolume`.
  - `add_recent_rom()` keeps the ten most recent ROM paths.
- **`pocketgb.serial_log`**
  - `SerialLog` turns serial bytes into lines of the form
    `[<seconds>] - <text>`.
  - In text mode it collects bytes up to a newline. With
    `raw_output = True` it logs every byte as hex.
  - `lines(pattern)` filters the log with comma-separated,
    case-insensitive terms. A term prefixed with `-` excludes lines.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from pocketgb.audio import AudioHandler

with AudioHandler(1.0) as handler:
    for _ in range(441):
        handler.on_audio_sample_ready(0.5, -0.5)
    frames = handler.render(441)   # 441 (left, right) tuples
```

```python
from pocketgb.sequencer import FrameEvent, FrameSequencer

seq = FrameSequencer()
events = [seq.step() for _ in range(2048)]
assert events[-1] is FrameEvent.LENGTH_TIMER
```

## Configuration

```python
from pathlib import Path
from pocketgb.config import AppConfig

cfg = AppConfig.load(Path("appConfig.json"))
cfg.add_recent_rom(Path("roms/game.gb"))
cfg.save(Path("appConfig.json"))
```

If the file is missing or invalid, `AppConfig.load` returns the default
settings. `save` silently ignores a file it cannot write.

## What it does not do

`pocketgb` does not:

- generate sound: it has no square, wave or noise channels and no APU
  mixer that would feed `AudioHandler`;
- emulate a CPU, a picture unit or a cartridge;
- play audio on a device;
- provide a window or a command-line program.

It supplies the pieces listed above for an emulator to build on.