"""Game Boy emulator building blocks: frame sequencer, filter, ring buffer, bus, audio resampling, settings and serial log."""

__version__ = "0.1.0"