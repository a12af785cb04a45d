"""The APU frame sequencer driving length, sweep and envelope units."""

from __future__ import annotations

from enum import Enum

SUBTICKS_PER_FRAME = 2048


class FrameEvent(Enum):
    """What a frame sequencer step asks the channels to do."""

    NONE = 0
    LENGTH_TIMER = 1
    LENGTH_TIMER_AND_SWEEP = 2
    ENVELOPE = 3


_FRAME_EVENTS = {
    0: FrameEvent.LENGTH_TIMER,
    2: FrameEvent.LENGTH_TIMER_AND_SWEEP,
    4: FrameEvent.LENGTH_TIMER,
    6: FrameEvent.LENGTH_TIMER_AND_SWEEP,
    7: FrameEvent.ENVELOPE,
}


class FrameSequencer:
    """Eight-step sequencer clocked every 2048 machine cycles (512 Hz).

    Length timers tick at 256 Hz, the frequency sweep at 128 Hz and the
    volume envelope at 64 Hz.
    """

    def __init__(self) -> None:
        self._subtick = 0
        self._frame = 0

    def reset(self) -> None:
        """Reset both the subtick counter and the frame counter."""
        self._subtick = 0
        self._frame = 0

    def reset_frame_counter(self) -> None:
        """Restart from frame 0 without touching the subtick counter."""
        self._frame = 0

    def step(self) -> FrameEvent:
        """Advance by one machine cycle and return the event produced."""
        self._subtick += 1
        if self._subtick != SUBTICKS_PER_FRAME:
            return FrameEvent.NONE
        self._subtick = 0
        event = _FRAME_EVENTS.get(self._frame, FrameEvent.NONE)
        self._frame = (self._frame + 1) & 0x07
        return event

    @property
    def current_frame(self) -> int:
        """Index of the next frame to be emitted (0-7)."""
        return self._frame