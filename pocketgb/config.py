"""Application settings: emulation speed, input keys and persisted options."""

from __future__ import annotations

import contextlib
import json
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

MAX_RECENT_ROMS = 10
DEFAULT_AUDIO_VOLUME = 0.8


class EmulationSpeed(IntEnum):
    QUARTER = 0
    HALF = 1
    FULL = 2
    UNBOUND = 3


_SPEED_NAMES = {
    EmulationSpeed.QUARTER: "25%",
    EmulationSpeed.HALF: "50%",
    EmulationSpeed.FULL: "100%",
    EmulationSpeed.UNBOUND: "Unbound",
}


def emulation_speed_to_str(speed: Union[EmulationSpeed, int]) -> str:
    """Human readable label of an emulation speed, "???" if unknown."""
    try:
        return _SPEED_NAMES[EmulationSpeed(speed)]
    except ValueError:
        return "???"


class InputFn(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    A = 4
    B = 5
    START = 6
    SELECT = 7
    PAUSE = 8


def input_fn_to_str(fn: Union[InputFn, int]) -> str:
    """Human readable label of an input function, "unknown" if unknown."""
    try:
        return InputFn(fn).name.capitalize()
    except ValueError:
        return "unknown"


_DEFAULT_KEYS = {
    InputFn.UP: "W",
    InputFn.LEFT: "A",
    InputFn.DOWN: "S",
    InputFn.RIGHT: "D",
    InputFn.A: "N",
    InputFn.B: "M",
    InputFn.START: "Enter",
    InputFn.SELECT: "0",
    InputFn.PAUSE: "P",
}


def _as_input_fn(fn: Union[InputFn, int]) -> InputFn:
    try:
        return InputFn(fn)
    except ValueError:
        raise KeyError(fn) from None


class InputConfig:
    """Keyboard key bound to each input function."""

    def __init__(self) -> None:
        self._keys: Dict[InputFn, str] = dict(_DEFAULT_KEYS)

    def __getitem__(self, fn: Union[InputFn, int]) -> str:
        return self._keys[_as_input_fn(fn)]

    def __setitem__(self, fn: Union[InputFn, int], key: str) -> None:
        self._keys[_as_input_fn(fn)] = key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputConfig):
            return NotImplemented
        return self._keys == other._keys

    def _to_list(self) -> List[str]:
        return [self._keys[fn] for fn in InputFn]

    @classmethod
    def _from_list(cls, keys: Any) -> "InputConfig":
        if not isinstance(keys, list) or len(keys) != len(InputFn):
            raise ValueError(f"inputCfg must list {len(InputFn)} keys")
        if not all(isinstance(k, str) for k in keys):
            raise ValueError("inputCfg keys must be strings")
        cfg = cls()
        for fn, key in zip(InputFn, keys):
            cfg[fn] = key
        return cfg


def _path_to_str(path: Optional[Path]) -> str:
    return "" if path is None else str(path)


def _str_to_path(text: Any) -> Optional[Path]:
    if not isinstance(text, str):
        raise ValueError("paths must be stored as strings")
    return Path(text) if text else None


@dataclass
class AppConfig:
    """Application state; only part of it is persisted between runs."""

    current_rom_path: Optional[Path] = None
    recent_roms_folder: Optional[Path] = None
    recent_roms_path: List[Path] = field(default_factory=list)
    input_cfg: InputConfig = field(default_factory=InputConfig)
    emulation_speed: EmulationSpeed = EmulationSpeed.FULL
    audio_volume: float = DEFAULT_AUDIO_VOLUME
    show_memory_editor: bool = False
    show_tile_viewer: bool = False
    show_background_viewer: bool = False
    show_input_config_window: bool = False
    show_audio_visual: bool = False
    show_serial_log: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """The persisted settings as a JSON-compatible dict."""
        return {
            "recentRomsFolder": _path_to_str(self.recent_roms_folder),
            "recentRomsPath": [str(p) for p in self.recent_roms_path],
            "inputCfg": self.input_cfg._to_list(),
            "audioVolume": self.audio_volume,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppConfig":
        """Build a config from persisted settings; raises ValueError if invalid."""
        try:
            folder = data["recentRomsFolder"]
            recent = data["recentRomsPath"]
            keys = data["inputCfg"]
            volume = data["audioVolume"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"missing configuration entry: {exc}") from exc

        if not isinstance(recent, list):
            raise ValueError("recentRomsPath must be a list")
        recent_paths = []
        for entry in recent:
            if not isinstance(entry, str):
                raise ValueError("recentRomsPath entries must be strings")
            recent_paths.append(Path(entry))
        if isinstance(volume, bool) or not isinstance(volume, (int, float)):
            raise ValueError("audioVolume must be a number")

        return cls(
            recent_roms_folder=_str_to_path(folder),
            recent_roms_path=recent_paths,
            input_cfg=InputConfig._from_list(keys),
            audio_volume=float(volume),
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "AppConfig":
        """Read settings from a JSON file, falling back to defaults on any failure."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            return cls()
        try:
            return cls.from_dict(json.loads(text))
        except ValueError:
            return cls()

    def save(self, path: Union[str, Path]) -> None:
        """Write the persisted settings as JSON; an unwritable file is ignored."""
        with contextlib.suppress(OSError):
            Path(path).write_text(json.dumps(self.to_dict(), indent=4), encoding="utf-8")

    def add_recent_rom(self, path: Union[str, Path]) -> None:
        """Record a successfully loaded ROM as current and most recent."""
        rom = Path(path)
        self.current_rom_path = rom
        self.recent_roms_folder = rom.parent
        self.recent_roms_path.insert(0, rom)
        del self.recent_roms_path[MAX_RECENT_ROMS:]