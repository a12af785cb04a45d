"""The 16-bit address bus connecting the CPU to memory-mapped devices."""

from __future__ import annotations

from abc import ABC, abstractmethod

ADDRESS_SPACE = 0x10000
_LAST_WORD_ADDR = ADDRESS_SPACE - 2


def _check_word_addr(addr: int) -> None:
    if not 0 <= addr <= _LAST_WORD_ADDR:
        raise ValueError(f"address 0x{addr:X} cannot hold a 16-bit value")


class Bus(ABC):
    """Byte-addressed bus; 16-bit accesses are little endian."""

    @abstractmethod
    def read8(self, addr: int) -> int:
        """Read one byte."""

    @abstractmethod
    def write8(self, addr: int, val: int) -> None:
        """Write one byte."""

    def read16(self, addr: int) -> int:
        """Read a little endian word: ``addr`` holds the low byte."""
        _check_word_addr(addr)
        return self.read8(addr) | (self.read8(addr + 1) << 8)

    def write16(self, addr: int, val: int) -> None:
        """Write a little endian word: the low byte goes to ``addr``."""
        _check_word_addr(addr)
        self.write8(addr, val & 0xFF)
        self.write8(addr + 1, (val >> 8) & 0xFF)


class RamBus(Bus):
    """Bus backed by a flat 64 KiB RAM, with no devices mapped."""

    def __init__(self) -> None:
        self._ram = bytearray(ADDRESS_SPACE)

    @staticmethod
    def _check_addr(addr: int) -> None:
        if not 0 <= addr < ADDRESS_SPACE:
            raise ValueError(f"address 0x{addr:X} is outside the 16-bit address space")

    def read8(self, addr: int) -> int:
        self._check_addr(addr)
        return self._ram[addr]

    def write8(self, addr: int, val: int) -> None:
        self._check_addr(addr)
        self._ram[addr] = val & 0xFF