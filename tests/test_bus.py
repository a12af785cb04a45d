import pytest

from pocketgb.bus import Bus, RamBus


def test_bus_is_abstract():
    with pytest.raises(TypeError):
        Bus()


def test_ram_starts_zeroed():
    bus = RamBus()
    assert [bus.read8(a) for a in (0x0000, 0x8000, 0xFFFF)] == [0, 0, 0]


def test_write8_read8_round_trip():
    bus = RamBus()
    bus.write8(0xC000, 0x42)
    assert bus.read8(0xC000) == 0x42


def test_write8_keeps_low_byte():
    bus = RamBus()
    bus.write8(0x10, 0x1FF)
    assert bus.read8(0x10) == 0xFF


def test_write16_is_little_endian():
    bus = RamBus()
    bus.write16(0x100, 0xBEEF)
    assert bus.read8(0x100) == 0xEF
    assert bus.read8(0x101) == 0xBE


def test_read16_combines_bytes():
    bus = RamBus()
    bus.write8(0x200, 0x34)
    bus.write8(0x201, 0x12)
    assert bus.read16(0x200) == 0x1234


@pytest.mark.parametrize("value", [0x0000, 0x00FF, 0xFF00, 0xFFFF, 0x1234])
def test_word_round_trip(value):
    bus = RamBus()
    bus.write16(0xFFFE, value)
    assert bus.read16(0xFFFE) == value


def test_word_access_at_last_address_raises():
    bus = RamBus()
    with pytest.raises(ValueError):
        bus.read16(0xFFFF)
    with pytest.raises(ValueError):
        bus.write16(0xFFFF, 0)


@pytest.mark.parametrize("addr", [-1, 0x10000])
def test_byte_access_out_of_range_raises(addr):
    bus = RamBus()
    with pytest.raises(ValueError):
        bus.read8(addr)
    with pytest.raises(ValueError):
        bus.write8(addr, 0)


class _DictBus(Bus):
    def __init__(self):
        self.mem = {}

    def read8(self, addr):
        return self.mem.get(addr, 0)

    def write8(self, addr, val):
        self.mem[addr] = val


def test_custom_bus_uses_word_helpers():
    bus = _DictBus()
    Bus.write16(bus, 0x10, 0xABCD)
    assert bus.mem == {0x10: 0xCD, 0x11: 0xAB}
    assert Bus.read16(bus, 0x10) == 0xABCD