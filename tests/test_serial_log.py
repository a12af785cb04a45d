from pocketgb.serial_log import SerialLog


def _feed(log, text):
    for ch in text.encode("latin-1"):
        log.on_serial_data(ch)


def test_text_mode_logs_complete_lines():
    log = SerialLog(clock=lambda: 3.0)
    _feed(log, "Passed\nPart")
    assert list(log.lines()) == ["[3] - Passed"]


def test_text_mode_waits_for_newline():
    log = SerialLog(clock=lambda: 1.0)
    _feed(log, "abc")
    assert list(log.lines()) == []
    _feed(log, "\n")
    assert list(log.lines()) == ["[1] - abc"]


def test_raw_mode_flushes_pending_text_then_hex():
    log = SerialLog(clock=lambda: 2.0)
    _feed(log, "hi")
    log.raw_output = True
    log.on_serial_data(0x41)
    assert list(log.lines()) == ["[2] - hi", "[2] - 0x41"]


def test_add_log_and_clear():
    log = SerialLog(clock=lambda: 0.0)
    log.add_log("one\ntwo\n")
    log.add_log("three")
    assert list(log.lines()) == ["one", "two", "three"]
    log.clear()
    assert log.text == ""
    assert list(log.lines()) == []


def test_filter_includes_and_excludes():
    log = SerialLog(clock=lambda: 0.0)
    log.add_log("Passed\nFailed #3\nrunning tests\n")
    assert list(log.lines("passed, failed")) == ["Passed", "Failed #3"]
    assert list(log.lines("-failed")) == ["Passed", "running tests"]
    assert list(log.lines("")) == ["Passed", "Failed #3", "running tests"]


def test_filter_exclusion_wins():
    log = SerialLog(clock=lambda: 0.0)
    log.add_log("Failed #3\nFailed\n")
    assert list(log.lines("failed,-#3")) == ["Failed"]


def test_default_clock_timestamps_are_small():
    log = SerialLog()
    _feed(log, "x\n")
    (line,) = log.lines()
    assert line.endswith("] - x")
    assert line.startswith("[0]")