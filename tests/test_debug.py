import pytest

from connectfour.debug import debug, DebugLevel, DebugManager


def test_level_from_string():
    assert DebugLevel.from_string("Trace") == DebugLevel.TRACE
    assert DebugLevel.from_string(" info ") == DebugLevel.INFO
    with pytest.raises(ValueError):
        DebugLevel.from_string("loud")


def test_level_filtering():
    debug.configure(level=DebugLevel.INFO)
    assert debug.should_log(DebugLevel.ERROR)
    assert debug.should_log(DebugLevel.INFO)
    assert not debug.should_log(DebugLevel.DEBUG)

    debug.configure(level=DebugLevel.NONE)
    assert not debug.should_log(DebugLevel.ERROR)


def test_component_filtering():
    debug.configure(level=DebugLevel.TRACE, components=["engine"])
    assert debug.should_log(DebugLevel.DEBUG, "engine")
    assert not debug.should_log(DebugLevel.DEBUG, "board")


def test_disabled_manager_logs_nothing():
    debug.configure(level=DebugLevel.TRACE, enabled=False)
    assert not debug.should_log(DebugLevel.ERROR)


def test_log_file_receives_engine_messages(tmp_path, red_first):
    log_file = tmp_path / "connectfour.log"
    debug.configure(level=DebugLevel.TRACE, log_file=str(log_file))

    red_first.restart()
    for col in [3, 0, 3, 0, 3, 0, 3]:
        red_first.drop_disk(col)
    for _ in range(3):
        red_first.drop_disk(0)
    red_first.drop_disk(0)

    text = log_file.read_text()
    assert "[engine] New game" in text
    assert "[engine] Red wins" in text
    assert "TRACE" in text
    assert "after the game ended" in text


def test_timer_round_trip():
    debug.start_timer("unit")
    elapsed = debug.end_timer("unit")
    assert elapsed is not None and elapsed >= 0
    assert debug.end_timer("unit") is None


def test_set_from_string_ignores_unknown_levels():
    debug.configure(level=DebugLevel.ERROR)
    debug.set_from_string("nonsense")
    assert debug.level == DebugLevel.ERROR

    debug.set_from_string("debug")
    assert debug.level == DebugLevel.DEBUG


def test_managers_share_one_console_handler():
    before = len(debug.logger.handlers)
    DebugManager()
    assert len(debug.logger.handlers) == before
