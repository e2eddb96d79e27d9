from unittest.mock import patch

from spycity import logger

FIXED_DATE = "Mon Jan  1 00:00:00 2024"


@patch("spycity.logger.time.ctime", return_value=FIXED_DATE)
def test_format_line_applies_arguments(_ctime):
    line = logger.format_line("Info", "Observer %d got event %d", 7, 2)
    assert line == f"{FIXED_DATE} [Info] Observer 7 got event 2"


@patch("spycity.logger.time.ctime", return_value=FIXED_DATE)
def test_format_line_without_arguments_keeps_text(_ctime):
    line = logger.format_line("Tag", "100%")
    assert line == f"{FIXED_DATE} [Tag] 100%"


def test_log_info_prints_one_line(capsys):
    logger.log_info("Memory notifies event %u", 3)
    out = capsys.readouterr().out
    assert out.endswith("[Info] Memory notifies event 3\n")
    assert out.count("\n") == 1


def test_log_error_is_red(capsys):
    logger.log_error("boom %s", "now")
    out = capsys.readouterr().out
    assert out.startswith(logger.RED)
    assert out.endswith(logger.RESET)
    assert "[Error] boom now" in out


def test_log_debug_is_cyan(capsys):
    logger.log_debug("value=%d", 4)
    out = capsys.readouterr().out
    assert out.startswith(logger.CYN)
    assert out.endswith(logger.RESET)
    assert "[Debug] value=4" in out


@patch("spycity.logger.time.ctime", return_value=FIXED_DATE)
def test_coloured_output_uses_ansi_escape_codes(_ctime, capsys):
    logger.log_error("failed")
    error_out = capsys.readouterr().out
    assert error_out == f"\x1b[31m{FIXED_DATE} [Error] failed\n\x1b[0m"

    logger.log_debug("tick")
    debug_out = capsys.readouterr().out
    assert debug_out == f"\x1b[36m{FIXED_DATE} [Debug] tick\n\x1b[0m"