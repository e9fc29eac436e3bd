import re

from crackhash import display

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text):
    return _ANSI.sub("", text)


def test_format_duration_seconds():
    assert display.format_duration(1.5) == "1.50s"


def test_format_duration_milliseconds():
    assert display.format_duration(0.25) == "250.00ms"


def test_format_duration_small_units():
    assert display.format_duration(0.000012).endswith("µs")
    assert display.format_duration(0.0000005).endswith("ns")


def test_format_duration_two_decimals():
    for value in (0.0, 0.123456, 3.999999, 42.0):
        rendered = display.format_duration(value)
        number = re.match(r"^(\d+)\.(\d+)", rendered)
        assert number is not None
        assert len(number.group(2)) == 2


def test_format_rate_scales_consistently():
    assert display.format_rate(100, 2.0) == display.format_rate(50, 1.0)
    assert display.format_rate(10, 1.0) == str(10)


def test_format_rate_zero_time():
    assert display.format_rate(5, 0) == "inf"


def test_print_banner(capsys):
    display.print_banner()
    out = _plain(capsys.readouterr().out)
    assert "Crack Hash v0.1.0" in out
    assert out.endswith("\n\n")


def test_print_start_info(capsys):
    display.print_start_info("MD5", "abcdef")
    out = _plain(capsys.readouterr().out)
    assert "STARTING HASH CRACKING..." in out
    assert "Algorithm: MD5\n" in out
    assert "Target: abcdef\n" in out


def test_print_progress(capsys):
    display.print_progress(10000)
    out = _plain(capsys.readouterr().out)
    assert out.startswith("\r")
    assert "Tried 10000 passwords..." in out
    assert not out.endswith("\n")


def test_print_success(capsys):
    password = "password"
    display.print_success(password, 7, 0.5)
    lines = _plain(capsys.readouterr().out).splitlines()
    assert "PASSWORD FOUND!" in lines
    assert "PASSWORD: password    " in lines
    assert "Attempts: 7" in lines
    bars = [line for line in lines if line and set(line) == {"="}]
    assert len(bars) == 2
    assert bars[0] == bars[1]
    assert any(line.startswith("Rate: ") and line.endswith(" h/s") for line in lines)


def test_print_success_bar_grows_with_password(capsys):
    display.print_success("ab", 1, 1.0)
    short = [line for line in capsys.readouterr().out.splitlines() if "==" in line]
    display.print_success("ab" * 10, 1, 1.0)
    long = [line for line in capsys.readouterr().out.splitlines() if "==" in line]
    assert len(_plain(long[0])) > len(_plain(short[0]))


def test_print_failure(capsys):
    display.print_failure(5, 1.0)
    out = _plain(capsys.readouterr().out)
    assert "PASSWORD NOT FOUND" in out
    assert "Total attempts: 5\n" in out
    assert "Time elapsed: " + display.format_duration(1.0) in out
    assert "Hash rate: " + display.format_rate(5, 1.0) + " h/s" in out


def test_print_error(capsys):
    display.print_error("Wordlist is empty")
    lines = _plain(capsys.readouterr().out).splitlines()
    assert lines == ["", "ERROR", "Wordlist is empty", ""]