"""Terminal output for cracking sessions."""

from termcolor import colored

_VERSION = "0.1.0"
_BANNER_WIDTH = 25
_RULE = "-" * 32


def _paint(text, color, *, bold=False, on_color=None):
    return colored(text, color, on_color, attrs=["bold"] if bold else None)


def format_duration(seconds):
    """Render a duration with two decimals in the largest fitting unit."""
    total_nanos = max(0, round(seconds * 1_000_000_000))
    secs, nanos = divmod(total_nanos, 1_000_000_000)
    if secs > 0:
        whole, frac, scale, unit = secs, nanos, 1_000_000_000, "s"
    elif nanos >= 1_000_000:
        whole, frac = divmod(nanos, 1_000_000)
        scale, unit = 1_000_000, "ms"
    elif nanos >= 1_000:
        whole, frac = divmod(nanos, 1_000)
        scale, unit = 1_000, "µs"
    else:
        whole, frac, scale, unit = nanos, 0, 1, "ns"

    hundredths, remainder = divmod(frac * 100, scale)
    if remainder * 2 >= scale and remainder:
        hundredths += 1
    if hundredths >= 100:
        whole += 1
        hundredths -= 100
    return f"{whole}.{hundredths:02d}{unit}"


def format_rate(attempts, seconds):
    """Render hashes per second without decimals."""
    if seconds == 0:
        return "NaN" if attempts == 0 else "inf"
    return f"{attempts / seconds:.0f}"


def print_banner():
    """Print the program title and its underline."""
    title = _paint(f"🔓 Crack Hash v{_VERSION} 🔓", "light_yellow", bold=True)
    underline = _paint("═" * _BANNER_WIDTH, "light_yellow")
    print(f"{title}\n{underline}\n")


def print_start_info(algorithm, target_hash):
    """Announce the algorithm and the hash being attacked."""
    print(_paint("STARTING HASH CRACKING...", "white", bold=True))
    print()
    print(f"Algorithm: {_paint(algorithm, 'white', bold=True)}")
    print(f"Target: {_paint(target_hash, 'white', bold=True)}")
    print()


def print_progress(attempts):
    """Overwrite the current line with the number of attempts so far."""
    count = _paint(str(attempts), "white", bold=True)
    message = _paint(f"🔍 Tried {count} passwords...", "light_cyan")
    print(f"\r{message}", end="", flush=True)


def print_success(password, attempts, elapsed):
    """Report a recovered password with attempt count, time and rate."""
    print()
    print(_paint("PASSWORD FOUND!", "light_green", bold=True, on_color="on_black"))

    bar = "=" * ((len(password.encode("utf-8")) + 15 + 10) // 2)
    print(_paint(bar, "white"))
    print(f"PASSWORD: {_paint(password, 'light_yellow', bold=True)}    ")
    print(_paint(bar, "white"))
    print()

    print(_paint(_RULE, "white", bold=True))
    print(f"Attempts: {_paint(str(attempts), 'white', bold=True)}")
    print(_paint(f"Time: {format_duration(elapsed)}", "white"))
    print(_paint(f"Rate: {format_rate(attempts, elapsed)} h/s", "white"))
    print(_paint(_RULE, "white", bold=True))


def print_failure(attempts, elapsed):
    """Report an exhausted wordlist with attempt count, time and rate."""
    print()
    print(_paint("❌ PASSWORD NOT FOUND", "light_red", bold=True))
    print()
    print(f"Total attempts: {_paint(str(attempts), 'white', bold=True)}")
    print(_paint(f"Time elapsed: {format_duration(elapsed)}", "white"))
    print(_paint(f"Hash rate: {format_rate(attempts, elapsed)} h/s", "white"))
    print()
    print(
        _paint(
            "💡 Try a different wordlist or check if the hash is correct.",
            "light_yellow",
        )
    )


def print_error(message):
    """Print an error message in red."""
    print()
    print(_paint("ERROR", "light_red", bold=True))
    print(_paint(str(message), "light_red"))
    print()