"""Dictionary attack against a single hash."""

import string
import time
from dataclasses import dataclass, field
from pathlib import Path

from crackhash import display
from crackhash.errors import (
    EmptyWordlistError,
    InvalidHashFormatError,
    UnsupportedAlgorithmError,
    WordlistNotFoundError,
    WordlistReadError,
)

PROGRESS_INTERVAL = 10000

_EXPECTED_LENGTHS = {"md5": 32, "sha1": 40, "sha256": 64}
_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass
class CrackingStats:
    """Counts attempts and measures time since the session began."""

    attempts: int = 0
    start_time: float = field(default_factory=time.perf_counter)

    def increment(self):
        self.attempts += 1

    def should_show_progress(self):
        return self.attempts % PROGRESS_INTERVAL == 0

    def elapsed(self):
        """Seconds since the stats were created."""
        return time.perf_counter() - self.start_time


def iter_candidates(path):
    """Yield trimmed lines of a wordlist, skipping lines that are not UTF-8."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise WordlistReadError(exc) from exc
    with handle:
        for raw in handle:
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
            yield line.strip()


def validate_hash_format(algorithm, hash_value):
    """Raise if hash_value is not a hex digest of the right size for algorithm."""
    expected_len = _EXPECTED_LENGTHS.get(algorithm.lower())
    if expected_len is None:
        raise UnsupportedAlgorithmError(algorithm)
    actual_len = len(hash_value.encode("utf-8"))
    if actual_len != expected_len or not set(hash_value) <= _HEX_DIGITS:
        raise InvalidHashFormatError(expected_len, actual_len)


class HashCracker:
    """Tries every word of a wordlist against a target hash."""

    def __init__(self, hasher, target_hash, wordlist_path):
        self.hasher = hasher
        self.target_hash = target_hash
        self.wordlist_path = Path(wordlist_path)

    def crack(self):
        """Return the matching password, or None if the wordlist has none."""
        if not self.wordlist_path.exists():
            raise WordlistNotFoundError(str(self.wordlist_path))

        display.print_start_info(self.hasher.name, self.target_hash)

        stats = CrackingStats()
        for password in iter_candidates(self.wordlist_path):
            stats.increment()
            if stats.should_show_progress():
                display.print_progress(stats.attempts)
            if self.matches(password):
                display.print_success(password, stats.attempts, stats.elapsed())
                return password

        if stats.attempts == 0:
            raise EmptyWordlistError()
        display.print_failure(stats.attempts, stats.elapsed())
        return None

    def matches(self, password):
        """True if password hashes to the target, ignoring hex case."""
        return self.hasher.hash(password).lower() == self.target_hash.lower()