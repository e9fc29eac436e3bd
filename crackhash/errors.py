"""Errors raised while preparing or running a cracking session."""

SUPPORTED_ALGORITHMS = ("md5", "sha1", "sha256")


class CrackError(Exception):
    """Base class for every error the cracker reports."""


class UnsupportedAlgorithmError(CrackError):
    """The requested hash algorithm is not one we know."""

    def __init__(self, algorithm):
        self.algorithm = algorithm
        super().__init__(
            f"Unsupported algorithm: '{algorithm}'. "
            f"Supported algorithms: {', '.join(SUPPORTED_ALGORITHMS)}"
        )


class InvalidHashFormatError(CrackError):
    """The target hash has the wrong length or is not hexadecimal."""

    def __init__(self, expected_len, actual_len):
        self.expected_len = expected_len
        self.actual_len = actual_len
        super().__init__(
            f"Invalid hash format. Expected {expected_len} characters, got {actual_len}"
        )


class WordlistNotFoundError(CrackError):
    """The wordlist path does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Wordlist file not found: {path}")


class WordlistReadError(CrackError):
    """The wordlist exists but could not be read."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"I/O error: {cause}")


class EmptyWordlistError(CrackError):
    """The wordlist produced no candidates at all."""

    def __init__(self):
        super().__init__("Wordlist is empty")