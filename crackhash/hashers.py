"""Hash algorithms available to the cracker."""

import hashlib


class Hasher:
    """Hashes text with one algorithm and returns lower-case hex."""

    name = ""
    _algorithm = ""

    def hash(self, text):
        return hashlib.new(self._algorithm, text.encode("utf-8")).hexdigest()

    def __repr__(self):
        return f"{type(self).__name__}()"


class Md5Hasher(Hasher):
    """MD5 hasher."""

    name = "MD5"
    _algorithm = "md5"


class Sha1Hasher(Hasher):
    """SHA-1 hasher."""

    name = "SHA1"
    _algorithm = "sha1"


class Sha256Hasher(Hasher):
    """SHA-256 hasher."""

    name = "SHA256"
    _algorithm = "sha256"


_HASHERS = {
    "md5": Md5Hasher,
    "sha1": Sha1Hasher,
    "sha256": Sha256Hasher,
}


def get_hasher(algo):
    """Return a hasher for the case-insensitive algorithm name, or None."""
    factory = _HASHERS.get(algo.lower())
    return factory() if factory is not None else None