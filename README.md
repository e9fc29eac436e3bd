# crackhash

A small command-line tool that runs a dictionary attack against one target
hash. It supports MD5, SHA-1 and SHA-256 digests.

## Installation

```
pip install .
```

## Usage

```
crack-hash --algo md5 --hash 5d41402abc4b2a76b9719d911017c592 --wordlist words.txt
```

Options:

- `-a`, `--algo`: the hash algorithm, one of `md5`, `sha1` or `sha256`. Case
  does not matter.
- `-H`, `--hash`: the target hash in hexadecimal. Its length must match the
  algorithm: 32 characters for MD5, 40 for SHA-1 and 64 for SHA-256.
- `-w`, `--wordlist`: a text file with one candidate on each line.
- `-V`, `--version`: print the version and exit.

The tool strips surrounding whitespace from each line and hashes what is left
as UTF-8. Lines that are not valid UTF-8 are skipped. A blank line still counts
as a candidate, the empty string. Each result is compared with the target
without regard to case. Progress is printed every 10,000 attempts. On a match
the tool prints the password, the number of attempts, the elapsed time and the
hash rate. When no line matches it prints the attempt count, the time and the
rate.

The exit status is `0` when the password is found. It is `1` in these cases:
the password is not found, the algorithm is unsupported, the hash is malformed,
or the wordlist is missing, unreadable or yields no candidates.

## Library use

```python
from crackhash.hashers import get_hasher
from crackhash.cracker import HashCracker, validate_hash_format

validate_hash_format("sha1", "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d")
cracker = HashCracker(
    get_hasher("sha1"),
    "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d",
    "words.txt",
)
found = cracker.crack()  # the matching word, or None
```

`HashCracker.crack()` prints its progress and result to standard output, in
the same form as the command.

Other pieces:

- `crackhash.hashers`: `Md5Hasher`, `Sha1Hasher` and `Sha256Hasher`. Each has
  a `name` and a `hash(text)` method that returns lower-case hex.
  `get_hasher(algo)` returns one of them for a case-insensitive name, or
  `None` for any other name.
- `crackhash.cracker`: `iter_candidates(path)` yields the trimmed lines of a
  wordlist. `HashCracker.matches(password)` tests a single candidate.
  `CrackingStats` counts attempts and measures elapsed time.
- `crackhash.display`: the functions that print the output.
  `format_duration(seconds)` and `format_rate(attempts, seconds)` produce the
  time and rate strings.
- `crackhash.cli`: `main(argv=None)` runs the command and returns its exit
  status. `build_parser()` returns the argument parser.

Errors are raised as subclasses of `crackhash.errors.CrackError`:

- `UnsupportedAlgorithmError`
- `InvalidHashFormatError`
- `WordlistNotFoundError`
- `WordlistReadError`
- `EmptyWordlistError`

## Limits

Only plain, unsalted digests of whole wordlist lines are tried. The tool does
not generate candidates by brute force or by rules, and it runs on a single
thread.

## Tests

```
pip install .[test]
pytest
```