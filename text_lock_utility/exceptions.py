"""Text Lock Utility exceptions."""

import pathlib


class MalformedContainer(Exception):
    """Container is too short to hold a salt."""


class KeyDerivationFailed(Exception):
    """Could not derive a key from the password and salt."""


class AuthenticationFailed(Exception):
    """Ciphertext did not verify (wrong password or corrupted data)."""


class InvalidEncoding(Exception):
    """Plaintext is not valid UTF-8."""


class RandomSourceUnavailable(Exception):
    """Could not read random bytes from the operating system."""


class NoPassword(Exception):
    """Password prompt was aborted before a password was given."""


class EmptyPassword(Exception):
    """Empty password was given while the policy forbids it."""


class FileAccessFailed(Exception):
    """Base class for failures reading or writing one of the files."""

    def __init__(self, path: pathlib.Path, reason: str = ""):
        """Store the offending path and the underlying reason."""
        super().__init__(f"{path}: {reason}" if reason else str(path))
        self.path = path
        self.reason = reason


class FileReadFailed(FileAccessFailed):
    """Could not read the input file."""


class FileWriteFailed(FileAccessFailed):
    """Could not write the output file."""
