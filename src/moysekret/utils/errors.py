"""Error kinds raised by the core.

Causes are chained with ``raise ... from exc`` and rendered top to bottom by
``str()``, e.g. ``Encryption failed while reading user profile: Could not read
profile: [Errno 2] No such file or directory: ...``.
"""


class SekretError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if self.__cause__ is None:
            return self.message
        return f"{self.message}: {self.__cause__}"

    def rewrap(self, message: str) -> "SekretError":
        """Outer error of the same kind; raise it ``from self``."""
        return type(self)(message)


class AlreadyExists(SekretError):
    pass


class NotFound(SekretError):
    pass


class Corrupt(SekretError):
    pass


class MalformedEnvelope(Corrupt):
    pass


class DecodeError(SekretError):
    pass


class AuthenticationFailed(SekretError):
    pass


class PersistenceError(SekretError):
    pass


class StorageCreationFailed(PersistenceError):
    pass


class PathExpansionFailed(SekretError):
    pass


class AlreadyEncrypted(SekretError):
    pass


class NotAnEnvelope(SekretError):
    pass


class InvalidProfileName(SekretError):
    pass
