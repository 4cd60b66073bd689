"""Errors raised while encrypting or decrypting PDF objects."""


class DecryptionError(Exception):
    """Base class for failures of the PDF security handler."""

    default_message = "the object could not be encrypted or decrypted"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InvalidKeyLengthError(DecryptionError):
    """The key does not have the length the algorithm requires."""

    default_message = "invalid key length"


class InvalidCipherTextLengthError(DecryptionError):
    """The ciphertext is not a whole number of cipher blocks."""

    default_message = "invalid ciphertext length"


class PaddingError(DecryptionError):
    """The padding found after decryption is malformed."""

    default_message = "invalid padding encountered when decrypting, key might be incorrect"