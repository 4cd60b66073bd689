"""Crypt filters of the PDF standard security handler."""

from __future__ import annotations

import hashlib
import os
from abc import ABC, abstractmethod
from typing import ClassVar, Tuple

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import InvalidCipherTextLengthError, InvalidKeyLengthError
from .pkcs5 import pad, unpad
from .rc4 import Rc4

ObjectId = Tuple[int, int]

_BLOCK_SIZE = 16
_AES_SALT = b"sAlT"


def _object_key_suffix(obj_id: ObjectId) -> bytes:
    """Low-order 3 bytes of the object number and 2 of the generation, low byte first."""
    number, generation = obj_id
    return (number & 0xFFFFFF).to_bytes(3, "little") + (generation & 0xFFFF).to_bytes(2, "little")


def _object_key_length(key: bytes) -> int:
    return min(len(key) + 5, 16)


class CryptFilter(ABC):
    """A method of deriving per-object keys and encrypting strings and streams."""

    method: ClassVar[bytes]

    @abstractmethod
    def compute_key(self, key: bytes, obj_id: ObjectId) -> bytes:
        """Derive the key for object ``obj_id`` from the file encryption key."""

    @abstractmethod
    def encrypt(self, key: bytes, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext`` with an object key."""

    @abstractmethod
    def decrypt(self, key: bytes, ciphertext: bytes) -> bytes:
        """Decrypt ``ciphertext`` with an object key."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class IdentityCryptFilter(CryptFilter):
    """Leaves data unchanged."""

    method = b"Identity"

    def compute_key(self, key: bytes, obj_id: ObjectId) -> bytes:
        return bytes(key)

    def encrypt(self, key: bytes, plaintext: bytes) -> bytes:
        return bytes(plaintext)

    def decrypt(self, key: bytes, ciphertext: bytes) -> bytes:
        return bytes(ciphertext)


class Rc4CryptFilter(CryptFilter):
    """RC4 with an MD5-derived per-object key."""

    method = b"V2"

    def compute_key(self, key: bytes, obj_id: ObjectId) -> bytes:
        digest = hashlib.md5(bytes(key) + _object_key_suffix(obj_id)).digest()
        return digest[: _object_key_length(key)]

    def encrypt(self, key: bytes, plaintext: bytes) -> bytes:
        return Rc4(key).encrypt(plaintext)

    def decrypt(self, key: bytes, ciphertext: bytes) -> bytes:
        return Rc4(key).decrypt(ciphertext)


class _AesCbcCryptFilter(CryptFilter):
    """AES-CBC with a random IV prepended and PKCS#5 padding."""

    key_size: ClassVar[int]

    def _check_key(self, key: bytes) -> None:
        if len(key) != self.key_size:
            raise InvalidKeyLengthError()

    def encrypt(self, key: bytes, plaintext: bytes) -> bytes:
        self._check_key(key)
        iv = os.urandom(_BLOCK_SIZE)
        encryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(iv)).encryptor()
        body = encryptor.update(pad(plaintext, _BLOCK_SIZE)) + encryptor.finalize()
        return iv + body

    def decrypt(self, key: bytes, ciphertext: bytes) -> bytes:
        self._check_key(key)
        if len(ciphertext) % _BLOCK_SIZE:
            raise InvalidCipherTextLengthError()
        if len(ciphertext) <= _BLOCK_SIZE:
            return b""
        iv, body = ciphertext[:_BLOCK_SIZE], ciphertext[_BLOCK_SIZE:]
        decryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(bytes(iv))).decryptor()
        padded = decryptor.update(bytes(body)) + decryptor.finalize()
        return unpad(padded, _BLOCK_SIZE)


class Aes128CryptFilter(_AesCbcCryptFilter):
    """AES-128 with an MD5-derived, salted per-object key."""

    method = b"AESV2"
    key_size = 16

    def compute_key(self, key: bytes, obj_id: ObjectId) -> bytes:
        material = bytes(key) + _object_key_suffix(obj_id) + _AES_SALT
        return hashlib.md5(material).digest()[: _object_key_length(key)]


class Aes256CryptFilter(_AesCbcCryptFilter):
    """AES-256 using the file encryption key directly."""

    method = b"AESV3"
    key_size = 32

    def compute_key(self, key: bytes, obj_id: ObjectId) -> bytes:
        return bytes(key)