"""The RC4 stream cipher."""


class Rc4:
    """RC4 keyed with a 1 to 256 byte key; encryption and decryption are the same."""

    def __init__(self, key: bytes | str) -> None:
        if isinstance(key, str):
            key = key.encode("utf-8")
        key = bytes(key)
        if not 1 <= len(key) <= 256:
            raise ValueError("RC4 key must be between 1 and 256 bytes long")

        state = list(range(256))
        j = 0
        for i in range(256):
            j = (j + state[i] + key[i % len(key)]) & 0xFF
            state[i], state[j] = state[j], state[i]
        self._initial_state = tuple(state)

    def apply_keystream(self, data: bytes) -> bytes:
        """XOR ``data`` with the keystream, starting from the keyed state."""
        state = list(self._initial_state)
        i = j = 0
        output = bytearray()
        for byte in data:
            i = (i + 1) & 0xFF
            j = (j + state[i]) & 0xFF
            state[i], state[j] = state[j], state[i]
            output.append(byte ^ state[(state[i] + state[j]) & 0xFF])
        return bytes(output)

    def encrypt(self, data: bytes | str) -> bytes:
        """Encrypt ``data``."""
        return self.decrypt(data)

    def decrypt(self, data: bytes | str) -> bytes:
        """Decrypt ``data``."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        return self.apply_keystream(data)