"""PDF security handler primitives: RC4, PKCS#5, crypt filters, permissions, ToUnicode CMaps and text encodings."""

__version__ = "0.1.0"

__all__ = [
    "cmap",
    "crypt_filters",
    "encodings",
    "errors",
    "permissions",
    "pkcs5",
    "rc4",
]