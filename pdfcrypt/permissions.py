"""User access permissions of the PDF standard security handler (the /P entry)."""

from __future__ import annotations

import enum
import functools
import operator

# Bits 7-8 and 13-32 are reserved and must be 1.
_RESERVED_LOW = 0b11 << 6
_RESERVED_HIGH = (0b1111 << 12) | (0xFFFF << 16)
# The 32-bit P value is extended to 64 bits by setting the upper half to all 1s.
_SIGN_EXTENSION = 0xFFFFFFFF << 32


class Permissions(enum.IntFlag):
    """Operations a user may perform on an encrypted document."""

    # Print the document; with revision 3 or later possibly only in low quality.
    PRINTABLE = 1 << 2
    # Modify contents by operations not covered by ANNOTABLE, FILLABLE and ASSEMBLABLE.
    MODIFIABLE = 1 << 3
    # Copy or otherwise extract text and graphics.
    COPYABLE = 1 << 4
    # Add or modify annotations and fill in form fields.
    ANNOTABLE = 1 << 5
    # Fill in existing form fields even if ANNOTABLE is clear.
    FILLABLE = 1 << 8
    # Extract content for assistive technology; must always be set since PDF 2.0.
    COPYABLE_FOR_ACCESSIBILITY = 1 << 9
    # Insert, rotate or delete pages and create outlines or thumbnails.
    ASSEMBLABLE = 1 << 10
    # Print at full fidelity (revision 3 or later).
    PRINTABLE_IN_HIGH_QUALITY = 1 << 11

    @classmethod
    def default(cls) -> "Permissions":
        """Every permission granted."""
        return functools.reduce(operator.or_, cls, cls(0))

    def correct_bits(self) -> "Permissions":
        """Return these permissions with the reserved bits set as the format requires."""
        return Permissions(int(self) | _RESERVED_LOW | _RESERVED_HIGH | _SIGN_EXTENSION)