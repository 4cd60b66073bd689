import pytest

from pdfcrypt.permissions import Permissions

ALL_FLAGS = [
    Permissions.PRINTABLE,
    Permissions.MODIFIABLE,
    Permissions.COPYABLE,
    Permissions.ANNOTABLE,
    Permissions.FILLABLE,
    Permissions.COPYABLE_FOR_ACCESSIBILITY,
    Permissions.ASSEMBLABLE,
    Permissions.PRINTABLE_IN_HIGH_QUALITY,
]


@pytest.mark.parametrize(
    "flag, bit",
    [
        (Permissions.PRINTABLE, 1 << 2),
        (Permissions.MODIFIABLE, 1 << 3),
        (Permissions.COPYABLE, 1 << 4),
        (Permissions.ANNOTABLE, 1 << 5),
        (Permissions.FILLABLE, 1 << 8),
        (Permissions.COPYABLE_FOR_ACCESSIBILITY, 1 << 9),
        (Permissions.ASSEMBLABLE, 1 << 10),
        (Permissions.PRINTABLE_IN_HIGH_QUALITY, 1 << 11),
    ],
)
def test_flag_bits_match_specification(flag, bit):
    assert int(flag) == bit


def test_default_grants_every_permission():
    granted = Permissions.default()
    for flag in ALL_FLAGS:
        assert flag in granted


def test_default_has_no_other_bits():
    combined = 0
    for flag in ALL_FLAGS:
        combined |= int(flag)
    assert int(Permissions.default()) == combined


def test_correct_bits_of_all_permissions():
    assert int(Permissions.default().correct_bits()) == 0xFFFFFFFFFFFFFFFC


def test_correct_bits_of_no_permissions_sets_only_reserved_bits():
    corrected = Permissions(0).correct_bits()
    for flag in ALL_FLAGS:
        assert not int(corrected) & int(flag)
    assert int(corrected) & (0b11 << 6) == 0b11 << 6
    assert int(corrected) & (0xFFFFFFFF << 32) == 0xFFFFFFFF << 32


@pytest.mark.parametrize("flag", ALL_FLAGS)
def test_correct_bits_preserves_granted_flags(flag):
    corrected = Permissions(int(flag)).correct_bits()
    assert int(corrected) & int(flag) == int(flag)
    others = [other for other in ALL_FLAGS if other is not flag]
    assert all(not int(corrected) & int(other) for other in others)


def test_correct_bits_sets_reserved_range_13_to_32():
    granted = Permissions(int(Permissions.PRINTABLE) | int(Permissions.COPYABLE))
    corrected = granted.correct_bits()
    reserved = (0b1111 << 12) | (0xFFFF << 16)
    assert int(corrected) & reserved == reserved


def test_correct_bits_is_idempotent():
    granted = Permissions(int(Permissions.FILLABLE) | int(Permissions.ANNOTABLE))
    once = granted.correct_bits()
    assert int(once.correct_bits()) == int(once)


def test_correct_bits_fits_in_64_bits():
    corrected = Permissions.default().correct_bits()
    assert int(corrected) < 1 << 64
    assert int(corrected) >= 0


def test_correct_bits_returns_permissions():
    corrected = Permissions.MODIFIABLE.correct_bits()
    assert Permissions.MODIFIABLE in corrected
    assert Permissions.PRINTABLE not in corrected