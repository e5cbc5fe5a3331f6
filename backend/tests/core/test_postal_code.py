"""Postal Code: tests for CEP validation and normalization.

Tests cover:
    - 8 contiguous digits normalize to DDDDD-DDD
    - DDDDD-DDD is returned unchanged (normalization is idempotent)
    - Surrounding whitespace is trimmed
    - Every other shape is rejected, including empty and whitespace-only input
    - Instances are immutable
"""

import dataclasses

import pytest

from app.core.errors import CODE_INVALID_FORMAT, ErrorCategory, InvalidFormatError
from app.core.postal_code import PostalCode


# ─── Accepted shapes ─────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    ("12345678", "12345-678"),
    ("01001000", "01001-000"),
    ("00000000", "00000-000"),
])
def test_eight_digits_normalized_with_dash(raw, expected):
    assert PostalCode(raw).value == expected


@pytest.mark.parametrize("raw", ["12345-678", "01001-000", "99999-999"])
def test_dashed_form_returned_unchanged(raw):
    assert PostalCode(raw).value == raw


def test_normalization_is_idempotent():
    once = PostalCode("12345678")
    twice = PostalCode(once.value)
    assert once == twice


@pytest.mark.parametrize("raw", ["  12345678", "12345-678 ", "\t01001000\n"])
def test_surrounding_whitespace_trimmed(raw):
    assert PostalCode(raw).value in ("12345-678", "01001-000")


def test_str_is_canonical_value():
    assert str(PostalCode("01001000")) == "01001-000"


# ─── Rejected shapes ─────────────────────────────────────────────

@pytest.mark.parametrize("raw", [
    "",
    "   ",
    "invalid-cep",
    "1234567",
    "123456789",
    "1234-5678",
    "12345-6789",
    "12345 678",
    "12.345-678",
    "abcde-fgh",
    "12345--678",
    "1234567a",
])
def test_invalid_shapes_rejected(raw):
    with pytest.raises(InvalidFormatError) as exc_info:
        PostalCode(raw)
    assert exc_info.value.code == CODE_INVALID_FORMAT
    assert exc_info.value.category == ErrorCategory.VALIDATION


def test_non_string_rejected():
    with pytest.raises(InvalidFormatError):
        PostalCode(12345678)


def test_non_ascii_digits_rejected():
    with pytest.raises(InvalidFormatError):
        PostalCode("\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668")


# ─── Immutability ────────────────────────────────────────────────

def test_postal_code_is_frozen():
    cep = PostalCode("12345-678")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cep.value = "00000-000"
