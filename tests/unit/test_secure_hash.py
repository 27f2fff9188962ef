"""
Unit tests for salted secure hashes and salt generation.
"""

import base64
import hashlib

import pytest
from pydantic import ValidationError

from hashkit.core.exceptions import InvalidArgumentError
from hashkit.core.models.hash_data import HashData
from hashkit.services.hashing import Hasher
from hashkit.services.logging import NullLogger


class TestGenerateSecureHash:
    """generate_secure_hash() with a fresh salt."""

    def test_returns_salt_and_value(self, hasher):
        data = hasher.generate_secure_hash("Peter")

        assert isinstance(data, HashData)
        assert len(data.salt) == 32
        assert len(data.value) == 64
        assert data.value != "Peter"

    def test_three_calls_differ(self, hasher):
        data1 = hasher.generate_secure_hash("Peter")
        data2 = hasher.generate_secure_hash("Peter")
        data3 = hasher.generate_secure_hash("Peter")

        assert len({data1.salt, data2.salt, data3.salt}) == 3
        assert len({data1.value, data2.value, data3.value}) == 3

    def test_value_reproducible_from_salt(self, hasher):
        data = hasher.generate_secure_hash("Peter")
        assert hasher.generate_secure_hash_with_salt("Peter", data.salt) == data.value

    def test_result_is_immutable(self, hasher):
        data = hasher.generate_secure_hash("Peter")
        with pytest.raises(ValidationError):
            data.value = "other"

    def test_salt_b64(self, hasher):
        data = hasher.generate_secure_hash("Peter")
        assert base64.b64decode(data.salt_b64) == data.salt

    def test_configured_salt_length(self):
        hasher = Hasher(logger=NullLogger(), salt_length=16)
        assert len(hasher.generate_secure_hash("Peter").salt) == 16

    def test_none_rejected(self, hasher):
        with pytest.raises(InvalidArgumentError):
            hasher.generate_secure_hash(None)


class TestGenerateSecureHashWithSalt:
    """generate_secure_hash_with_salt() is a pure function."""

    def test_composition_is_value_plus_base64_salt(self, hasher):
        salt = "Salt".encode("utf-8")
        expected = hashlib.sha256(b"Value" + base64.b64encode(salt)).hexdigest().upper()

        assert hasher.generate_secure_hash_with_salt("Value", salt) == expected

    def test_three_calls_identical(self, hasher):
        salt = b"Salt"
        results = {hasher.generate_secure_hash_with_salt("Value", salt) for _ in range(3)}
        assert len(results) == 1

    def test_different_salt_gives_different_hash(self, hasher):
        assert hasher.generate_secure_hash_with_salt(
            "Value", b"Salt"
        ) != hasher.generate_secure_hash_with_salt("Value", b"Pepper")

    def test_none_value_rejected(self, hasher):
        with pytest.raises(InvalidArgumentError) as exc_info:
            hasher.generate_secure_hash_with_salt(None, b"Salt")
        assert exc_info.value.context["argument"] == "value"

    def test_none_salt_rejected(self, hasher):
        with pytest.raises(InvalidArgumentError) as exc_info:
            hasher.generate_secure_hash_with_salt("Value", None)
        assert exc_info.value.context["argument"] == "salt"

    def test_text_salt_rejected(self, hasher):
        with pytest.raises(InvalidArgumentError):
            hasher.generate_secure_hash_with_salt("Value", "Salt")


class TestVerifySecureHash:
    """verify_secure_hash() against stored values."""

    def test_matching_value(self, hasher):
        data = hasher.generate_secure_hash("s3cret")
        assert hasher.verify_secure_hash("s3cret", data.salt, data.value) is True

    def test_wrong_value(self, hasher):
        data = hasher.generate_secure_hash("s3cret")
        assert hasher.verify_secure_hash("guess", data.salt, data.value) is False

    def test_lowercase_stored_value(self, hasher):
        data = hasher.generate_secure_hash("s3cret")
        assert hasher.verify_secure_hash("s3cret", data.salt, data.value.lower()) is True

    def test_non_ascii_expected_does_not_match(self, hasher):
        data = hasher.generate_secure_hash("s3cret")
        assert hasher.verify_secure_hash("s3cret", data.salt, "ä" * 64) is False

    def test_none_expected_rejected(self, hasher):
        with pytest.raises(InvalidArgumentError):
            hasher.verify_secure_hash("s3cret", b"salt", None)

    def test_bytes_expected_rejected(self, hasher):
        data = hasher.generate_secure_hash("s3cret")
        with pytest.raises(InvalidArgumentError) as exc_info:
            hasher.verify_secure_hash("s3cret", data.salt, data.value.encode())
        assert exc_info.value.context["argument"] == "expected"


class TestGenerateSalt:
    """generate_salt() returns non-zero random bytes."""

    def test_default_length(self, hasher):
        assert len(hasher.generate_salt()) == 32

    @pytest.mark.parametrize("length", [1, 16, 64, 100])
    def test_given_length(self, hasher, length):
        assert len(hasher.generate_salt(length)) == length

    def test_no_zero_bytes(self, hasher):
        salt = hasher.generate_salt(10_000)
        assert 0 not in salt

    def test_repeated_calls_differ(self, hasher):
        assert len({hasher.generate_salt() for _ in range(3)}) == 3

    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_length_rejected(self, hasher, length):
        with pytest.raises(InvalidArgumentError):
            hasher.generate_salt(length)

    @pytest.mark.parametrize("length", [True, 2.5, "32"])
    def test_non_integer_length_rejected(self, hasher, length):
        with pytest.raises(InvalidArgumentError):
            hasher.generate_salt(length)

    def test_invalid_configured_length_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Hasher(logger=NullLogger(), salt_length=0)
