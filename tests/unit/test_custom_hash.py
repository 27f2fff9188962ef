"""
Unit tests for the custom hashing method of Hasher.
"""

import hashlib
import io
from unittest.mock import MagicMock

import pytest

from hashkit.core.exceptions import InvalidArgumentError, NotConfiguredError
from hashkit.core.interfaces.logger import ILogger
from hashkit.services.hashing import Hasher


class TestSetCustomHashingMethod:
    def test_none_rejected(self, hasher):
        with pytest.raises(InvalidArgumentError) as exc_info:
            hasher.set_custom_hashing_method(None)
        assert exc_info.value.context["argument"] == "factory"

    def test_non_callable_rejected(self, hasher):
        with pytest.raises(InvalidArgumentError):
            hasher.set_custom_hashing_method(hashlib.sha256())

    def test_overwrites_previous_factory(self, hasher):
        hasher.set_custom_hashing_method(hashlib.md5)
        hasher.set_custom_hashing_method(hashlib.sha1)

        assert hasher.generate_custom_hash("Peter") == hashlib.sha1(b"Peter").hexdigest().upper()

    def test_logs_configuration(self):
        logger = MagicMock(spec=ILogger)
        hasher = Hasher(logger=logger)

        def salted_sha256():
            return hashlib.sha256(b"pepper")

        hasher.set_custom_hashing_method(salted_sha256)

        logger.info.assert_called_once()
        assert "salted_sha256" in logger.info.call_args.args


class TestGenerateCustomHash:
    def test_not_configured(self, hasher):
        with pytest.raises(NotConfiguredError) as exc_info:
            hasher.generate_custom_hash("Peter")
        assert exc_info.value.reason == NotConfiguredError.FACTORY_NOT_SET

    def test_factory_returns_none(self, hasher):
        hasher.set_custom_hashing_method(lambda: None)

        with pytest.raises(NotConfiguredError) as exc_info:
            hasher.generate_custom_hash(b"Peter")
        assert exc_info.value.reason == NotConfiguredError.FACTORY_RETURNED_NONE

    def test_not_configured_is_not_invalid_argument(self, hasher):
        with pytest.raises(NotConfiguredError) as exc_info:
            hasher.generate_custom_hash(io.BytesIO(b"Peter"))
        assert not isinstance(exc_info.value, InvalidArgumentError)

    def test_none_data_rejected_first(self, hasher):
        with pytest.raises(InvalidArgumentError):
            hasher.generate_custom_hash(None)

    def test_matches_builtin_sha256(self, hasher):
        hasher.set_custom_hashing_method(hashlib.sha256)

        assert hasher.generate_custom_hash("Peter") == hasher.sha256_hash("Peter")

    def test_all_input_shapes(self, hasher):
        hasher.set_custom_hashing_method(hashlib.sha3_512)
        expected = hashlib.sha3_512(b"Franz").hexdigest().upper()

        assert hasher.generate_custom_hash("Franz") == expected
        assert hasher.generate_custom_hash(b"Franz") == expected
        assert hasher.generate_custom_hash(io.BytesIO(b"Franz")) == expected

    def test_factory_called_per_invocation(self, hasher):
        factory = MagicMock(side_effect=hashlib.sha256)
        hasher.set_custom_hashing_method(factory)

        first = hasher.generate_custom_hash("Peter")
        second = hasher.generate_custom_hash("Peter")

        assert first == second
        assert factory.call_count == 2

    def test_blake3_factory(self, hasher):
        from blake3 import blake3

        hasher.set_custom_hashing_method(blake3)

        assert hasher.generate_custom_hash("Peter") == hasher.compute_hash("blake3", "Peter")

    def test_instances_are_independent(self):
        first = Hasher()
        second = Hasher()
        first.set_custom_hashing_method(hashlib.sha256)

        with pytest.raises(NotConfiguredError):
            second.generate_custom_hash("Peter")
