"""Tests for error codes and registry results."""

import pytest

from product_registry.core.errors import ErrorCode, RegistryError
from product_registry.core.result import RegistryResult


class TestErrorCode:
    """Tests for ErrorCode."""

    def test_contract_codes(self):
        assert ErrorCode.NOT_AUTHORIZED == 100
        assert ErrorCode.PRODUCT_ALREADY_EXISTS == 106
        assert ErrorCode.NOT_FOUND == 107
        assert ErrorCode.MAX_PRODUCTS_EXCEEDED == 114
        assert ErrorCode.INVALID_HASH == 120

    def test_codes_are_unique(self):
        values = [int(code) for code in ErrorCode]
        assert len(values) == len(set(values))

    def test_non_field_kinds(self):
        assert not ErrorCode.INVALID_UPDATE_PARAM.is_field_error
        assert not ErrorCode.INVALID_AUTHORITY_IDENTITY.is_field_error
        assert not ErrorCode.NOT_FOUND.is_field_error
        assert ErrorCode.INVALID_WEIGHT.is_field_error


class TestRegistryResult:
    """Tests for RegistryResult."""

    def test_success(self):
        result = RegistryResult.success(3)
        assert result.ok
        assert result.value == 3
        assert result.error is None
        assert result.unwrap() == 3

    def test_failure(self):
        result = RegistryResult.failure(ErrorCode.NOT_FOUND)
        assert not result.ok
        assert result.value is None
        assert result.error == ErrorCode.NOT_FOUND

    def test_unwrap_failure_raises(self):
        result = RegistryResult.failure(ErrorCode.NOT_AUTHORIZED)
        with pytest.raises(RegistryError, match="NOT_AUTHORIZED") as exc_info:
            result.unwrap()
        assert exc_info.value.code == ErrorCode.NOT_AUTHORIZED

    def test_success_with_false_value_is_still_ok(self):
        result = RegistryResult.success(False)
        assert result.ok
        assert result.unwrap() is False

    def test_result_is_immutable(self):
        result = RegistryResult.success(1)
        with pytest.raises(AttributeError):
            result.ok = False  # type: ignore[misc]
