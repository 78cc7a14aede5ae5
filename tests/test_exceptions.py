"""Tests for the exception hierarchy."""

import pytest

from ruleknobs import __version__
from ruleknobs.exceptions import (
    ConfigurationError,
    NotFoundError,
    OperationError,
    RuleConfigurationError,
    RuleContractError,
    RuleknobsError,
)


class TestRuleknobsError:
    """Test the base error class."""

    def test_basic_exception(self):
        error = RuleknobsError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_exception_with_context(self):
        error = RuleknobsError("Rule misused", context={"rule": "MinLengthRule"})
        assert error.context == {"rule": "MinLengthRule"}
        assert error.details is error.context

    def test_details_takes_precedence(self):
        error = RuleknobsError(
            "Error",
            context={"key": "context_value"},
            details={"key": "details_value"},
        )
        assert error.context == {"key": "details_value"}


class TestHierarchy:
    """Test how specific errors can be caught."""

    @pytest.mark.parametrize(
        "error_class",
        [RuleContractError, RuleConfigurationError, ConfigurationError, NotFoundError, OperationError],
    )
    def test_catchable_as_base(self, error_class):
        with pytest.raises(RuleknobsError):
            raise error_class("boom")

    @pytest.mark.parametrize("error_class", [RuleContractError, RuleConfigurationError])
    def test_contract_errors_are_value_errors(self, error_class):
        with pytest.raises(ValueError):
            raise error_class("bad usage")


def test_version():
    assert isinstance(__version__, str)
    assert __version__ == "0.1.0"
