"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from beanwire import (
    BeanWireDefinitionNotFoundError,
    BeanWireError,
    BeanWireInstantiationError,
    BeanWireInvalidRegistrationError,
    BeanWireInvalidRequiredTypeError,
    BeanWireTypeMismatchError,
)
from tests.helpers import Clock, Greeter


@pytest.mark.parametrize(
    "error_type",
    [
        BeanWireDefinitionNotFoundError,
        BeanWireInstantiationError,
        BeanWireInvalidRegistrationError,
        BeanWireInvalidRequiredTypeError,
        BeanWireTypeMismatchError,
    ],
)
def test_all_errors_derive_from_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, BeanWireError)


class TestBeanWireDefinitionNotFoundError:
    def test_message_names_bean(self) -> None:
        error = BeanWireDefinitionNotFoundError("repo")

        assert error.bean_name == "repo"
        assert str(error) == "No bean definition found for name 'repo'"


class TestBeanWireInstantiationError:
    def test_keeps_cause(self) -> None:
        cause = ValueError("bad port")

        error = BeanWireInstantiationError("server", cause)

        assert error.bean_name == "server"
        assert error.cause is cause
        assert str(error) == "Failed to instantiate bean 'server': ValueError: bad port"


class TestBeanWireTypeMismatchError:
    def test_reports_required_and_actual_types(self) -> None:
        error = BeanWireTypeMismatchError("clock", Greeter, Clock())

        assert error.required_type is Greeter
        assert error.actual_type is Clock
        assert str(error) == "Bean 'clock' is of type Clock, expected Greeter"
