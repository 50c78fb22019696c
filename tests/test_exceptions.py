"""Tests for the exception hierarchy and message formatting."""

import pytest

from esquery.exceptions import (
    ConfigurationError,
    EsQueryError,
    InvalidGroupError,
    InvalidOperatorError,
    InvalidValueOperatorError,
    MissingConfigError,
    SearchError,
    ValidationError,
)


def test_message_only():
    err = EsQueryError("Something failed")
    assert str(err) == "Something failed"
    assert err.details == {}


def test_message_with_details():
    err = InvalidGroupError("Invalid where type: bogus.", group="bogus")
    assert str(err) == "Invalid where type: bogus. (group='bogus')"
    assert err.details == {"group": "bogus"}


def test_details_only():
    assert str(SearchError(index="books", status=400)) == "index='books', status=400"


def test_repr():
    err = InvalidOperatorError("Invalid operator: ~", operator="~")
    assert repr(err) == "InvalidOperatorError(message='Invalid operator: ~', details={'operator': '~'})"


@pytest.mark.parametrize(
    "exc_cls,parent",
    [
        (InvalidGroupError, ValidationError),
        (InvalidOperatorError, ValidationError),
        (InvalidValueOperatorError, ValidationError),
        (MissingConfigError, ConfigurationError),
        (ValidationError, EsQueryError),
        (ConfigurationError, EsQueryError),
        (SearchError, EsQueryError),
    ],
)
def test_hierarchy(exc_cls, parent):
    assert issubclass(exc_cls, parent)


def test_builder_errors_are_catchable_as_base(builder):
    with pytest.raises(EsQueryError):
        builder.where_term("x", 1, "nowhere")
