import pytest

from tsfilters.errors import (
    DimensionMismatchError,
    IncompatibleComponentError,
    MethodNotValidError,
    TsfError,
    TsfIoError,
)


def test_base_error_default_message():
    err = TsfError()
    assert str(err) == "Unknown"
    assert err.message == "Unknown"


def test_base_error_custom_message():
    err = TsfError("something broke")
    assert str(err) == "something broke"
    assert err.args == ("something broke",)


@pytest.mark.parametrize(
    "cls, text",
    [
        (TsfIoError, "I/O Exception"),
        (MethodNotValidError, "Method not Valid"),
        (IncompatibleComponentError, "Component not compatible"),
        (DimensionMismatchError, "Units are not dimensionally consistent"),
    ],
)
def test_subclass_default_messages(cls, text):
    assert str(cls()) == text


@pytest.mark.parametrize(
    "cls, text",
    [
        (TsfIoError, "I/O Exception"),
        (MethodNotValidError, "Method not Valid"),
        (IncompatibleComponentError, "Component not compatible"),
        (DimensionMismatchError, "Units are not dimensionally consistent"),
    ],
)
def test_subclasses_share_base_message_attribute(cls, text):
    err = cls()
    assert issubclass(cls, TsfError)
    assert err.message == text
    assert err.args == (text,)


def test_subclass_accepts_override_message():
    err = TsfIoError("disk gone")
    assert err.message == "disk gone"