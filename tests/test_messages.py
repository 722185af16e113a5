import pytest
from pydantic import ValidationError

from core.domain.messages import StatusKind, info, success, warn


@pytest.mark.parametrize("factory, kind", [
    (info, StatusKind.INFO),
    (warn, StatusKind.WARN),
    (success, StatusKind.SUCCESS),
])
def test_helpers_tag_messages(factory, kind):
    message = factory("hello")

    assert message.kind is kind
    assert message.text == "hello"


def test_messages_are_immutable():
    message = info("hello")

    with pytest.raises(ValidationError):
        message.text = "changed"


def test_empty_message_is_rejected():
    with pytest.raises(ValidationError):
        warn("")
