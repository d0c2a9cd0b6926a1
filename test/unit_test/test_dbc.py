import pytest

import imgpack.intern.dbc as dbc
from imgpack.intern import msg


def test_raise_os_error():
    with pytest.raises(dbc.ImgpackException) as e:
        dbc.raise_os_error("READ_FAILED", "resources/1.avif", PermissionError(13, "Permission denied"))
    assert e.value.error_description == {
        "msg": "READ_FAILED", "path": "resources/1.avif", "reason": "Permission denied", "category": "USER_ERROR"}
    assert msg.get_message_text_for_exception(e.value) == "file \"resources/1.avif\" could not be read: \"Permission denied\""


def test_system_error_asks_for_developers():
    with pytest.raises(dbc.ImgpackException) as e:
        dbc.assert_true(False, {"msg": "SYSTEM_ERROR", "details": "x"}, user_error=False)
    assert "contact the developer team" in msg.get_message_text_for_exception(e.value)
