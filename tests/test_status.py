import json

import pytest

from allure_model.status import Status, StatusDetail


@pytest.mark.parametrize(
    "text, status",
    [
        ("passed", Status.PASSED),
        ("failed", Status.FAILED),
        ("skipped", Status.SKIPPED),
        ("broken", Status.BROKEN),
        ("unknown", Status.UNKNOWN),
    ],
)
def test_status_lookup_by_value(text, status):
    assert Status(text) is status
    assert str(status) == text


def test_status_serialises_as_plain_string():
    assert json.dumps(Status("failed")) == '"failed"'


def test_unknown_status_text_is_rejected():
    with pytest.raises(ValueError):
        Status("bogus")


def test_status_detail_defaults_to_empty():
    assert StatusDetail().to_dict() == {"message": "", "trace": ""}


def test_status_detail_to_dict():
    detail = StatusDetail(message="msg", trace="trace")
    assert detail.to_dict() == {"message": "msg", "trace": "trace"}