"""Tests for permissions.RoleHeaderPermission."""

from starlette.requests import Request

from url_details.services.permissions import RoleHeaderPermission


def _request(headers: dict) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in headers.items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


_check = RoleHeaderPermission("X-User-Role", ["administrator", "editor"])


def test_allowed_role():
    assert _check(_request({"X-User-Role": "administrator"}))


def test_role_match_is_case_insensitive():
    assert _check(_request({"X-User-Role": " Editor "}))


def test_other_role_is_denied():
    assert not _check(_request({"X-User-Role": "subscriber"}))


def test_missing_header_is_denied():
    assert not _check(_request({}))
