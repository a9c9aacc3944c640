"""Tests for outbound request defaults (infra/http_defaults.py).

Settings are constructed explicitly or via a monkeypatched environment;
the autouse fixture in conftest rebuilds the shared mapping per test.
"""

from __future__ import annotations

import httpx
import pytest

from ytd_formats.config import FormatsSettings
from ytd_formats.exceptions import HeaderOverrideError, InvalidHeaderValueError
from ytd_formats.infra.http_defaults import (
    build_default_headers,
    build_request_headers,
    default_headers,
)
from ytd_formats.utils.constants import DEFAULT_USER_AGENT


# ---------------------------------------------------------------------------
# build_default_headers
# ---------------------------------------------------------------------------

class TestBuildDefaultHeaders:
    def test_user_agent_only_by_default(self) -> None:
        headers = build_default_headers(FormatsSettings())
        assert dict(headers) == {"User-Agent": DEFAULT_USER_AGENT}

    def test_extra_headers_included(self) -> None:
        headers = build_default_headers(
            FormatsSettings(extra_headers={"Accept-Language": "en-US,en;q=0.9"}),
        )
        assert headers["Accept-Language"] == "en-US,en;q=0.9"
        assert headers["User-Agent"] == DEFAULT_USER_AGENT

    def test_mapping_is_immutable(self) -> None:
        headers = build_default_headers(FormatsSettings())
        with pytest.raises(TypeError):
            headers["X-Test"] = "1"  # type: ignore[index]

    @pytest.mark.parametrize(
        "user_agent",
        ["", "bad\r\nInjected: yes", "null\x00byte", " leading", "trailing "],
    )
    def test_invalid_user_agent_rejected(self, user_agent: str) -> None:
        with pytest.raises(InvalidHeaderValueError):
            build_default_headers(FormatsSettings(user_agent=user_agent))

    @pytest.mark.parametrize("name", ["Bad Name", "", "X:Colon", "Ünicode"])
    def test_invalid_header_name_rejected(self, name: str) -> None:
        with pytest.raises(InvalidHeaderValueError, match="header name"):
            build_default_headers(FormatsSettings(extra_headers={name: "v"}))

    def test_user_agent_in_extra_headers_rejected(self) -> None:
        with pytest.raises(InvalidHeaderValueError, match="user_agent"):
            build_default_headers(
                FormatsSettings(extra_headers={"user-agent": "other"}),
            )

    @pytest.mark.parametrize("user_agent", ["Mozill\u00e9/5.0", "ua/1 \u2014 test"])
    def test_non_ascii_user_agent_rejected(self, user_agent: str) -> None:
        with pytest.raises(InvalidHeaderValueError) as excinfo:
            build_default_headers(FormatsSettings(user_agent=user_agent))
        assert "ASCII" in (excinfo.value.hint or "")

    def test_header_names_differing_by_case_rejected(self) -> None:
        with pytest.raises(InvalidHeaderValueError, match="more than once"):
            build_default_headers(
                FormatsSettings(extra_headers={"Accept": "a", "accept": "b"}),
            )

    def test_tab_inside_value_allowed(self) -> None:
        headers = build_default_headers(FormatsSettings(user_agent="a\tb"))
        assert headers["User-Agent"] == "a\tb"


# ---------------------------------------------------------------------------
# default_headers (shared instance)
# ---------------------------------------------------------------------------

class TestDefaultHeaders:
    def test_contains_browser_user_agent(self) -> None:
        assert default_headers()["User-Agent"] == DEFAULT_USER_AGENT
        assert "Chrome/87.0.4280.101" in default_headers()["User-Agent"]

    def test_same_instance_reused(self) -> None:
        assert default_headers() is default_headers()

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YTD_FORMATS_USER_AGENT", "ytd-formats-test/1.0")
        assert default_headers()["User-Agent"] == "ytd-formats-test/1.0"

    def test_invalid_env_fails_on_build(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("YTD_FORMATS_EXTRA_HEADERS", '{"X-Bad": "a\\nb"}')
        with pytest.raises(InvalidHeaderValueError):
            default_headers()


# ---------------------------------------------------------------------------
# build_request_headers
# ---------------------------------------------------------------------------

_BASE = {"User-Agent": "ua/1", "Accept": "*/*"}


class TestBuildRequestHeaders:
    def test_returns_httpx_headers(self) -> None:
        headers = build_request_headers(base=_BASE)
        assert isinstance(headers, httpx.Headers)
        assert headers["user-agent"] == "ua/1"

    def test_defaults_used_without_base(self) -> None:
        headers = build_request_headers()
        assert headers["User-Agent"] == DEFAULT_USER_AGENT

    def test_override_replaces_case_insensitively(self) -> None:
        headers = build_request_headers({"user-agent": "ua/2"}, base=_BASE)
        assert headers["User-Agent"] == "ua/2"
        assert len(headers.get_list("User-Agent")) == 1

    def test_override_adds_header(self) -> None:
        headers = build_request_headers({"Range": "bytes=0-"}, base=_BASE)
        assert headers["Range"] == "bytes=0-"
        assert headers["Accept"] == "*/*"

    def test_none_removes_header(self) -> None:
        headers = build_request_headers({"Accept": None}, base=_BASE)
        assert "Accept" not in headers

    def test_removing_missing_header_is_noop(self) -> None:
        headers = build_request_headers({"X-Absent": None}, base=_BASE)
        assert set(headers.keys()) == {"user-agent", "accept"}

    def test_user_agent_removal_refused_by_default(self) -> None:
        with pytest.raises(HeaderOverrideError, match="User-Agent"):
            build_request_headers({"User-Agent": None}, base=_BASE)

    def test_user_agent_removal_when_explicit(self) -> None:
        headers = build_request_headers(
            {"User-Agent": None}, keep_user_agent=False, base=_BASE,
        )
        assert "User-Agent" not in headers

    def test_invalid_override_value(self) -> None:
        with pytest.raises(HeaderOverrideError):
            build_request_headers({"X-Bad": "a\r\nb"}, base=_BASE)

    def test_non_ascii_override_value(self) -> None:
        with pytest.raises(HeaderOverrideError) as excinfo:
            build_request_headers({"X-Name": "caf\u00e9"}, base=_BASE)
        assert "ASCII" in (excinfo.value.hint or "")

    def test_invalid_override_name(self) -> None:
        with pytest.raises(HeaderOverrideError, match="header name"):
            build_request_headers({"Bad Name": "v"}, base=_BASE)

    def test_baseline_not_mutated(self) -> None:
        before = dict(default_headers())
        build_request_headers({"User-Agent": "other", "X-Extra": "1"})
        assert dict(default_headers()) == before
