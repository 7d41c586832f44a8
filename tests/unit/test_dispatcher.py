from __future__ import annotations

import logging
from datetime import datetime, timezone

from jd_union_client.config import Credentials, JdUnionClientConfig
from jd_union_client.core.dispatcher import SignedRequestDispatcher
from jd_union_client.core.signing import (
    build_canonical_string,
    compute_signature,
    response_field_name,
)
from tests.shared.client_fakes import RecordingTransport
from tests.shared.payloads import make_error_payload, make_success_payload


def _dispatcher(transport, *, clock=None, config=None):
    return SignedRequestDispatcher(
        Credentials(app_key="K", secret="S"),
        config or JdUnionClientConfig(),
        transport,
        clock=clock,
    )


def test_dispatch_matches_reference_signature(fixed_clock):
    transport = RecordingTransport()
    _dispatcher(transport, clock=fixed_clock).dispatch("m", {"a": 1})
    assert transport.requests[0]["sign"] == "E17D07B68970F88B3E52474C40215FF7"


def test_dispatch_sign_covers_every_other_query_param(fixed_clock):
    transport = RecordingTransport()
    _dispatcher(transport, clock=fixed_clock).dispatch("jd.union.open.goods.query", {"x": [1]})
    signed = dict(transport.requests[0])
    sign = signed.pop("sign")
    assert sign == compute_signature(build_canonical_string(signed, "S"))


def test_dispatch_unwraps_method_field(fixed_clock):
    method = "jd.union.open.goods.query"
    transport = RecordingTransport(lambda params: make_success_payload(method, {"code": "0"}))
    assert _dispatcher(transport, clock=fixed_clock).dispatch(method, {}) == {"code": "0"}


def test_dispatch_returns_none_when_success_field_missing(fixed_clock):
    transport = RecordingTransport(lambda params: {"something_else": 1})
    assert _dispatcher(transport, clock=fixed_clock).dispatch("m", {}) is None


def test_dispatch_returns_error_response_and_logs_warning(fixed_clock, caplog):
    transport = RecordingTransport(lambda params: make_error_payload(1, "bad sign"))
    with caplog.at_level(logging.WARNING, logger="jd_union_client"):
        result = _dispatcher(transport, clock=fixed_clock).dispatch("m", {})
    assert result == {"code": 1, "msg": "bad sign"}
    assert "error_response" in caplog.text


def test_dispatch_logs_never_include_secret(fixed_clock, caplog):
    transport = RecordingTransport()
    dispatcher = SignedRequestDispatcher(
        Credentials(app_key="K", secret="very-secret-value"),
        JdUnionClientConfig(),
        transport,
        clock=fixed_clock,
    )
    with caplog.at_level(logging.DEBUG, logger="jd_union_client"):
        dispatcher.dispatch("m", {})
    assert "very-secret-value" not in caplog.text
    assert transport.requests[0]["sign"] not in caplog.text


def test_dispatch_default_clock_uses_configured_timezone():
    transport = RecordingTransport()
    config = JdUnionClientConfig(timezone=timezone.utc)
    before = datetime.now(timezone.utc).replace(microsecond=0, tzinfo=None)
    _dispatcher(transport, config=config).dispatch("m", {})
    sent = datetime.strptime(transport.requests[0]["timestamp"], "%Y-%m-%d %H:%M:%S")
    assert (sent - before).total_seconds() < 60


def test_response_field_name_used_for_unwrap_is_per_call(fixed_clock):
    transport = RecordingTransport(
        lambda params: {
            response_field_name("a.b"): "from-a",
            response_field_name("c.d"): "from-c",
        }
    )
    dispatcher = _dispatcher(transport, clock=fixed_clock)
    assert dispatcher.dispatch("a.b", {}) == "from-a"
    assert dispatcher.dispatch("c.d", {}) == "from-c"
