from __future__ import annotations

import hashlib
from datetime import datetime

import pytest

from jd_union_client.config import Credentials
from jd_union_client.core.signing import (
    PARAM_JSON_KEY,
    build_canonical_string,
    build_common_params,
    compute_signature,
    format_timestamp,
    response_field_name,
    serialize_business_params,
    sign_params,
)

FIXED_TIMESTAMP = "2024-01-01 00:00:00"
REFERENCE_CANONICAL = (
    'S360buy_param_json{"a":1}app_keyKformatjsonmethodm'
    "sign_methodmd5timestamp2024-01-01 00:00:00v1.0S"
)
REFERENCE_SIGNATURE = "E17D07B68970F88B3E52474C40215FF7"


def _common(
    method: str = "m",
    params: dict[str, object] | None = None,
    app_key: str = "K",
    timestamp: str = FIXED_TIMESTAMP,
) -> dict[str, str]:
    return build_common_params(
        method,
        params if params is not None else {"a": 1},
        Credentials(app_key=app_key, secret="S"),
        timestamp,
    )


def test_reference_canonical_string_and_signature():
    common = _common()
    canonical = build_canonical_string(common, "S")
    assert canonical == REFERENCE_CANONICAL
    assert compute_signature(canonical) == REFERENCE_SIGNATURE


def test_signature_is_uppercase_hex_md5():
    signature = compute_signature("abc")
    assert signature == hashlib.md5(b"abc").hexdigest().upper()
    assert signature == signature.upper()
    assert len(signature) == 32


def test_canonical_string_is_deterministic():
    first = sign_params(_common(), "S")
    second = sign_params(_common(), "S")
    assert first == second
    assert first["sign"] == REFERENCE_SIGNATURE


def test_canonical_string_wraps_secret_on_both_sides():
    canonical = build_canonical_string({"b": "2", "a": "1"}, "SECRET")
    assert canonical == "SECRETa1b2SECRET"


def test_common_param_insertion_order_does_not_change_signature():
    common = _common()
    reversed_common = dict(reversed(list(common.items())))
    assert list(reversed_common) != list(common)
    assert sign_params(reversed_common, "S")["sign"] == sign_params(common, "S")["sign"]


@pytest.mark.parametrize(
    "changes",
    [
        {"method": "n"},
        {"params": {"a": 2}},
        {"app_key": "K2"},
        {"timestamp": "2024-01-01 00:00:01"},
    ],
    ids=["method", "param-value", "app-key", "timestamp"],
)
def test_signature_changes_with_any_signed_input(changes):
    baseline = sign_params(_common(), "S")["sign"]
    assert sign_params(_common(**changes), "S")["sign"] != baseline


def test_signature_changes_with_secret():
    assert sign_params(_common(), "S")["sign"] != sign_params(_common(), "T")["sign"]


def test_signed_params_are_in_ascending_codepoint_order():
    signed = sign_params(_common(), "S")
    keys = list(signed)
    assert keys == sorted(keys)
    assert keys == [
        PARAM_JSON_KEY,
        "app_key",
        "format",
        "method",
        "sign",
        "sign_method",
        "timestamp",
        "v",
    ]


def test_common_params_contain_protocol_fields():
    common = _common(method="jd.union.open.goods.query")
    assert common == {
        "method": "jd.union.open.goods.query",
        "app_key": "K",
        "timestamp": FIXED_TIMESTAMP,
        "format": "json",
        "v": "1.0",
        "sign_method": "md5",
        PARAM_JSON_KEY: '{"a":1}',
    }


def test_sign_params_rejects_presigned_input():
    with pytest.raises(ValueError):
        sign_params({"sign": "x"}, "S")


def test_serialize_business_params_is_compact_and_keeps_order():
    text = serialize_business_params({"goodsReq": {"z": 1, "a": [1, 2], "m": "京东"}})
    assert text == '{"goodsReq":{"z":1,"a":[1,2],"m":"京东"}}'


def test_serialize_business_params_omits_none_fields_at_every_level():
    text = serialize_business_params({"req": {"a": None, "b": {"c": None, "d": 0}}, "x": None})
    assert text == '{"req":{"b":{"d":0}}}'


def test_serialize_business_params_keeps_none_inside_sequences():
    assert serialize_business_params({"ids": (1, None)}) == '{"ids":[1,null]}'


def test_format_timestamp():
    assert format_timestamp(datetime(2024, 3, 5, 7, 8, 9)) == "2024-03-05 07:08:09"


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("jd.union.open.goods.query", "jd_union_open_goods_query_responce"),
        ("m", "m_responce"),
        ("a..b", "a__b_responce"),
    ],
)
def test_response_field_name(method, expected):
    assert response_field_name(method) == expected


def test_serialize_business_params_accepts_any_non_text_sequence():
    assert serialize_business_params({"ids": range(2), "name": "ab"}) == '{"ids":[0,1],"name":"ab"}'


def test_serialize_business_params_sends_integral_floats_as_integers():
    text = serialize_business_params({"couponReq": {"discount": 1.0, "rate": 1.5, "flag": True}})
    assert text == '{"couponReq":{"discount":1,"rate":1.5,"flag":true}}'
