from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from jd_union_client.async_client import AsyncJdUnionClient
from jd_union_client.config import JdUnionClientConfig
from jd_union_client.core.async_transport import AsyncTransport
from jd_union_client.core.errors import (
    JdUnionClientClosedError,
    JdUnionTimeoutError,
    JdUnionVendorError,
)
from jd_union_client.core.signing import (
    PARAM_JSON_KEY,
    build_canonical_string,
    compute_signature,
)
from tests.shared.client_fakes import RecordingAsyncTransport
from tests.shared.payloads import make_error_payload
from tests.shared.transport import build_config


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_transport():
    transport = RecordingAsyncTransport()
    async with AsyncJdUnionClient("K", "S", transport=transport) as client:
        assert client.app_key == "K"
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close():
    transport = RecordingAsyncTransport()
    client = AsyncJdUnionClient("K", "S", transport=transport)
    await client.close()
    with pytest.raises(JdUnionClientClosedError):
        await client.category_goods_get(0, 0)
    assert transport.requests == []


@pytest.mark.asyncio
async def test_async_client_operation_returns_unwrapped_value(fixed_clock):
    transport = RecordingAsyncTransport()
    client = AsyncJdUnionClient("K", "S", transport=transport, clock=fixed_clock)
    result = await client.goods_promotiongoodsinfo_query(1, 2, 3)
    assert result == {"method": "jd.union.open.goods.promotiongoodsinfo.query"}
    assert json.loads(transport.requests[0][PARAM_JSON_KEY]) == {"skuIds": "1,2,3"}


@pytest.mark.asyncio
async def test_async_client_returns_error_response_as_is(fixed_clock):
    transport = RecordingAsyncTransport(lambda params: make_error_payload(1, "bad sign"))
    client = AsyncJdUnionClient("K", "S", transport=transport, clock=fixed_clock)
    assert await client.coupon_query("u") == {"code": 1, "msg": "bad sign"}


@pytest.mark.asyncio
async def test_async_client_can_raise_vendor_errors(fixed_clock):
    transport = RecordingAsyncTransport(lambda params: make_error_payload(1, "bad sign"))
    client = AsyncJdUnionClient(
        "K",
        "S",
        config=JdUnionClientConfig(raise_vendor_errors=True),
        transport=transport,
        clock=fixed_clock,
    )
    with pytest.raises(JdUnionVendorError):
        await client.coupon_query("u")


@pytest.mark.asyncio
async def test_concurrent_calls_keep_their_own_method_names(fixed_clock):
    goods = "jd.union.open.goods.query"
    coupon = "jd.union.open.coupon.query"
    transport = RecordingAsyncTransport(hold={goods})
    client = AsyncJdUnionClient("K", "S", transport=transport, clock=fixed_clock)

    goods_task = asyncio.create_task(client.goods_query({"keyword": "a"}))
    await asyncio.sleep(0)
    coupon_result = await client.coupon_query("u")
    transport.release.set()
    goods_result = await goods_task

    assert transport.completed == [coupon, goods]
    assert goods_result == {"method": goods}
    assert coupon_result == {"method": coupon}
    for signed in transport.requests:
        unsigned = {key: value for key, value in signed.items() if key != "sign"}
        assert signed["sign"] == compute_signature(build_canonical_string(unsigned, "S"))


@pytest.mark.asyncio
async def test_gathered_calls_are_order_independent(fixed_clock):
    transport = RecordingAsyncTransport()
    client = AsyncJdUnionClient("K", "S", transport=transport, clock=fixed_clock)

    results = await asyncio.gather(
        client.coupon_gift_stop("k"),
        client.category_goods_get(0, 0),
        client.channel_invitecode_get(0, 0),
    )

    assert [result["method"] for result in results] == [
        "jd.union.open.coupon.gift.stop",
        "jd.union.open.category.goods.get",
        "jd.union.open.channel.invitecode.get",
    ]


@pytest.mark.asyncio
async def test_async_client_call_timeout_surfaces_as_timeout_error(fixed_clock):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    transport = AsyncTransport(build_config(), client=http_client)
    async with AsyncJdUnionClient("K", "S", transport=transport, clock=fixed_clock) as client:
        with pytest.raises(JdUnionTimeoutError):
            await client.call("jd.union.open.goods.query", {}, timeout=0.5)
    await http_client.aclose()


@pytest.mark.asyncio
async def test_async_client_cancellation_is_not_swallowed(fixed_clock):
    transport = RecordingAsyncTransport(hold={"jd.union.open.goods.query"})
    client = AsyncJdUnionClient("K", "S", transport=transport, clock=fixed_clock)

    task = asyncio.create_task(client.goods_query())
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_async_operation_forwards_per_call_timeout(fixed_clock):
    transport = RecordingAsyncTransport()
    client = AsyncJdUnionClient("K", "S", transport=transport, clock=fixed_clock)
    await client.coupon_query("u", timeout=2.5)
    await client.activity_query(timeout=1)
    assert transport.timeouts == [2.5, 1]
