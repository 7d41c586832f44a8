"""Optional request fields, one model per vendor request object.

Field names are snake_case; they are sent under the router's camelCase
names unless a field carries an explicit ``wire`` name. ``None`` means the
field is left out of the request.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


def wire(name: str):
    return field(default=None, metadata={"wire": name})


@dataclass(slots=True, frozen=True, kw_only=True)
class PromotionCodeOptions:
    """Optional ``promotionCodeReq`` fields shared by the promotion link calls."""

    position_id: int | None = None
    sub_union_id: str | None = None
    ext1: str | None = None
    pid: str | None = None
    coupon_url: str | None = None
    chain_type: int | None = None
    gift_coupon_key: str | None = None
    channel_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class JingfenGoodsOptions:
    page_index: int | None = None
    page_size: int | None = None
    sort_name: str | None = None
    sort: str | None = None
    pid: str | None = None
    fields: str | None = None
    forbid_types: str | None = None
    group_id: int | None = None
    owner_union_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class MaterialGoodsOptions:
    page_index: int | None = None
    page_size: int | None = None
    sort_name: str | None = None
    sort: str | None = None
    pid: str | None = None
    sub_union_id: str | None = None
    site_id: str | None = None
    position_id: str | None = None
    ext1: str | None = None
    sku_id: int | None = None
    has_coupon: int | None = None
    user_id_type: int | None = None
    user_id: str | None = None
    fields: str | None = None
    forbid_types: str | None = None
    group_id: int | None = None
    owner_union_id: int | None = None
    benefit_type: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class GoodsQueryOptions:
    """``goodsReqDTO`` for keyword/category goods search."""

    cid1: int | None = None
    cid2: int | None = None
    cid3: int | None = None
    page_index: int | None = None
    page_size: int | None = None
    sku_ids: Sequence[int] | None = None
    keyword: str | None = None
    pricefrom: float | None = None
    priceto: float | None = None
    commission_share_start: int | None = None
    commission_share_end: int | None = None
    owner: str | None = None
    sort_name: str | None = None
    sort: str | None = None
    is_coupon: int | None = None
    is_pg: int | None = wire("isPG")
    pingou_price_start: float | None = None
    pingou_price_end: float | None = None
    brand_code: str | None = None
    shop_id: int | None = None
    has_content: int | None = None
    has_best_coupon: int | None = None
    pid: str | None = None
    fields: str | None = None
    forbid_types: str | None = None
    jx_flags: Sequence[int] | None = None
    shop_level_from: float | None = None
    isbn: str | None = None
    spu_id: int | None = None
    coupon_url: str | None = None
    delivery_type: int | None = None
    elite_type: Sequence[int] | None = None
    is_seckill: int | None = None
    is_presale: int | None = None
    is_reserve: int | None = None
    bonus_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class ActivityQueryOptions:
    page_index: int | None = None
    page_size: int | None = None
    pool_id: int | None = None
    active_date: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class ActivityRecommendOptions:
    user_id: str | None = None
    user_id_type: int | None = None
    order_id: int | None = None
    pid: str | None = None
    sub_union_id: str | None = None
    site_id: str | None = None
    position_id: int | None = None
    need_click_url: int | None = None
    image_width: int | None = None
    image_height: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class IntelligenceQueryOptions:
    title: str | None = None
    type: int | None = None
    cid1_list: Sequence[int] | None = None
    status: int | None = None
    essence: str | None = None
    page_index: int | None = None
    page_size: int | None = None
    pid: str | None = None
    sub_union_id: str | None = None
    site_id: int | None = None
    position_id: int | None = None
    ext1: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class OrderRowOptions:
    child_union_id: int | None = None
    key: str | None = None
    fields: str | None = None
    page_size: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RedPacketOptions:
    act_id: int | None = None
    position_id: int | None = None
    key: str | None = None
    type: int | None = None
    channel_ids: Sequence[int] | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RedPacketAgentOptions:
    type: int | None = None
    act_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class GiftCouponOptions:
    effective_days: int | None = None
    use_start_time: str | None = None
    use_end_time: str | None = None
    content_match: int | None = None
    coupon_title: str | None = None
    content_match_medias: Sequence[int] | None = None
    show_in_medias: int | None = None
    target_type: int | None = None
    child_promoters: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class GiftCouponStatsOptions:
    create_time: str | None = None
    start_time: str | None = None
    key: str | None = None
    target_type: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class ChannelRelationQueryOptions:
    page_index: int | None = None
    page_size: int | None = None
    channel_id: int | None = None


__all__ = [
    "PromotionCodeOptions",
    "JingfenGoodsOptions",
    "MaterialGoodsOptions",
    "GoodsQueryOptions",
    "ActivityQueryOptions",
    "ActivityRecommendOptions",
    "IntelligenceQueryOptions",
    "OrderRowOptions",
    "RedPacketOptions",
    "RedPacketAgentOptions",
    "GiftCouponOptions",
    "GiftCouponStatsOptions",
    "ChannelRelationQueryOptions",
]
