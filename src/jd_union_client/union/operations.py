"""Typed wrappers for JD Union router operations.

Each wrapper only picks the router method and shapes its request object;
the concrete client decides how the request is sent (blocking or awaitable).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Generic, TypeVar

from .options import (
    ActivityQueryOptions,
    ActivityRecommendOptions,
    ChannelRelationQueryOptions,
    GiftCouponOptions,
    GiftCouponStatsOptions,
    GoodsQueryOptions,
    IntelligenceQueryOptions,
    JingfenGoodsOptions,
    MaterialGoodsOptions,
    OrderRowOptions,
    PromotionCodeOptions,
    RedPacketAgentOptions,
    RedPacketOptions,
)
from .params import UnionRequest, join_values, merge_fields, options_to_fields

ResultT = TypeVar("ResultT")

RawOptions = Mapping[str, object]


class UnionOperations(Generic[ResultT]):
    """Router operations shared by the sync and async clients."""

    def _send(self, request: UnionRequest, *, timeout: float | None = None) -> ResultT:
        raise NotImplementedError

    # Promotion links

    def promotion_common_get(
        self,
        material_id: str,
        site_id: int,
        options: PromotionCodeOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Promotion link for a website or app.

        ``material_id`` is a landing page or goods URL; a bare SKU id is not
        accepted by the router.
        """

        return self._send(
            UnionRequest(
                "jd.union.open.promotion.common.get",
                {
                    "promotionCodeReq": merge_fields(
                        {"materialId": material_id, "siteId": site_id},
                        options,
                    )
                },
            ),
            timeout=timeout,
        )

    def promotion_bysubunionid_get(
        self,
        material_id: str,
        options: PromotionCodeOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Promotion link for social media channels."""

        return self._send(
            UnionRequest(
                "jd.union.open.promotion.bysubunionid.get",
                {"promotionCodeReq": merge_fields({"materialId": material_id}, options)},
            ),
            timeout=timeout,
        )

    def promotion_byunionid_get(
        self,
        material_id: str,
        union_id: int,
        options: PromotionCodeOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Promotion link generated by a tool provider for another affiliate."""

        return self._send(
            UnionRequest(
                "jd.union.open.promotion.byunionid.get",
                {
                    "promotionCodeReq": merge_fields(
                        {"materialId": material_id, "unionId": union_id},
                        options,
                    )
                },
            ),
            timeout=timeout,
        )

    # Goods

    def goods_jingfen_query(
        self,
        elite_id: int,
        options: JingfenGoodsOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Curated goods of one channel (``elite_id``)."""

        return self._send(
            UnionRequest(
                "jd.union.open.goods.jingfen.query",
                {"goodsReq": merge_fields({"eliteId": elite_id}, options)},
            ),
            timeout=timeout,
        )

    def goods_query(
        self,
        options: GoodsQueryOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Goods and coupon search."""

        return self._send(
            UnionRequest(
                "jd.union.open.goods.query",
                {"goodsReqDTO": options_to_fields(options)},
            ),
            timeout=timeout,
        )

    def goods_material_query(
        self,
        elite_id: int,
        options: MaterialGoodsOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Personalised ("guess you like") goods recommendations."""

        return self._send(
            UnionRequest(
                "jd.union.open.goods.material.query",
                {"goodsReq": merge_fields({"eliteId": elite_id}, options)},
            ),
            timeout=timeout,
        )

    def goods_promotiongoodsinfo_query(
        self,
        *sku_ids: int,
        timeout: float | None = None,
    ) -> ResultT:
        """Promotion info by SKU id; ids are sent as one comma-separated string."""

        return self._send(
            UnionRequest(
                "jd.union.open.goods.promotiongoodsinfo.query",
                {"skuIds": join_values(sku_ids)},
            ),
            timeout=timeout,
        )

    def category_goods_get(
        self,
        parent_id: int,
        grade: int,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.category.goods.get",
                {"req": {"parentId": parent_id, "grade": grade}},
            ),
            timeout=timeout,
        )

    def goods_bigfield_query(
        self,
        sku_ids: Sequence[int],
        fields: Sequence[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Goods detail fields, at most 10 SKUs per call."""

        return self._send(
            UnionRequest(
                "jd.union.open.goods.bigfield.query",
                {
                    "goodsReq": {
                        "skuIds": list(sku_ids),
                        "fields": list(fields) if fields is not None else None,
                    }
                },
            ),
            timeout=timeout,
        )

    # Coupons

    def coupon_query(
        self,
        *coupon_urls: str,
        timeout: float | None = None,
    ) -> ResultT:
        """Coupon platform, denomination, validity and stock; urls sent as a list."""

        return self._send(
            UnionRequest(
                "jd.union.open.coupon.query",
                {"couponUrls": list(coupon_urls)},
            ),
            timeout=timeout,
        )

    def coupon_gift_get(
        self,
        sku_material_id: str,
        discount: float,
        amount: int,
        receive_start_time: str,
        receive_end_time: str,
        is_spu: int,
        expire_type: int,
        share: int,
        options: GiftCouponOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Create a gift coupon batch.

        Receive times use ``yyyy-MM-dd HH``. ``expire_type`` 1 needs
        ``effective_days``; 2 needs ``use_start_time`` and ``use_end_time``.
        An integral ``discount`` such as ``1.0`` is sent as ``1``.
        """

        return self._send(
            UnionRequest(
                "jd.union.open.coupon.gift.get",
                {
                    "couponReq": merge_fields(
                        {
                            "skuMaterialId": sku_material_id,
                            "discount": discount,
                            "amount": amount,
                            "receiveStartTime": receive_start_time,
                            "receiveEndTime": receive_end_time,
                            "isSpu": is_spu,
                            "expireType": expire_type,
                            "share": share,
                        },
                        options,
                    )
                },
            ),
            timeout=timeout,
        )

    def coupon_gift_stop(
        self,
        gift_coupon_key: str,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.coupon.gift.stop",
                {"couponReq": {"giftCouponKey": gift_coupon_key}},
            ),
            timeout=timeout,
        )

    # Activities

    def activity_query(
        self,
        options: ActivityQueryOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.activity.query",
                {"activityReq": options_to_fields(options)},
            ),
            timeout=timeout,
        )

    def activity_recommend_query(
        self,
        options: ActivityRecommendOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.activity.recommend.query",
                {"req": options_to_fields(options)},
            ),
            timeout=timeout,
        )

    def activity_bonus_query(
        self,
        begin_time: int,
        end_time: int,
        page_index: int,
        page_size: int,
        activity_id: int | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Bonus activities of the last 90 days; times are epoch milliseconds."""

        return self._send(
            UnionRequest(
                "jd.union.open.activity.bonus.query",
                {
                    "req": {
                        "beginTime": begin_time,
                        "endTime": end_time,
                        "pageIndex": page_index,
                        "pageSize": page_size,
                        "activityId": activity_id,
                    }
                },
            ),
            timeout=timeout,
        )

    def promotion_intelligence_query(
        self,
        options: IntelligenceQueryOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.promotion.intelligence.query",
                {"req": options_to_fields(options)},
            ),
            timeout=timeout,
        )

    def promotion_tools_intelligence_query(
        self,
        union_id: int,
        options: IntelligenceQueryOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.promotion.tools.intelligence.query",
                {"req": merge_fields({"unionId": union_id}, options)},
            ),
            timeout=timeout,
        )

    # Orders

    def order_row_query(
        self,
        page_index: int,
        query_type: int,
        start_time: str,
        end_time: str,
        options: OrderRowOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Orders and commission.

        ``query_type``: 1 order time, 2 completion time, 3 update time. The
        window between ``start_time`` and ``end_time`` is at most one hour.
        """

        return self._send(
            UnionRequest(
                "jd.union.open.order.row.query",
                {
                    "orderReq": merge_fields(
                        {
                            "pageIndex": page_index,
                            "type": query_type,
                            "startTime": start_time,
                            "endTime": end_time,
                        },
                        options,
                    )
                },
            ),
            timeout=timeout,
        )

    def order_bonus_query(
        self,
        opt_type: int,
        start_time: int,
        end_time: int,
        page_no: int,
        page_size: int,
        sort_value: str,
        activity_id: int | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Bonus orders; times are epoch milliseconds at most 10 minutes apart."""

        return self._send(
            UnionRequest(
                "jd.union.open.order.bonus.query",
                {
                    "orderReq": {
                        "optType": opt_type,
                        "startTime": start_time,
                        "endTime": end_time,
                        "pageNo": page_no,
                        "pageSize": page_size,
                        "sortValue": sort_value,
                        "activityId": activity_id,
                    }
                },
            ),
            timeout=timeout,
        )

    def order_agent_query(
        self,
        page_index: int,
        page_size: int,
        query_type: int,
        start_time: str,
        end_time: str,
        fields: str | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Orders a tool provider brought in for other affiliates."""

        return self._send(
            UnionRequest(
                "jd.union.open.order.agent.query",
                {
                    "orderReq": {
                        "pageIndex": page_index,
                        "pageSize": page_size,
                        "type": query_type,
                        "startTime": start_time,
                        "endTime": end_time,
                        "fields": fields,
                    }
                },
            ),
            timeout=timeout,
        )

    # Statistics

    def statistics_redpacket_query(
        self,
        start_date: str,
        end_date: str,
        page_index: int,
        page_size: int,
        options: RedPacketOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.statistics.redpacket.query",
                {
                    "effectDataReq": merge_fields(
                        {
                            "startDate": start_date,
                            "endDate": end_date,
                            "pageIndex": page_index,
                            "pageSize": page_size,
                        },
                        options,
                    )
                },
            ),
            timeout=timeout,
        )

    def statistics_redpacket_agent_query(
        self,
        start_date: str,
        end_date: str,
        page_index: int,
        page_size: int,
        options: RedPacketAgentOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.statistics.redpacket.agent.query",
                {
                    "effectDataAgentReq": merge_fields(
                        {
                            "startDate": start_date,
                            "endDate": end_date,
                            "pageIndex": page_index,
                            "pageSize": page_size,
                        },
                        options,
                    )
                },
            ),
            timeout=timeout,
        )

    def statistics_activity_bonus_query(
        self,
        activity_id: int,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.statistics.activity.bonus.query",
                {"req": {"activityId": activity_id}},
            ),
            timeout=timeout,
        )

    def statistics_giftcoupon_query(
        self,
        sku_id: int | None,
        gift_coupon_key: str | None,
        options: GiftCouponStatsOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Live gift coupon statistics; pass either ``sku_id`` or ``gift_coupon_key``."""

        return self._send(
            UnionRequest(
                "jd.union.open.statistics.giftcoupon.query",
                {
                    "effectDataReq": merge_fields(
                        {"skuId": sku_id, "giftCouponKey": gift_coupon_key},
                        options,
                    )
                },
            ),
            timeout=timeout,
        )

    # Users, positions and channels

    def user_register_validate(
        self,
        user_id: str,
        user_id_type: int,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.user.register.validate",
                {"userStateReq": {"userId": user_id, "userIdType": user_id_type}},
            ),
            timeout=timeout,
        )

    def position_create(
        self,
        union_id: int,
        key: str,
        union_type: int,
        site_type: int,
        space_name_list: Sequence[str],
        site_id: int,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        """Create promotion positions in bulk (at most 50 names per call)."""

        return self._send(
            UnionRequest(
                "jd.union.open.position.create",
                {
                    "positionReq": {
                        "unionId": union_id,
                        "unionType": union_type,
                        "key": key,
                        "type": site_type,
                        "spaceNameList": list(space_name_list),
                        "siteId": site_id,
                    }
                },
            ),
            timeout=timeout,
        )

    def position_query(
        self,
        union_id: int,
        key: str,
        union_type: int,
        page_index: int,
        page_size: int = 20,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.position.query",
                {
                    "positionReq": {
                        "unionId": union_id,
                        "key": key,
                        "unionType": union_type,
                        "pageIndex": page_index,
                        "pageSize": page_size,
                    }
                },
            ),
            timeout=timeout,
        )

    def user_pid_get(
        self,
        union_id: int,
        child_union_id: int,
        promotion_type: int,
        media_name: str,
        position_name: str | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.user.pid.get",
                {
                    "pidReq": {
                        "unionId": union_id,
                        "childUnionId": child_union_id,
                        "promotionType": promotion_type,
                        "mediaName": media_name,
                        "positionName": position_name,
                    }
                },
            ),
            timeout=timeout,
        )

    def channel_invitecode_get(
        self,
        invite_type: int,
        channel_type: int,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.channel.invitecode.get",
                {"channelInviteReq": {"inviteType": invite_type, "channelType": channel_type}},
            ),
            timeout=timeout,
        )

    def channel_relation_get(
        self,
        invite_code: str,
        note: str | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.channel.relation.get",
                {"channelRelationGetReq": {"inviteCode": invite_code, "note": note}},
            ),
            timeout=timeout,
        )

    def channel_relation_query(
        self,
        options: ChannelRelationQueryOptions | RawOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ResultT:
        return self._send(
            UnionRequest(
                "jd.union.open.channel.relation.query",
                {"channelRelationQueryReq": options_to_fields(options)},
            ),
            timeout=timeout,
        )


__all__ = [
    "UnionOperations",
]
