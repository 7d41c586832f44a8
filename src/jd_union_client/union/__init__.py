"""Union router operation package."""

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
from .params import UnionRequest

__all__ = [
    "UnionRequest",
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
