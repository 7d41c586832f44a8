from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from jd_union_client.union.options import GoodsQueryOptions, PromotionCodeOptions
from jd_union_client.union.params import UnionRequest


def test_options_are_frozen_and_keyword_only():
    options = PromotionCodeOptions(position_id=1)
    with pytest.raises(FrozenInstanceError):
        options.position_id = 2
    with pytest.raises(TypeError):
        PromotionCodeOptions(1)  # type: ignore[misc]


def test_options_default_to_unset():
    options = GoodsQueryOptions()
    assert all(getattr(options, name) is None for name in GoodsQueryOptions.__slots__)


def test_union_request_is_frozen():
    request = UnionRequest("m", {})
    with pytest.raises(FrozenInstanceError):
        request.method = "n"
