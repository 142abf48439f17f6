"""
Description:
    esa 记事检索 query 构造

    esa 的 /v1/teams/:team_name/posts 只接受少数几个控制参数
    (page, per_page, q, include, sort, order)，其余条件都要写进 q 里，
    用 `key:value` 的检索语法以空格拼接。

    示例:
        build_query({"page": "2", "tag": ["a", "b"], "": ["free"]})
        -> [("page", "2"), ("q", "tag:a tag:b free")]
"""

import logging
from typing import Iterable, List, Mapping, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

# API 直接消费的控制参数，顺序即输出顺序
RESERVED_KEYS = ("page", "per_page", "q", "include", "sort", "order")

FilterValue = Union[str, Sequence[str]]
Filters = Union[Mapping[str, FilterValue], Iterable[Tuple[str, str]]]
QueryPairs = List[Tuple[str, str]]


def _normalize(filters: Filters) -> dict[str, list[str]]:
    """统一成 key -> [values] 的有序多值字典（新建副本，不修改调用方数据）"""
    normalized: dict[str, list[str]] = {}
    items = filters.items() if isinstance(filters, Mapping) else filters
    for key, value in items:
        values = [value] if isinstance(value, str) else list(value)
        normalized.setdefault(key, []).extend(values)
    return normalized


def build_search_query(filters: Filters) -> str:
    """
    把过滤条件折叠为 q 检索字符串

    key 非空时生成 `key:value`，key 为空串时只生成 `value`（自由文本）。
    多值 key 的每个值各生成一个 token，按 key 首次出现顺序、值顺序拼接。
    """
    tokens = []
    for key, values in _normalize(filters).items():
        for value in values:
            tokens.append(f"{key}:{value}" if key else value)
    return " ".join(tokens)


def build_query(filters: Filters) -> QueryPairs:
    """
    将通用过滤条件拆分为控制参数 + q 检索表达式

    Args:
        filters: 过滤条件，dict（值可为字符串或字符串列表）或 (key, value) 序列

    Returns:
        有序的 (key, value) 列表。控制参数原样透传（只取第一个值），
        最后总是追加 q（即使为空串）。
    """
    working = _normalize(filters)
    pairs: QueryPairs = []

    for key in RESERVED_KEYS:
        values = working.get(key)
        # 控制参数视为单值：只取第一个值，且为空时按普通检索条件处理
        if values and values[0]:
            pairs.append((key, values[0]))
            del working[key]

    search = build_search_query(working)
    pairs.append(("q", search))

    logger.debug("Built query: params=%s, q=%r", [k for k, _ in pairs[:-1]], search)
    return pairs
