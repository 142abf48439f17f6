"""
PostAPI - 记事相关接口封装

对应 esa API:
- GET /v1/teams/:team_name/posts
- GET /v1/teams/:team_name/posts/:post_number
"""

import logging
from typing import Optional

from esa_client.core.client import EsaClient, get_esa_client
from esa_client.core.query import Filters, build_query
from esa_client.schemas.post import Post, PostPage

logger = logging.getLogger(__name__)

POSTS_PATH = "/v1/teams/{team_name}/posts"


class PostAPI:
    """
    esa 记事 API 封装

    只提供读取接口；翻页需要调用方以 page+1 重新调用 list_posts。
    """

    def __init__(self, client: Optional[EsaClient] = None):
        self.client = client or get_esa_client()

    def get_post(self, team_name: str, post_number: int) -> Post:
        """
        获取单篇记事

        API: GET /v1/teams/:team_name/posts/:post_number

        Args:
            team_name: team 名
            post_number: 记事编号，不在本地校验，非法值由服务端返回 HTTP 错误

        Returns:
            Post

        Raises:
            EsaError: 请求、状态码或解码失败
        """
        path = POSTS_PATH.format(team_name=team_name) + f"/{post_number}"
        logger.debug("Getting post: team=%s, number=%s", team_name, post_number)

        return self.client.get(path, [], Post)

    def list_posts(self, team_name: str, filters: Optional[Filters] = None) -> PostPage:
        """
        按条件检索记事列表

        API: GET /v1/teams/:team_name/posts

        Args:
            team_name: team 名
            filters: 过滤条件。page/per_page/q/include/sort/order 原样透传，
                其余 key 转为 `key:value` 写入 q，key 为空串时作为自由文本

        Returns:
            PostPage

        Raises:
            EsaError: 请求、状态码或解码失败
        """
        params = build_query(filters or {})
        path = POSTS_PATH.format(team_name=team_name)

        page = self.client.get(path, params, PostPage)
        logger.info(
            "Retrieved %d posts from %s (total=%d, next_page=%s)",
            len(page.posts),
            team_name,
            page.total_count,
            page.next_page,
        )
        return page
