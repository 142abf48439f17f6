"""
esa API 层 - 各资源的读取接口

使用示例:
    from esa_client.api import PostAPI

    post_api = PostAPI()
    page = post_api.list_posts("docs", {"tag": ["a", "b"], "page": "2"})
"""

from .team import TeamAPI
from .post import PostAPI

__all__ = [
    "TeamAPI",
    "PostAPI",
]
