from typing import List, Optional

from pydantic import Field

from esa_client.schemas.base import EsaModel, Page


class User(EsaModel):
    """记事的作者 / 最后更新者"""

    icon: str = ""
    name: str = ""
    screen_name: str = ""


class Post(EsaModel):
    # 标识
    number: int = 0
    name: str = ""
    category: str = ""
    full_name: str = ""
    url: str = ""
    kind: str = ""

    # 内容
    body_md: str = ""
    body_html: str = ""
    message: str = ""
    tags: List[str] = Field(default_factory=list)

    # 作者
    created_by: User = Field(default_factory=User)
    updated_by: User = Field(default_factory=User)

    # 状态
    wip: bool = False
    star: bool = False
    watch: bool = False
    overlapped: bool = False

    # 计数
    comments_count: int = 0
    tasks_count: int = 0
    done_tasks_count: int = 0
    stargazers_count: int = 0
    watchers_count: int = 0
    revision_number: int = 0

    # 时间戳原样保留，格式由服务端决定
    created_at: str = ""
    updated_at: str = ""


class PostPage(Page):
    posts: List[Post] = Field(default_factory=list)
    page: Optional[int] = None
    per_page: Optional[int] = None
    max_per_page: Optional[int] = None
