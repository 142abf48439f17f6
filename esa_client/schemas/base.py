from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

# 翻页游标：服务端给的通常是页码或 null，客户端只当作不透明的值透传
PageCursor = Any


class EsaModel(BaseModel):
    """esa 响应模型基类：不可变、严格类型、忽略未知字段、null 等同于缺省"""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Page(EsaModel):
    prev_page: PageCursor = None
    next_page: PageCursor = None
    total_count: int = 0

    @property
    def has_prev_page(self) -> bool:
        return self.prev_page is not None

    @property
    def has_next_page(self) -> bool:
        return self.next_page is not None
