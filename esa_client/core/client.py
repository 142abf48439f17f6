"""
Description:
    esa API 同步客户端

    - 拼接请求 URL（access_token 以 query 参数形式附加）
    - 发起 GET 请求并校验状态码（只接受 200）
    - 将响应体解码为 pydantic 模型
    - 通过 .team / .post 暴露各资源的 API
"""

import logging
import threading
from typing import TYPE_CHECKING, Optional, Sequence, Tuple, Type, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from esa_client.core.config import settings

if TYPE_CHECKING:
    from esa_client.api.post import PostAPI
    from esa_client.api.team import TeamAPI

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_esa_client = None
_esa_client_lock = threading.Lock()  # 线程安全锁


class EsaError(Exception):
    """esa 客户端错误基类"""


class TransportError(EsaError):
    """请求未能完成（DNS、连接拒绝、超时等）"""


class HTTPStatusError(EsaError):
    """服务端返回了非 200 状态码，响应体被丢弃"""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(reason)


class DecodeError(EsaError):
    """响应体不是合法 JSON 或与预期结构不符"""


def _mask_token(token: str, visible_chars: int = 4) -> str:
    """对 token 进行脱敏处理，仅显示前几个字符"""
    if not token or len(token) <= visible_chars:
        return "***"
    return f"{token[:visible_chars]}***"


class EsaClient:
    """
    esa API 客户端

    客户端本身只持有不可变的配置（base_url, access_token, httpx.Client），
    单次调用的数据都在调用内部，可以被多线程共享。

    不做重试、缓存和自动翻页：每次调用恰好一次请求，错误直接抛给调用方。
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.access_token = access_token or settings.ESA_ACCESS_TOKEN or ""
        self.base_url = base_url or settings.ESA_BASE_URL
        logger.info(
            "Initializing EsaClient with base_url=%s, token=%s",
            self.base_url,
            _mask_token(self.access_token),
        )
        self.client = http_client or httpx.Client(
            timeout=httpx.Timeout(settings.ESA_HTTP_TIMEOUT),
            follow_redirects=True,
            trust_env=False,  # 禁用环境变量代理
        )
        self._team: Optional["TeamAPI"] = None
        self._post: Optional["PostAPI"] = None

    @property
    def team(self) -> "TeamAPI":
        # 延迟导入，避免循环依赖
        from esa_client.api.team import TeamAPI

        if self._team is None:
            self._team = TeamAPI(self)
        return self._team

    @property
    def post(self) -> "PostAPI":
        from esa_client.api.post import PostAPI

        if self._post is None:
            self._post = PostAPI(self)
        return self._post

    def create_url(self, path: str) -> str:
        """base_url + path + ?access_token=...，token 不做转义"""
        return f"{self.base_url}{path}?access_token={self.access_token}"

    def build_url(self, path: str, params: Sequence[Tuple[str, str]] = ()) -> str:
        """
        生成完整请求 URL

        params 按 key 排序后编码（同 key 保持原顺序），非空时以 & 追加。
        """
        url = self.create_url(path)
        encoded = urlencode(sorted(params, key=lambda kv: kv[0]))
        if encoded:
            url += "&" + encoded
        return url

    def get(
        self,
        path: str,
        params: Sequence[Tuple[str, str]],
        model: Type[M],
    ) -> M:
        """
        GET 请求并解码为指定模型

        Args:
            path: API 路径（已包含 team 名、记事编号等）
            params: 已经构造好的 query 参数
            model: 目标 pydantic 模型

        Returns:
            解码后的模型实例

        Raises:
            TransportError: 网络层失败
            HTTPStatusError: 状态码不是 200
            DecodeError: 响应体无法解码为 model
        """
        url = self.build_url(path, params)
        logger.debug(
            "Making GET request to %s%s, params=%s",
            self.base_url,
            path,
            [key for key, _ in params],
        )

        try:
            # stream 保证所有路径上都会释放连接
            with self.client.stream("GET", url) as response:
                logger.debug("Response status: %d from %s", response.status_code, path)

                if response.status_code != httpx.codes.OK:
                    reason = httpx.codes.get_reason_phrase(response.status_code)
                    logger.error(
                        "HTTP error %d from %s: %s", response.status_code, path, reason
                    )
                    raise HTTPStatusError(response.status_code, reason)

                body = response.read()
        except httpx.DecodingError as e:
            # Content-Encoding 与响应体不符
            logger.error("Failed to decode response body from %s: %s", path, e)
            raise DecodeError(str(e)) from e
        except httpx.RequestError as e:
            logger.error("GET %s failed (network error): %s", path, e)
            raise TransportError(str(e)) from e

        try:
            result = model.model_validate_json(body)
        except ValidationError as e:
            logger.error("Failed to decode response from %s as %s: %s", path, model.__name__, e)
            raise DecodeError(str(e)) from e

        logger.info("Request successful: GET %s -> %s", path, model.__name__)
        return result

    def close(self):
        """关闭客户端连接"""
        logger.info("Closing EsaClient connection")
        self.client.close()


def get_esa_client() -> EsaClient:
    """
    获取全局单例客户端（线程安全）

    使用双重检查锁定模式，防止多线程并发时重复实例化。

    Returns:
        EsaClient: 使用 settings 配置的客户端实例
    """
    global _esa_client

    # 快速路径：已初始化则直接返回
    if _esa_client is not None:
        logger.debug("Reusing existing EsaClient singleton instance")
        return _esa_client

    # 慢路径：使用锁保护初始化
    with _esa_client_lock:
        # 双重检查：防止等待锁期间其他线程已完成初始化
        if _esa_client is not None:
            return _esa_client

        logger.debug("Creating new EsaClient singleton instance")
        _esa_client = EsaClient()

    return _esa_client
