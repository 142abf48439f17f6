"""
API 测试共享 Fixtures
"""

import pytest

from esa_client.core.client import EsaClient

BASE_URL = "https://mock.api"


@pytest.fixture
def esa_client():
    """指向 mock server 的客户端，请求由 respx 拦截"""
    client = EsaClient(access_token="test-token", base_url=BASE_URL)
    yield client
    client.close()
