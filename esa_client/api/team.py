"""
TeamAPI - team 相关接口封装

对应 esa API:
- GET /v1/teams
"""

import logging
from typing import Optional

from esa_client.core.client import EsaClient, get_esa_client
from esa_client.schemas.team import TeamPage

logger = logging.getLogger(__name__)

TEAMS_PATH = "/v1/teams"


class TeamAPI:
    def __init__(self, client: Optional[EsaClient] = None):
        self.client = client or get_esa_client()

    def list_teams(self) -> TeamPage:
        """
        获取当前 token 可访问的 team 列表

        API: GET /v1/teams

        Returns:
            TeamPage

        Raises:
            EsaError: 请求、状态码或解码失败
        """
        page = self.client.get(TEAMS_PATH, [], TeamPage)
        logger.info("Retrieved %d teams (total=%d)", len(page.teams), page.total_count)
        return page
