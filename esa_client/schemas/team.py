from typing import List

from pydantic import Field

from esa_client.schemas.base import EsaModel, Page


class Team(EsaModel):
    name: str = ""
    privacy: str = ""
    description: str = ""
    icon: str = ""
    url: str = ""


class TeamPage(Page):
    teams: List[Team] = Field(default_factory=list)
