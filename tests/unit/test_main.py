import json

import pytest
from httpx import Response

from esa_client.core.client import EsaClient
from main import _parse_search, main

BASE_URL = "https://mock.api"


@pytest.fixture
def client():
    return EsaClient(access_token="cli-token", base_url=BASE_URL)


def test_parse_search():
    assert _parse_search(["tag:a", "free", "title:a:b"]) == [
        ("tag", "a"),
        ("", "free"),
        ("title", "a:b"),
    ]


def test_main_lists_teams_and_post(client, respx_mock, capsys):
    respx_mock.get(f"{BASE_URL}/v1/teams").mock(
        return_value=Response(200, json={"teams": [{"name": "myteam"}], "total_count": 1})
    )
    respx_mock.get(f"{BASE_URL}/v1/teams/myteam/posts/42").mock(
        return_value=Response(200, json={"number": 42, "name": "Hello"})
    )

    code = main(["myteam", "42"], client=client)

    assert code == 0
    decoder = json.JSONDecoder()
    out = capsys.readouterr().out.strip()
    teams, end = decoder.raw_decode(out)
    post, _ = decoder.raw_decode(out[end:].strip())
    assert teams["teams"][0]["name"] == "myteam"
    assert post["number"] == 42


def test_main_search(client, respx_mock, capsys):
    respx_mock.get(f"{BASE_URL}/v1/teams").mock(
        return_value=Response(200, json={"teams": []})
    )
    route = respx_mock.get(f"{BASE_URL}/v1/teams/myteam/posts").mock(
        return_value=Response(200, json={"posts": [], "next_page": None})
    )

    code = main(["myteam", "--search", "tag:a", "--page", "2"], client=client)

    assert code == 0
    params = route.calls.last.request.url.params
    assert params["page"] == "2"
    assert params["q"] == "tag:a"


def test_main_returns_1_on_error(client, respx_mock):
    respx_mock.get(f"{BASE_URL}/v1/teams").mock(return_value=Response(401))

    assert main([], client=client) == 1


def test_main_leaves_caller_client_open(client, respx_mock):
    respx_mock.get(f"{BASE_URL}/v1/teams").mock(
        return_value=Response(200, json={"teams": []})
    )

    assert main([], client=client) == 0
    assert not client.client.is_closed

    client.close()


def test_main_closes_own_client(client, respx_mock, monkeypatch):
    respx_mock.get(f"{BASE_URL}/v1/teams").mock(
        return_value=Response(200, json={"teams": []})
    )
    monkeypatch.setattr("main.EsaClient", lambda: client)

    assert main([]) == 0
    assert client.client.is_closed
