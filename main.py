"""
Description:
    esa client 命令行入口

    Usage:
        # 列出 team
        python main.py

        # 列出 team 并获取单篇记事
        python main.py myteam 42

        # 检索记事（--search 可重复，不带冒号视为自由文本）
        python main.py myteam --search tag:a --search wip:false --page 2

    需要配置 ESA_ACCESS_TOKEN 环境变量（或 .env）。
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from esa_client.core.client import EsaClient, EsaError
from esa_client.core.config import settings

logger = logging.getLogger(__name__)


def _parse_search(terms: List[str]) -> List[Tuple[str, str]]:
    """'tag:a' -> ('tag', 'a')，'free' -> ('', 'free')"""
    pairs = []
    for term in terms:
        key, sep, value = term.partition(":")
        pairs.append((key, value) if sep else ("", term))
    return pairs


def _dump(model) -> None:
    print(json.dumps(model.model_dump(mode="json"), indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="esa API 读取工具")
    parser.add_argument("team", nargs="?", help="team 名")
    parser.add_argument("number", nargs="?", type=int, help="记事编号")
    parser.add_argument(
        "--search", action="append", default=[], help="检索条件 KEY:VALUE（可重复）"
    )
    parser.add_argument("--page", type=str, help="页码")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[EsaClient] = None) -> int:
    """主入口，返回进程退出码"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    owns_client = client is None
    client = client or EsaClient()
    try:
        _dump(client.team.list_teams())

        if args.team and (args.search or args.page):
            filters = _parse_search(args.search)
            if args.page:
                filters.append(("page", args.page))
            _dump(client.post.list_posts(args.team, filters))
        elif args.team and args.number is not None:
            _dump(client.post.get_post(args.team, args.number))
    except EsaError as e:
        logger.error("esa request failed: %s", e)
        return 1
    finally:
        # 调用方传入的 client 由调用方负责关闭
        if owns_client:
            client.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
