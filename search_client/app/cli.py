import sys
import json
import asyncio
import argparse
import logging
import traceback

from search_client.app.api_client import SearchApiClient
from search_client.app.config import client_settings
from search_client.app.orchestrator import SearchOrchestrator, SearchState


def render(state: SearchState) -> None:
    if state.loading:
        print("Loading…")
        return
    if state.error:
        print(f"error: {state.error}")
    print(f"results: {len(state.results)}")
    for hit in state.results:
        print(json.dumps(hit, ensure_ascii=False))


async def run_watch(api: SearchApiClient, delay: float) -> None:
    """
    표준입력 한 줄 = 검색창 입력 변경 1회.
    빠르게 들어온 줄들은 debounce 되어 마지막 검색어만 조회된다.
    """
    async with SearchOrchestrator(api.search, delay=delay, on_change=render) as orch:
        while True:
            line = await asyncio.to_thread(sys.stdin.readline)
            if not line:
                break
            orch.set_query(line.rstrip("\n"))
        await orch.settle()


async def run(args) -> int:
    async with SearchApiClient(args.api_url, timeout=args.timeout) as api:
        if args.mode == 'search':
            hits = await api.search(args.query, offset=args.offset, limit=args.size)
            render(SearchState(results=hits))

        elif args.mode == 'upload':
            if not args.file:
                print("No file selected")
                return 1
            doc_id = await api.upload(args.file)
            print(f"Indexed with ID {doc_id}")

        elif args.mode == 'clear':
            res = await api.clear()
            print(f"clear index success: {json.dumps(res, ensure_ascii=False)}")

        elif args.mode == 'watch':
            await run_watch(api, args.delay)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doc-search")
    parser.add_argument(
        '--mode',
        '-m',
        help='execution mode \
            (search: one-shot search, \
            upload: index a file, \
            clear: delete the document index, \
            watch: debounced search over stdin lines)',
        choices=['search', 'upload', 'clear', 'watch'],
        default='watch',
        dest='mode')
    parser.add_argument(
        '--query',
        '-q',
        default='',
        help='search query (search mode)',
        dest='query')
    parser.add_argument(
        '--from',
        type=int,
        default=None,
        help='result offset (search mode)',
        dest='offset')
    parser.add_argument(
        '--size',
        '-s',
        type=int,
        default=None,
        help='result count (search mode)',
        dest='size')
    parser.add_argument(
        '--file',
        '-f',
        help='file to upload, e.g. report.pdf (upload mode)',
        dest='file')
    parser.add_argument(
        '--api_url',
        '-u',
        default=client_settings.SEARCH_API_URL,
        help='api url',
        dest='api_url')
    parser.add_argument(
        '--delay',
        type=float,
        default=client_settings.SEARCH_DEBOUNCE_SECONDS,
        help='debounce delay in seconds (watch mode)',
        dest='delay')
    parser.add_argument(
        '--timeout',
        type=float,
        default=client_settings.SEARCH_HTTP_TIMEOUT,
        help='http timeout in seconds',
        dest='timeout')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    try:
        return asyncio.run(run(args))
    except Exception as e:
        print(f'error: {e}')
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
