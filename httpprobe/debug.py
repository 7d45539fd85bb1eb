"""Fetch a URL while printing a line for every wire event of the exchange."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Callable, Optional, Sequence, Union

from httpprobe.client import HttpResponse, RequestError, _perform

DEFAULT_URL = "https://jsonplaceholder.typicode.com/posts/1"
CONNECT_TIMEOUT = 10
TOTAL_TIMEOUT = 30


class InfoType(IntEnum):
    """Kinds of debug events reported during a transfer."""

    TEXT = 0
    HEADER_IN = 1
    HEADER_OUT = 2
    DATA_IN = 3
    DATA_OUT = 4
    SSL_DATA_IN = 5
    SSL_DATA_OUT = 6


DebugSink = Callable[[InfoType, bytes], None]


def format_debug_line(info_type: Union[InfoType, int], data: Union[bytes, str]) -> str:
    """Format one debug event; a single trailing newline is dropped."""
    try:
        label = InfoType(info_type).name
    except ValueError:
        label = "UNKNOWN"
    if isinstance(data, (bytes, bytearray)):
        text = bytes(data).decode("utf-8", errors="replace")
    else:
        text = str(data)
    if text.endswith("\n"):
        text = text[:-1]
    return f"[DEBUG][{label}] {text}"


def _print_event(info_type: InfoType, data: bytes) -> None:
    print(format_debug_line(info_type, data))


def fetch_with_debug(url: str, sink: Optional[DebugSink] = None) -> HttpResponse:
    """GET a URL, following redirects, and pass every wire event to the sink."""
    deliver = sink if sink is not None else _print_event

    def on_event(kind: str, data: bytes) -> None:
        deliver(InfoType[kind], data)

    return _perform(
        url,
        "GET",
        None,
        [],
        on_event=on_event,
        follow_redirects=True,
        connect_timeout=CONNECT_TIMEOUT,
        timeout=TOTAL_TIMEOUT,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="httpprobe-debug", description="Fetch a URL and print a detailed transfer log."
    )
    parser.add_argument("url", nargs="?", default=DEFAULT_URL, help="URL to request")
    args = parser.parse_args(argv)

    print("=== 디버그 테스트 시작 ===\n")
    print(f"요청 URL: {args.url}\n")
    print("=== 디버그 로그 시작 ===")
    print("(아래에 상세한 디버그 정보가 출력됩니다)")
    print("=" * 37 + "\n")

    try:
        response = fetch_with_debug(args.url)
    except RequestError as exc:
        print("\n=== 디버그 로그 종료 ===\n")
        print(f"요청 실패: {exc}", file=sys.stderr)
        return 0

    print("\n=== 디버그 로그 종료 ===\n")
    print("=== 최종 결과 ===")
    print(f"HTTP 응답 코드: {response.status}")
    print(f"응답 데이터:\n{response.text}")
    print("================")
    return 0


if __name__ == "__main__":
    sys.exit(main())