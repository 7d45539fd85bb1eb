"""Send simple HTTP requests with a fixed user agent and report the results."""

from __future__ import annotations

import argparse
import http.client
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union
from urllib.parse import urljoin, urlsplit

USER_AGENT = "libcurl-test/1.0"
BASE_URL = "https://jsonplaceholder.typicode.com"
MAX_REDIRECTS = 30

_REDIRECT_CODES = frozenset({301, 302, 303, 307, 308})
_VERSIONS = {9: "HTTP/0.9", 10: "HTTP/1.0", 11: "HTTP/1.1"}

EventSink = Callable[[str, bytes], None]


class RequestError(Exception):
    """The request could not be carried out (connection, protocol or URL failure)."""


@dataclass(frozen=True)
class HttpResponse:
    """The outcome of one completed HTTP exchange."""

    url: str
    status: int
    body: bytes
    headers: tuple[tuple[str, str], ...] = ()
    primary_ip: Optional[str] = None
    http_version: str = "HTTP/1.1"

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def header(self, name: str) -> Optional[str]:
        """Return the first header value with this name, ignoring case."""
        wanted = name.lower()
        return next((v for k, v in self.headers if k.lower() == wanted), None)


def _latin1(text: str) -> bytes:
    return text.encode("latin-1", errors="replace")


def _exchange(url, method, body, extra_headers, emit, connect_timeout, timeout) -> HttpResponse:
    parts = urlsplit(url)
    try:
        port = parts.port
    except ValueError as exc:
        raise RequestError(f"malformed URL: {url!r}") from exc
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise RequestError(f"unsupported or malformed URL: {url!r}")
    host = parts.hostname
    https = parts.scheme == "https"
    port = port or (443 if https else 80)
    path = (parts.path or "/") + (f"?{parts.query}" if parts.query else "")

    factory = http.client.HTTPSConnection if https else http.client.HTTPConnection
    conn = factory(host, port, timeout=connect_timeout)
    header_pairs = [
        ("Host", parts.netloc.rpartition("@")[2]),
        ("User-Agent", USER_AGENT),
        ("Accept", "*/*"),
        *extra_headers,
    ]
    if body is not None:
        header_pairs.append(("Content-Length", str(len(body))))

    try:
        emit("TEXT", f"Trying {host}:{port}...\n".encode())
        conn.connect()
        peer_ip = conn.sock.getpeername()[0]
        conn.sock.settimeout(timeout)
        emit("TEXT", f"Connected to {host} ({peer_ip}) port {port}\n".encode())

        conn.putrequest(method, path, skip_host=True, skip_accept_encoding=True)
        for name, value in header_pairs:
            conn.putheader(name, value)
        conn.endheaders(body)
        head = f"{method} {path} HTTP/1.1\r\n"
        head += "".join(f"{n}: {v}\r\n" for n, v in header_pairs) + "\r\n"
        emit("HEADER_OUT", _latin1(head))
        if body:
            emit("DATA_OUT", body)

        resp = conn.getresponse()
        version = _VERSIONS.get(resp.version, "HTTP/1.1")
        headers = tuple(resp.getheaders())
        emit("HEADER_IN", _latin1(f"{version} {resp.status} {resp.reason}\r\n"))
        for name, value in headers:
            emit("HEADER_IN", _latin1(f"{name}: {value}\r\n"))
        emit("HEADER_IN", b"\r\n")

        chunks = []
        while chunk := resp.read(16384):
            chunks.append(chunk)
            emit("DATA_IN", chunk)
    except (OSError, http.client.HTTPException) as exc:
        raise RequestError(f"{host}:{port}: {exc}") from exc
    finally:
        conn.close()

    return HttpResponse(url, resp.status, b"".join(chunks), headers, peer_ip, version)


def _perform(
    url: str,
    method: str,
    body: Optional[bytes],
    extra_headers: Sequence[tuple[str, str]],
    *,
    on_event: Optional[EventSink] = None,
    follow_redirects: bool = False,
    connect_timeout: Optional[float] = None,
    timeout: Optional[float] = None,
    max_redirects: int = MAX_REDIRECTS,
) -> HttpResponse:
    """Run a request, optionally following redirects and reporting wire events."""

    def emit(kind: str, data: bytes) -> None:
        if on_event is not None:
            on_event(kind, data)

    headers = list(extra_headers)
    for redirects in range(max_redirects + 1):
        response = _exchange(url, method, body, headers, emit, connect_timeout, timeout)
        location = response.header("Location")
        if not follow_redirects or response.status not in _REDIRECT_CODES or location is None:
            return response
        if redirects == max_redirects:
            break
        url = urljoin(url, location)
        emit("TEXT", f"Issue another request to this URL: '{url}'\n".encode())
        if response.status == 303 or (response.status in (301, 302) and method == "POST"):
            method, body = "GET", None
            headers = [(k, v) for k, v in headers if k.lower() != "content-type"]
    raise RequestError(f"Maximum ({max_redirects}) redirects followed")


def send_request(
    url: str,
    method: str = "GET",
    data: Union[str, bytes, None] = None,
    content_type: Optional[str] = None,
) -> HttpResponse:
    """Send one request; POST, PUT and DELETE are honoured, anything else is a GET.

    HTTP error statuses are returned, not raised; redirects are not followed.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else data
    body: Optional[bytes] = None
    if method == "POST":
        body = payload if payload is not None else b""
    elif method == "PUT":
        body = payload
    elif method != "DELETE":
        method = "GET"

    headers: list[tuple[str, str]] = []
    if content_type:
        headers.append(("Content-Type", content_type))
    elif body is not None:
        headers.append(("Content-Type", "application/x-www-form-urlencoded"))
    return _perform(url, method, body, headers)


def format_response(method: str, url: str, response: HttpResponse) -> str:
    """Render a response block as the report prints it."""
    return (
        f"=== {method} {url} ===\n"
        f"HTTP 응답 코드: {response.status}\n"
        f"응답 데이터:\n{response.text}\n\n"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    argparse.ArgumentParser(
        prog="httpprobe", description="Run GET, POST, PUT and DELETE against a JSON posts API."
    ).parse_args(argv)

    print("HTTP 요청 테스트 시작")
    print("=" * 28 + "\n")

    post_data = '{"title":"httpprobe test","body":"This is a test post from httpprobe","userId":1}'
    put_data = (
        '{"id":1,"title":"Updated title from httpprobe",'
        '"body":"Updated body from httpprobe","userId":1}'
    )
    plan = [
        ("GET", f"{BASE_URL}/posts/1", None, None),
        ("POST", f"{BASE_URL}/posts", post_data, "application/json"),
        ("PUT", f"{BASE_URL}/posts/1", put_data, "application/json"),
        ("DELETE", f"{BASE_URL}/posts/1", None, None),
    ]
    for method, url, data, content_type in plan:
        try:
            response = send_request(url, method, data, content_type)
        except RequestError as exc:
            print(f"요청 실패: {exc}", file=sys.stderr)
            continue
        print(format_response(method, url, response), end="")

    print("테스트 완료!")
    return 0


if __name__ == "__main__":
    sys.exit(main())