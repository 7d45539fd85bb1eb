import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from httpprobe.client import RequestError
from httpprobe.debug import InfoType, fetch_with_debug, format_debug_line, main


class _Handler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def _send(self, status, body=b"", headers=()):
        self.send_response(status)
        for name, value in headers:
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        if self.path == "/redirect":
            self._send(302, headers=[("Location", "/echo")])
        elif self.path == "/loop":
            self._send(302, headers=[("Location", "/loop")])
        else:
            self._send(200, b'{"id":1}', [("Content-Type", "application/json")])

    def log_message(self, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def _closed_port():
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.mark.parametrize(
    "info_type, label",
    [
        (InfoType.TEXT, "TEXT"),
        (InfoType.HEADER_IN, "HEADER_IN"),
        (InfoType.HEADER_OUT, "HEADER_OUT"),
        (InfoType.DATA_IN, "DATA_IN"),
        (InfoType.DATA_OUT, "DATA_OUT"),
        (InfoType.SSL_DATA_IN, "SSL_DATA_IN"),
        (InfoType.SSL_DATA_OUT, "SSL_DATA_OUT"),
        (99, "UNKNOWN"),
    ],
)
def test_labels(info_type, label):
    assert format_debug_line(info_type, b"x") == f"[DEBUG][{label}] x"


def test_plain_int_maps_to_type():
    assert format_debug_line(2, b"GET / HTTP/1.1") == "[DEBUG][HEADER_OUT] GET / HTTP/1.1"


def test_single_trailing_newline_is_removed():
    assert format_debug_line(InfoType.TEXT, b"hello\n") == "[DEBUG][TEXT] hello"
    assert format_debug_line(InfoType.TEXT, b"a\n\n") == "[DEBUG][TEXT] a\n"
    assert format_debug_line(InfoType.TEXT, b"a\r\n") == "[DEBUG][TEXT] a\r"


def test_text_input_and_empty_data():
    assert format_debug_line(InfoType.TEXT, "ALPN: h2\n") == "[DEBUG][TEXT] ALPN: h2"
    assert format_debug_line(InfoType.DATA_IN, b"") == "[DEBUG][DATA_IN] "


def test_fetch_reports_events(base_url):
    events = []
    response = fetch_with_debug(f"{base_url}/echo", lambda t, d: events.append((t, d)))
    assert response.status == 200
    header_out = [d for t, d in events if t is InfoType.HEADER_OUT]
    assert header_out[0].startswith(b"GET /echo HTTP/1.1\r\n")
    assert b"User-Agent: libcurl-test/1.0\r\n" in header_out[0]
    header_in = [d for t, d in events if t is InfoType.HEADER_IN]
    assert header_in[0].startswith(b"HTTP/1.0 200") or header_in[0].startswith(b"HTTP/1.1 200")
    assert b"".join(d for t, d in events if t is InfoType.DATA_IN) == response.body
    assert any(t is InfoType.TEXT and d.startswith(b"Connected to 127.0.0.1") for t, d in events)


def test_fetch_follows_redirects(base_url):
    events = []
    response = fetch_with_debug(f"{base_url}/redirect", lambda t, d: events.append((t, d)))
    assert response.status == 200
    assert response.url == f"{base_url}/echo"
    assert any(b"Issue another request" in d for t, d in events if t is InfoType.TEXT)


def test_redirect_loop_is_bounded(base_url):
    with pytest.raises(RequestError, match="Maximum"):
        fetch_with_debug(f"{base_url}/loop", lambda t, d: None)


def test_main_prints_log_and_result(base_url, capsys):
    assert main([f"{base_url}/echo"]) == 0
    out = capsys.readouterr().out
    assert "[DEBUG][HEADER_OUT] GET /echo HTTP/1.1" in out
    assert "=== 최종 결과 ===" in out
    assert "HTTP 응답 코드: 200" in out
    assert '응답 데이터:\n{"id":1}' in out


def test_main_reports_failure(capsys):
    assert main([f"http://127.0.0.1:{_closed_port()}/"]) == 0
    captured = capsys.readouterr()
    assert "요청 실패" in captured.err
    assert "=== 최종 결과 ===" not in captured.out