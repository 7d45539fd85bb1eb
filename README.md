# httpprobe

Small command-line tools for sending HTTP requests and looking at what comes back. Only the standard library is used.

## Installation

```
pip install .
```

## Commands

`httpprobe` sends a GET, POST, PUT and DELETE request to a sample JSON posts API (`https://jsonplaceholder.typicode.com`). For each request it prints the method, the URL, the HTTP status code and the response body. A request that fails to complete is reported on standard error and the run goes on with the next one.

```
httpprobe
```

`httpprobe-debug` fetches one URL with tracing turned on. It follows redirects, uses a 10 second connect timeout and a 30 second read timeout, and prints every event of the exchange as a `[DEBUG][TYPE] ...` line: connection messages (`TEXT`), the request head (`HEADER_OUT`), the request body (`DATA_OUT`), response headers (`HEADER_IN`) and body chunks (`DATA_IN`). The status code and body are printed at the end. Without an argument it fetches `https://jsonplaceholder.typicode.com/posts/1`.

```
httpprobe-debug
httpprobe-debug https://example.com/
```

## Library use

### `httpprobe.client`

```python
from httpprobe.client import send_request, format_response, RequestError

url = "https://jsonplaceholder.typicode.com/posts"
try:
    response = send_request(url, "POST", '{"title": "hello", "userId": 1}', "application/json")
    print(format_response("POST", url, response), end="")
except RequestError as exc:
    print(f"request failed: {exc}")
```

`send_request(url, method="GET", data=None, content_type=None)`:

- honours `POST`, `PUT` and `DELETE`; any other method is sent as `GET`;
- sends `data` (text is encoded as UTF-8) as the body of a POST or PUT; it is ignored for GET and DELETE;
- sets `Content-Type` to `content_type` when given, otherwise to `application/x-www-form-urlencoded` when there is a body;
- always sends the user agent `libcurl-test/1.0`;
- does not follow redirects, and returns HTTP error statuses rather than raising;
- raises `RequestError` when the URL is not `http`/`https` or is malformed, or when the connection or protocol fails.

It returns an `HttpResponse` with `url`, `status`, `body` (bytes), `headers` (name/value pairs), `primary_ip` (the peer address connected to), `http_version`, a `text` property (the body decoded as UTF-8) and `header(name)` for a case-insensitive header lookup.

`format_response(method, url, response)` renders the block that the `httpprobe` command prints.

### `httpprobe.debug`

```python
from httpprobe.debug import fetch_with_debug, format_debug_line, InfoType

lines = []
response = fetch_with_debug(
    "https://jsonplaceholder.typicode.com/posts/1",
    lambda kind, data: lines.append(format_debug_line(kind, data)),
)
print(format_debug_line(InfoType.TEXT, "done\n"))  # [DEBUG][TEXT] done
```

`fetch_with_debug(url, sink=None)` performs a GET, following redirects, and calls `sink(info_type, data)` for each event with an `InfoType` and the raw bytes; without a sink each event is printed. `format_debug_line(info_type, data)` turns an event into one line, dropping a single trailing newline; an unknown type is labelled `UNKNOWN`.

## What it does not do

Requests are plain HTTP/1.x over `http.client`. There is no HTTP/2 or HTTP/3, no choice between IPv4 and IPv6, no TLS-level trace events (`SSL_DATA_IN` and `SSL_DATA_OUT` exist in `InfoType` but are never produced), and no timing of requests.

## Tests

```
pip install .[test]
pytest
```