import io
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from tilesrv.request import RawDataStream, Request, parse_query


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path.startswith("/ok"):
            payload = self.path.encode()
            self.send_response(200)
            self.send_header("Content-Type", "text/plain")
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)
        else:
            self.send_response(404)
            self.send_header("Content-Length", "0")
            self.end_headers()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_parse_query_splits_pairs():
    assert parse_query("a=1&b=two") == {"a": "1", "b": "two"}


def test_parse_query_decodes_before_splitting():
    assert parse_query("layers=a%2Cb&x=%3D") == {"layers": "a,b", "x": "="}


def test_parse_query_empty_and_bare_keys():
    assert parse_query("") == {}
    assert parse_query("flag&&k=v") == {"flag": "", "k": "v"}


def test_parse_query_first_occurrence_wins():
    assert parse_query("k=first&k=second") == {"k": "first"}


def test_from_environ_lowercases_keys_and_strips_slash():
    environ = {
        "REQUEST_METHOD": "GET",
        "SCRIPT_NAME": "/wms/",
        "QUERY_STRING": "SERVICE=WMS&Request=GetCapabilities",
    }
    request = Request.from_environ(environ, None)
    assert request.method == "GET"
    assert request.path == "/wms"
    assert request.query_params == {"service": "WMS", "request": "GetCapabilities"}
    assert request.body == ""
    assert request.incoming is True


def test_from_environ_reads_body_for_post():
    environ = {"REQUEST_METHOD": "POST", "SCRIPT_NAME": "/admin", "QUERY_STRING": ""}
    request = Request.from_environ(environ, io.BytesIO(b"{\"a\": 1}"))
    assert request.body == "{\"a\": 1}\n"
    assert request.path == "/admin"


def test_from_environ_ignores_body_for_get():
    environ = {"REQUEST_METHOD": "GET", "SCRIPT_NAME": "/x", "QUERY_STRING": ""}
    request = Request.from_environ(environ, io.BytesIO(b"ignored"))
    assert request.body == ""


def test_query_param_access():
    request = Request("GET", "http://example.com/wms", {"layer": "ortho"})
    assert request.has_query_param("layer")
    assert not request.has_query_param("style")
    assert request.get_query_param("layer") == "ortho"
    assert request.get_query_param("style") == ""


def test_to_string_sorts_parameters():
    request = Request("GET", "", {"b": "2", "a": "1"}, path="/wms")
    assert request.to_string() == "GET /wms?a=1&b=2"


@pytest.mark.parametrize(
    "value, default, expected",
    [
        (None, False, False),
        ("true", False, True),
        ("1", False, True),
        ("yes", False, False),
        (None, True, True),
        ("false", True, False),
        ("0", True, False),
        ("anything", True, True),
    ],
)
def test_is_inspire(value, default, expected):
    params = {} if value is None else {"inspire": value}
    request = Request("GET", "", params)
    assert request.is_inspire(default) is expected


def test_send_refuses_incoming_request():
    request = Request.from_environ({"REQUEST_METHOD": "GET", "SCRIPT_NAME": "/a"}, None)
    with pytest.raises(RuntimeError):
        request.send()


def test_send_returns_body_and_mime_type(server_url):
    request = Request("GET", server_url + "/ok", {"k": "v"})
    stream = request.send()
    assert isinstance(stream, RawDataStream)
    assert stream.data == b"/ok?k=v"
    assert stream.mime_type == "text/plain"
    assert len(stream) == len(stream.data)


def test_send_raises_on_http_error(server_url):
    request = Request("GET", server_url + "/missing", {})
    with pytest.raises(ConnectionError):
        request.send()


def test_send_raises_on_unreachable_host():
    request = Request("GET", "http://127.0.0.1:1/none", {})
    with pytest.raises(ConnectionError):
        request.send()