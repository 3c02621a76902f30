import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from tagwatch.http_sender import HttpSender, encode_payload


def test_empty_payload():
    assert encode_payload([]) == "[]"


def test_payload_is_compact_json_array():
    assert encode_payload([1, 2, 4]) == "[1,2,4]"


def test_payload_round_trip():
    values = [0, 255, 3, 3]
    assert json.loads(encode_payload(values)) == values


@pytest.mark.parametrize("bad", [256, -1, 1.5, "1", True])
def test_payload_rejects_bad_values(bad):
    with pytest.raises(ValueError):
        encode_payload([bad])


def make_server(status):
    received = []

    class Handler(BaseHTTPRequestHandler):
        def do_POST(self):
            length = int(self.headers["Content-Length"])
            received.append((self.path, self.headers["Content-Type"], self.rfile.read(length)))
            self.send_response(status)
            self.send_header("Content-Length", "0")
            self.end_headers()

        def log_message(self, *args):
            pass

    server = HTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server, thread, received


@pytest.fixture
def ok_server():
    server, thread, received = make_server(200)
    yield server, received
    server.shutdown()
    server.server_close()
    thread.join()


@pytest.fixture
def failing_server():
    server, thread, received = make_server(500)
    yield server, received
    server.shutdown()
    server.server_close()
    thread.join()


def test_send_posts_json(ok_server):
    server, received = ok_server
    sender = HttpSender("127.0.0.1", server.server_address[1])
    assert sender.send([2, 0]) is True
    assert received == [("/", "application/json", b"[2,0]")]


def test_send_empty(ok_server):
    server, received = ok_server
    sender = HttpSender("127.0.0.1", server.server_address[1])
    assert sender.send([]) is True
    assert received[0][2] == b"[]"


def test_send_reports_server_error(failing_server):
    server, received = failing_server
    sender = HttpSender("127.0.0.1", server.server_address[1])
    assert sender.send([1]) is False
    assert len(received) == 1


def test_send_unreachable_returns_false():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    sender = HttpSender("127.0.0.1", port, timeout=1.0)
    assert sender.send([1]) is False


def test_default_port():
    assert HttpSender("localhost").port == 80