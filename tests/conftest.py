import socket, threading

import pytest
from werkzeug.serving import make_server

from test_server.local_echo_server import app


@pytest.fixture
def echo_server():
    """Flask echo app on a free local port"""
    server = make_server('127.0.0.1', 0, app)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server.host, server.port
    server.shutdown()
    thread.join(timeout=5)


class OneShotServer:
    """Accepts one connection, records the request and answers with canned bytes"""

    def __init__(self, response):
        self.response = response
        self.received = b''
        self.listener = socket.socket()
        self.listener.bind(('127.0.0.1', 0))
        self.listener.listen(1)
        self.port = self.listener.getsockname()[1]
        self.thread = threading.Thread(target=self._serve, daemon=True)
        self.thread.start()

    def _serve(self):
        conn, _ = self.listener.accept()
        with conn:
            buf = b''
            while b'\r\n\r\n' not in buf:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                buf += chunk
            head, _, body = buf.partition(b'\r\n\r\n')
            for line in head.split(b'\r\n')[1:]:
                key, _, value = line.partition(b':')
                if key.strip().lower() == b'content-length':
                    while len(body) < int(value):
                        chunk = conn.recv(4096)
                        if not chunk:
                            break
                        body += chunk
            self.received = head + b'\r\n\r\n' + body
            conn.sendall(self.response)

    def close(self):
        self.thread.join(timeout=5)
        self.listener.close()


@pytest.fixture
def raw_server():
    servers = []

    def start(response=b"HTTP/1.1 200 OK\r\nContent-Length: 2\r\nConnection: close\r\n\r\nok"):
        server = OneShotServer(response)
        servers.append(server)
        return server

    yield start
    for server in servers:
        server.close()


@pytest.fixture
def no_network(monkeypatch):
    """Fail the test if anything tries to open a connection"""
    def refuse(*args, **kwargs):
        raise AssertionError("network connection attempted")
    monkeypatch.setattr(socket, 'create_connection', refuse)
