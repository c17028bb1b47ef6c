import threading

from sampo.chat import (
    CLIENT_GREETING,
    SERVER_GREETING,
    SERVER_REPLY,
    TCPClientLayer,
    TCPServerLayer,
)
from sampo.network import create_ipv4_from_string, create_tcp_socket


def _free_port():
    with create_tcp_socket() as sock:
        sock.bind(create_ipv4_from_string("127.0.0.1:0"))
        return sock.local_address.port


def test_messages_are_zero_padded():
    assert len(SERVER_GREETING) == 25
    assert SERVER_GREETING.startswith(b"Hello World, Client!\0")
    assert len(SERVER_REPLY) == 24
    assert SERVER_REPLY.rstrip(b"\0") == b"Hello again, client!"
    assert len(CLIENT_GREETING) == 24
    assert CLIENT_GREETING.rstrip(b"\0") == b"Hello World, Server!"


def test_full_exchange():
    server = TCPServerLayer("127.0.0.1:0")
    server.select_timeout = 5.0
    server.on_attach()
    try:
        assert server.running
        port = server.listen_socket.local_address.port
        client = TCPClientLayer(f"127.0.0.1:{port}")
        thread = threading.Thread(target=client.on_attach)
        thread.start()

        server.on_update(0.0)
        assert len(server.sockets) == 2
        server.on_update(0.0)
        thread.join(timeout=5)
        assert not thread.is_alive()

        assert client.connected
        assert client.received == [SERVER_GREETING, SERVER_REPLY]
        assert len(server.received) == 1
        origin, message = server.received[0]
        assert message == CLIENT_GREETING
        assert origin.host == "127.0.0.1"

        server.on_update(0.0)
        assert server.sockets == [server.listen_socket]
    finally:
        server.on_detach()
    assert server.sockets == []
    assert not server.running


def test_client_without_server():
    client = TCPClientLayer(f"127.0.0.1:{_free_port()}")
    client.on_attach()
    assert client.connected is False
    assert client.received == []


def test_server_cannot_bind_used_address():
    with create_tcp_socket() as existing:
        existing.bind(create_ipv4_from_string("127.0.0.1:0"))
        existing.listen()
        server = TCPServerLayer(str(existing.local_address))
        server.on_attach()
        assert server.running is False
        assert server.sockets == []
        server.on_update(0.0)
        assert server.received == []