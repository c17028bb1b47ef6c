"""A TCP chat server and client, each run as a layer."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from sampo.console_arguments import ConsoleArguments
from sampo.layer import Layer, LayerStack
from sampo.log import TRACE, get_client_logger, setup_logging
from sampo.network import (
    SocketAddress,
    SocketAddressFamily,
    TCPSocket,
    create_ipv4_from_string,
    create_tcp_socket,
    retrieve_address_from_socket,
    select_sockets,
)
from sampo.timestep import Timestep

SEGMENT_SIZE = 1500
DEFAULT_ADDRESS = "192.168.2.138:48000"

SERVER_GREETING = b"Hello World, Client!".ljust(25, b"\0")
SERVER_REPLY = b"Hello again, client!".ljust(24, b"\0")
CLIENT_GREETING = b"Hello World, Server!".ljust(24, b"\0")


def _text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class TCPServerLayer(Layer):
    """Accepts clients, greets them and answers each message they send."""

    def __init__(self, address: str = DEFAULT_ADDRESS) -> None:
        super().__init__("TCPServer")
        self.address = address
        self.select_timeout: float | None = None
        self.listen_socket: TCPSocket | None = None
        self.sockets: list[TCPSocket] = []
        self.received: list[tuple[SocketAddress, bytes]] = []
        self.running = False
        self._log = get_client_logger()

    def on_attach(self) -> None:
        receiving = create_ipv4_from_string(self.address)
        listener = create_tcp_socket(SocketAddressFamily.INET)
        try:
            listener.bind(receiving)
            listener.listen()
        except OSError as exc:
            listener.close()
            self._log.error("Cannot start listening on %s: %s", receiving, exc)
            return
        self.listen_socket = listener
        self.sockets.append(listener)
        self.running = True
        self._log.log(
            TRACE, "Completed setup Receiving Address: %s", listener.local_address
        )

    def on_update(self, delta_time: Timestep) -> None:
        if not self.running:
            return
        readable, _, _ = select_sockets(self.sockets, timeout=self.select_timeout)
        for sock in readable:
            if sock is self.listen_socket:
                self._accept_client()
            else:
                self._serve_client(sock)

    def on_detach(self) -> None:
        for sock in self.sockets:
            sock.close()
        self.sockets.clear()
        self.listen_socket = None
        self.running = False

    def _accept_client(self) -> None:
        assert self.listen_socket is not None
        client, address = self.listen_socket.accept()
        self._log.log(TRACE, "Accept new client: %s", address)
        self.sockets.append(client)
        sent = client.send(SERVER_GREETING)
        self._log.log(
            TRACE, "Sending AKN message of %d bytes to new client: %s", sent, address
        )

    def _serve_client(self, sock: TCPSocket) -> None:
        try:
            data = sock.receive(SEGMENT_SIZE)
        except OSError:
            data = b""
        if not data:
            self.sockets.remove(sock)
            sock.close()
            return
        address = retrieve_address_from_socket(sock)
        self.received.append((address, data))
        self._log.log(
            TRACE,
            "Received packet of %d bytes from %s: message: '%s', Sending response...",
            len(data),
            address,
            _text(data),
        )
        sock.send(SERVER_REPLY)


class TCPClientLayer(Layer):
    """Connects to the server, exchanges greetings and disconnects."""

    def __init__(self, address: str = DEFAULT_ADDRESS) -> None:
        super().__init__("TCPClient")
        self.address = address
        self.connected = False
        self.received: list[bytes] = []
        self._log = get_client_logger()

    def on_attach(self) -> None:
        server = create_ipv4_from_string(self.address)
        self._log.log(TRACE, "Attempt connect to server on search address: %s", server)
        with create_tcp_socket(SocketAddressFamily.INET) as sock:
            try:
                sock.connect(server)
            except OSError:
                self._log.error("Couldn't get a connection going")
                return
            self.connected = True
            self._log.log(
                TRACE, "Connected to server: %s, waiting to get a response...", server
            )

            try:
                greeting = sock.receive(SEGMENT_SIZE)
            except OSError:
                self._log.error("Unable to receive the data")
                return
            self.received.append(greeting)
            self._log.log(
                TRACE,
                "Received Server AKN message: '%s', sending AKN response",
                _text(greeting),
            )

            try:
                sent = sock.send(CLIENT_GREETING)
            except OSError:
                sent = 0
            if not sent:
                self._log.error("Couldn't send the data!!")

            try:
                reply = sock.receive(SEGMENT_SIZE)
            except OSError:
                self._log.error("Unable to receive the data")
                return
            self.received.append(reply)


def _address_from(argv: Sequence[str] | None) -> str:
    arguments = ConsoleArguments(sys.argv[1:] if argv is None else argv)
    return arguments.get_string("address") or DEFAULT_ADDRESS


def server_main(argv: Sequence[str] | None = None) -> int:
    """Run the chat server until interrupted; ``-address host:port`` sets where."""
    address = _address_from(argv)
    setup_logging()
    layer = TCPServerLayer(address)
    stack = LayerStack()
    stack.push_layer(layer)
    layer.on_attach()
    try:
        if not layer.running:
            return 1
        last = time.perf_counter()
        while layer.running:
            now = time.perf_counter()
            step = Timestep(now - last)
            last = now
            for item in stack:
                item.on_update(step)
    except KeyboardInterrupt:
        pass
    finally:
        stack.pop_layer(layer)
        layer.on_detach()
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Run one chat exchange with the server; ``-address host:port`` sets where."""
    address = _address_from(argv)
    setup_logging()
    layer = TCPClientLayer(address)
    stack = LayerStack()
    stack.push_layer(layer)
    layer.on_attach()
    stack.pop_layer(layer)
    layer.on_detach()
    return 0 if layer.connected and len(layer.received) == 2 else 1