"""TCP and UDP sockets, socket addresses and readiness selection."""

from __future__ import annotations

import ipaddress
import select
import socket
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum


class SocketAddressFamily(IntEnum):
    INET = socket.AF_INET
    INET6 = socket.AF_INET6


@dataclass(frozen=True)
class SocketAddress:
    """A host and port of one address family."""

    family: SocketAddressFamily
    host: str
    port: int

    @property
    def sockaddr(self) -> tuple[str, int]:
        """The address in the form the socket module takes."""
        return (self.host, self.port)

    def __str__(self) -> str:
        if self.family == SocketAddressFamily.INET6:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


def _check_port(port: int) -> int:
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return port


def _parse_port(text: str) -> int:
    if not text.isdigit():
        raise ValueError(f"invalid port: {text!r}")
    return _check_port(int(text))


def _resolve(host: str, family: SocketAddressFamily) -> str:
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        ip = None
    if ip is not None:
        expected = 4 if family == SocketAddressFamily.INET else 6
        if ip.version != expected:
            raise ValueError(f"{host!r} is not an IPv{expected} address")
        return str(ip)
    if not host:
        raise ValueError("empty host name")
    try:
        infos = socket.getaddrinfo(host, None, family)
    except socket.gaierror as exc:
        raise ValueError(f"cannot resolve host {host!r}") from exc
    return infos[0][4][0]


def _address_from_sockaddr(family: int, sockaddr: tuple) -> SocketAddress:
    return SocketAddress(SocketAddressFamily(family), sockaddr[0], sockaddr[1])


def create_empty_address() -> SocketAddress:
    """An IPv4 address of all zeros with port 0."""
    return SocketAddress(SocketAddressFamily.INET, "0.0.0.0", 0)


def create_ipv4(address: int, port: int = 0) -> SocketAddress:
    """An IPv4 address from a 32-bit host-order number and a port."""
    if not 0 <= address <= 0xFFFFFFFF:
        raise ValueError(f"IPv4 address out of range: {address}")
    host = str(ipaddress.IPv4Address(address))
    return SocketAddress(SocketAddressFamily.INET, host, _check_port(port))


def create_ipv4_from_string(text: str) -> SocketAddress:
    """An IPv4 address from ``host`` or ``host:port``; host names are resolved."""
    host, sep, port_text = text.rpartition(":")
    if not sep:
        host, port = text, 0
    else:
        port = _parse_port(port_text)
    family = SocketAddressFamily.INET
    return SocketAddress(family, _resolve(host, family), port)


def create_ipv6_from_string(text: str) -> SocketAddress:
    """An IPv6 address from ``host``, ``[host]`` or ``[host]:port``."""
    family = SocketAddressFamily.INET6
    if text.startswith("["):
        end = text.find("]")
        if end < 0:
            raise ValueError(f"missing ']' in {text!r}")
        host, rest = text[1:end], text[end + 1 :]
        if not rest:
            port = 0
        elif rest.startswith(":"):
            port = _parse_port(rest[1:])
        else:
            raise ValueError(f"unexpected text after address: {rest!r}")
    else:
        try:
            ipaddress.IPv6Address(text)
        except ValueError:
            host, sep, port_text = text.rpartition(":")
            if not sep:
                host, port = text, 0
            else:
                port = _parse_port(port_text)
        else:
            host, port = text, 0
    return SocketAddress(family, _resolve(host, family), port)


class _SocketBase:
    """Owns an operating-system socket."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    @property
    def family(self) -> SocketAddressFamily:
        return SocketAddressFamily(self._sock.family)

    @property
    def local_address(self) -> SocketAddress:
        """The address this socket is bound to."""
        return _address_from_sockaddr(self._sock.family, self._sock.getsockname())


def retrieve_address_from_socket(sock: _SocketBase) -> SocketAddress:
    """The address of the peer a socket is connected to."""
    return _address_from_sockaddr(sock._sock.family, sock._sock.getpeername())


class TCPSocket(_SocketBase):
    """A stream socket."""

    def connect(self, address: SocketAddress) -> None:
        self._sock.connect(address.sockaddr)

    def bind(self, address: SocketAddress) -> None:
        self._sock.bind(address.sockaddr)

    def listen(self, backlog: int = 32) -> None:
        self._sock.listen(backlog)

    def accept(self) -> tuple[TCPSocket, SocketAddress]:
        """Take the next incoming connection and the address it came from."""
        conn, sockaddr = self._sock.accept()
        return TCPSocket(conn), _address_from_sockaddr(conn.family, sockaddr)

    def send(self, data: bytes) -> int:
        """Send some of ``data``; returns the number of bytes sent."""
        return self._sock.send(data)

    def receive(self, length: int) -> bytes:
        """Up to ``length`` bytes; empty when the peer has closed."""
        return self._sock.recv(length)

    def fileno(self) -> int:
        return self._sock.fileno()

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> TCPSocket:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class UDPSocket(_SocketBase):
    """A datagram socket."""

    def bind(self, address: SocketAddress) -> None:
        self._sock.bind(address.sockaddr)

    def send_to(self, data: bytes, address: SocketAddress) -> int:
        return self._sock.sendto(data, address.sockaddr)

    def receive_from(self, length: int) -> tuple[bytes, SocketAddress]:
        """One datagram of at most ``length`` bytes and its sender."""
        data, sockaddr = self._sock.recvfrom(length)
        return data, _address_from_sockaddr(self._sock.family, sockaddr)

    def set_non_blocking(self, non_blocking: bool) -> None:
        self._sock.setblocking(not non_blocking)

    def fileno(self) -> int:
        return self._sock.fileno()

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> UDPSocket:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_tcp_socket(
    family: SocketAddressFamily = SocketAddressFamily.INET,
) -> TCPSocket:
    return TCPSocket(socket.socket(SocketAddressFamily(family), socket.SOCK_STREAM))


def create_udp_socket(
    family: SocketAddressFamily = SocketAddressFamily.INET,
) -> UDPSocket:
    return UDPSocket(socket.socket(SocketAddressFamily(family), socket.SOCK_DGRAM))


def select_sockets(
    read_sockets: Sequence[_SocketBase] = (),
    write_sockets: Sequence[_SocketBase] = (),
    except_sockets: Sequence[_SocketBase] = (),
    timeout: float | None = None,
) -> tuple[list, list, list]:
    """The sockets of each sequence that are ready, in their given order.

    Waits at most ``timeout`` seconds, or until one is ready when it is None.
    """
    if not (read_sockets or write_sockets or except_sockets):
        raise ValueError("no sockets to select on")
    readable, writable, exceptional = select.select(
        list(read_sockets), list(write_sockets), list(except_sockets), timeout
    )

    def in_order(given: Sequence[_SocketBase], ready: list) -> list:
        ready_ids = {id(s) for s in ready}
        return [s for s in given if id(s) in ready_ids]

    return (
        in_order(read_sockets, readable),
        in_order(write_sockets, writable),
        in_order(except_sockets, exceptional),
    )