"""Host-system services: process control, random numbers, files and IPC sockets.

Every operation here works on the machine running the simulation. Failures
that must not pass unnoticed raise exceptions rather than returning codes.
"""

from __future__ import annotations

import os
import random
import select
import signal
import socket
import sys
import time
from typing import Any, Callable, NoReturn

from kernutil.debug import DBG_NET, Debug

RANDOM_MAX = 2**31 - 1

debug = Debug()
"""Controls the diagnostics printed by the socket routines; replace to enable."""

_rng = random.Random()


class ShortTransferError(OSError):
    """A read, write or packet transfer moved fewer bytes than required."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        super().__init__(f"{what}: expected {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


def call_on_user_abort(func: Callable[[int, Any], Any]) -> Any:
    """Arrange for ``func`` to be called when the user interrupts (Ctrl-C).

    Returns the handler that was installed before.
    """
    return signal.signal(signal.SIGINT, func)


def delay(seconds: float) -> None:
    """Put the process to sleep for ``seconds`` seconds."""
    if seconds < 0:
        raise ValueError("delay must not be negative")
    time.sleep(seconds)


def abort() -> NoReturn:
    """Quit at once and drop core."""
    os.abort()


def exit_program(exit_code: int) -> NoReturn:
    """Quit without dropping core, with ``exit_code`` as the status."""
    sys.exit(exit_code)


def random_init(seed: int) -> None:
    """Seed the pseudo-random number generator."""
    _rng.seed(seed)


def random_number() -> int:
    """Return a pseudo-random number between 0 and ``RANDOM_MAX``."""
    return _rng.randint(0, RANDOM_MAX)


def poll_file(fd: int) -> bool:
    """Return True if ``fd`` has data that can be read without waiting."""
    readable, _, _ = select.select([fd], [], [], 0)
    return bool(readable)


def open_for_write(name: str | os.PathLike[str]) -> int:
    """Open ``name`` for writing, creating or truncating it; return the descriptor."""
    return os.open(name, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o666)


def open_for_read_write(name: str | os.PathLike[str], crash_on_error: bool) -> int | None:
    """Open an existing file for reading and writing.

    If the file cannot be opened, the error is raised when ``crash_on_error``
    is true; otherwise None is returned.
    """
    try:
        return os.open(name, os.O_RDWR)
    except OSError:
        if crash_on_error:
            raise
        return None


def read(fd: int, n_bytes: int) -> bytes:
    """Read exactly ``n_bytes`` bytes from ``fd``."""
    data = os.read(fd, n_bytes)
    if len(data) != n_bytes:
        raise ShortTransferError("read", n_bytes, len(data))
    return data


def read_partial(fd: int, n_bytes: int) -> bytes:
    """Read up to ``n_bytes`` bytes from ``fd``, returning what is available."""
    return os.read(fd, n_bytes)


def write_file(fd: int, data: bytes) -> None:
    """Write all of ``data`` to ``fd``."""
    written = os.write(fd, data)
    if written != len(data):
        raise ShortTransferError("write", len(data), written)


def lseek(fd: int, offset: int, whence: int) -> int:
    """Move the position within ``fd``; return the new position."""
    return os.lseek(fd, offset, whence)


def tell(fd: int) -> int:
    """Return the current position within ``fd``."""
    return os.lseek(fd, 0, os.SEEK_CUR)


def close(fd: int) -> None:
    """Close the file descriptor ``fd``."""
    os.close(fd)


def unlink(name: str | os.PathLike[str]) -> bool:
    """Delete the file ``name``; return True if it was removed."""
    try:
        os.unlink(name)
    except OSError:
        return False
    return True


def open_socket() -> socket.socket:
    """Open a datagram port on which other simulated machines can reach this one."""
    return socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)


def close_socket(sock: socket.socket) -> None:
    """Close the IPC port."""
    sock.close()


def assign_name_to_socket(socket_name: str, sock: socket.socket) -> None:
    """Bind ``sock`` to the file name ``socket_name`` so peers can find it."""
    unlink(socket_name)
    sock.bind(socket_name)
    debug.message(DBG_NET, f"Created socket {socket_name}")


def de_assign_name_to_socket(socket_name: str) -> None:
    """Remove the file name given to an IPC port."""
    unlink(socket_name)


def poll_socket(sock: socket.socket) -> bool:
    """Return True if a message is waiting on ``sock``."""
    return poll_file(sock.fileno())


def read_from_socket(sock: socket.socket, packet_size: int) -> bytes:
    """Receive one packet of exactly ``packet_size`` bytes."""
    data, _ = sock.recvfrom(packet_size)
    if len(data) != packet_size:
        raise ShortTransferError("recvfrom", packet_size, len(data))
    return data


def send_to_socket(sock: socket.socket, data: bytes, to_name: str) -> None:
    """Send ``data`` as one packet to the port named ``to_name``."""
    sent = sock.sendto(data, to_name)
    if sent != len(data):
        raise ShortTransferError("sendto", len(data), sent)