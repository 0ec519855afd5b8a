import io
import os
import shutil
import signal
import tempfile
import time

import pytest

from kernutil import sysdep
from kernutil.debug import Debug


@pytest.fixture
def short_dir():
    base = "/tmp" if os.path.isdir("/tmp") else None
    path = tempfile.mkdtemp(prefix="ku", dir=base)
    yield path
    shutil.rmtree(path, ignore_errors=True)


def test_call_on_user_abort_installs_handler():
    def handler(signum, frame):
        pass

    previous = sysdep.call_on_user_abort(handler)
    try:
        assert signal.getsignal(signal.SIGINT) is handler
    finally:
        signal.signal(signal.SIGINT, previous)
    assert signal.getsignal(signal.SIGINT) is previous


def test_delay_zero_returns_quickly():
    start = time.monotonic()
    result = sysdep.delay(0)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed < 1.0


def test_delay_negative_rejected():
    with pytest.raises(ValueError):
        sysdep.delay(-1)


def test_exit_program_raises_system_exit():
    with pytest.raises(SystemExit) as info:
        sysdep.exit_program(3)
    assert info.value.code == 3


def test_random_sequence_repeats_with_seed():
    sysdep.random_init(42)
    first = [sysdep.random_number() for _ in range(10)]
    sysdep.random_init(42)
    second = [sysdep.random_number() for _ in range(10)]
    assert first == second


def test_random_number_in_range():
    sysdep.random_init(7)
    assert all(0 <= sysdep.random_number() <= sysdep.RANDOM_MAX for _ in range(200))


def test_write_then_read_round_trip(tmp_path):
    name = tmp_path / "disk"
    fd = sysdep.open_for_write(name)
    try:
        sysdep.write_file(fd, b"hello world")
        assert sysdep.tell(fd) == len(b"hello world")
        assert sysdep.lseek(fd, 0, os.SEEK_SET) == 0
        assert sysdep.read(fd, 5) == b"hello"
        assert sysdep.tell(fd) == 5
    finally:
        sysdep.close(fd)


def test_open_for_write_truncates(tmp_path):
    name = tmp_path / "disk"
    name.write_bytes(b"old contents")
    fd = sysdep.open_for_write(name)
    sysdep.close(fd)
    assert name.read_bytes() == b""


def test_read_short_raises(tmp_path):
    name = tmp_path / "disk"
    name.write_bytes(b"abc")
    fd = sysdep.open_for_read_write(name, True)
    try:
        with pytest.raises(sysdep.ShortTransferError) as info:
            sysdep.read(fd, 10)
        assert info.value.expected == 10
        assert info.value.actual == 3
    finally:
        sysdep.close(fd)


def test_read_partial_returns_available(tmp_path):
    name = tmp_path / "disk"
    name.write_bytes(b"abc")
    fd = sysdep.open_for_read_write(name, True)
    try:
        assert sysdep.read_partial(fd, 10) == b"abc"
        assert sysdep.read_partial(fd, 10) == b""
    finally:
        sysdep.close(fd)


def test_open_for_read_write_missing_file(tmp_path):
    missing = tmp_path / "absent"
    assert sysdep.open_for_read_write(missing, False) is None
    with pytest.raises(FileNotFoundError):
        sysdep.open_for_read_write(missing, True)


def test_close_invalid_descriptor_raises(tmp_path):
    fd = sysdep.open_for_write(tmp_path / "f")
    sysdep.close(fd)
    with pytest.raises(OSError):
        sysdep.close(fd)


def test_unlink(tmp_path):
    name = tmp_path / "f"
    name.write_bytes(b"x")
    assert sysdep.unlink(name) is True
    assert not name.exists()
    assert sysdep.unlink(name) is False


def test_poll_file_pipe():
    read_end, write_end = os.pipe()
    try:
        assert sysdep.poll_file(read_end) is False
        os.write(write_end, b"z")
        assert sysdep.poll_file(read_end) is True
    finally:
        os.close(read_end)
        os.close(write_end)


def test_socket_packet_round_trip(short_dir):
    receiver_name = os.path.join(short_dir, "a")
    sender_name = os.path.join(short_dir, "b")
    receiver = sysdep.open_socket()
    sender = sysdep.open_socket()
    try:
        sysdep.assign_name_to_socket(receiver_name, receiver)
        sysdep.assign_name_to_socket(sender_name, sender)
        assert sysdep.poll_socket(receiver) is False
        sysdep.send_to_socket(sender, b"packet!!", receiver_name)
        assert sysdep.poll_socket(receiver) is True
        assert sysdep.read_from_socket(receiver, 8) == b"packet!!"
    finally:
        sysdep.close_socket(receiver)
        sysdep.close_socket(sender)
        sysdep.de_assign_name_to_socket(receiver_name)
        sysdep.de_assign_name_to_socket(sender_name)
    assert not os.path.exists(receiver_name)
    assert not os.path.exists(sender_name)


def test_read_from_socket_wrong_size(short_dir):
    receiver_name = os.path.join(short_dir, "a")
    receiver = sysdep.open_socket()
    sender = sysdep.open_socket()
    try:
        sysdep.assign_name_to_socket(receiver_name, receiver)
        sysdep.send_to_socket(sender, b"abc", receiver_name)
        with pytest.raises(sysdep.ShortTransferError):
            sysdep.read_from_socket(receiver, 8)
    finally:
        sysdep.close_socket(receiver)
        sysdep.close_socket(sender)
        sysdep.de_assign_name_to_socket(receiver_name)


def test_assign_name_replaces_stale_file_and_logs(short_dir, monkeypatch):
    name = os.path.join(short_dir, "s")
    with open(name, "wb") as handle:
        handle.write(b"stale")
    stream = io.StringIO()
    monkeypatch.setattr(sysdep, "debug", Debug("n", stream))
    sock = sysdep.open_socket()
    try:
        sysdep.assign_name_to_socket(name, sock)
        assert sock.getsockname() == name
    finally:
        sysdep.close_socket(sock)
        sysdep.de_assign_name_to_socket(name)
    assert stream.getvalue() == f"Created socket {name}\n"


def test_send_to_missing_socket_raises(short_dir):
    sender = sysdep.open_socket()
    try:
        with pytest.raises(OSError):
            sysdep.send_to_socket(sender, b"x", os.path.join(short_dir, "nobody"))
    finally:
        sysdep.close_socket(sender)