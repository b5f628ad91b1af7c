# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT
import logging
import socket
import threading
import time

import pytest
import uvicorn

from landing.main import app
from landing.server import LandingServer


def _server(port: int) -> LandingServer:
    return LandingServer(
        uvicorn.Config(app, host="127.0.0.1", port=port, log_config=None)
    )


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _port_in_time_wait() -> int:
    """Leave the listening side of a closed connection in TIME_WAIT."""
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    port = listener.getsockname()[1]

    client = socket.create_connection(("127.0.0.1", port))
    conn, _ = listener.accept()
    conn.close()
    time.sleep(0.05)
    client.close()
    listener.close()
    time.sleep(0.05)
    return port


def _run_until_started(server: LandingServer, timeout: float = 5.0) -> bool:
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    deadline = time.monotonic() + timeout
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.01)
    started = server.started
    server.should_exit = True
    thread.join(timeout)
    return started


def test_startup_logs_bound_port(caplog) -> None:
    port = _free_port()
    with caplog.at_level(logging.INFO, logger="landing"):
        assert _run_until_started(_server(port))

    messages = [r.getMessage() for r in caplog.records if r.name == "landing"]
    assert messages.count(f"Server running on port {port}") == 1


def test_starts_on_port_in_time_wait(caplog) -> None:
    """A port freshly released by a previous process must still be usable."""
    port = _port_in_time_wait()
    with caplog.at_level(logging.INFO, logger="landing"):
        assert _run_until_started(_server(port))
    assert f"Server running on port {port}" in caplog.text


def test_bind_failure_exits_without_startup_line(caplog) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen(1)
        port = busy.getsockname()[1]

        with caplog.at_level(logging.INFO, logger="landing"):
            with pytest.raises(SystemExit) as exc_info:
                _server(port).run()

    assert exc_info.value.code == 1
    assert "Server running on port" not in caplog.text
