"""Shared pytest fixtures for line_buffering tests."""

import pytest
from unittest.mock import Mock

from line_buffering.buffer import LineBuffer
from line_buffering.stream import LineCollector


@pytest.fixture
def collector():
    """Line consumer that records dispatched lines."""
    return LineCollector()


@pytest.fixture
def line_buffer(collector):
    """Open LineBuffer with a "\\n" separator and a small growth increment."""
    return LineBuffer(collector, growth_increment=16, separator=b"\n")


@pytest.fixture
def make_channel():
    """Build a mock paramiko channel that serves the given stdout/stderr chunks."""

    def factory(stdout_chunks=(), stderr_chunks=(), exit_code=0):
        stdout_chunks = list(stdout_chunks)
        stderr_chunks = list(stderr_chunks)
        stdout_call_count = 0
        stderr_call_count = 0

        def mock_recv_ready():
            return stdout_call_count < len(stdout_chunks)

        def mock_recv_stderr_ready():
            return stderr_call_count < len(stderr_chunks)

        def mock_recv(size):
            nonlocal stdout_call_count
            if stdout_call_count < len(stdout_chunks):
                data = stdout_chunks[stdout_call_count]
                stdout_call_count += 1
                return data
            return b''

        def mock_recv_stderr(size):
            nonlocal stderr_call_count
            if stderr_call_count < len(stderr_chunks):
                data = stderr_chunks[stderr_call_count]
                stderr_call_count += 1
                return data
            return b''

        def mock_exit_status_ready():
            # Ready when all chunks have been consumed
            return (stdout_call_count >= len(stdout_chunks) and
                    stderr_call_count >= len(stderr_chunks))

        channel = Mock()
        channel.recv_ready = mock_recv_ready
        channel.recv_stderr_ready = mock_recv_stderr_ready
        channel.recv = mock_recv
        channel.recv_stderr = mock_recv_stderr
        channel.exit_status_ready = mock_exit_status_ready
        channel.recv_exit_status.return_value = exit_code
        return channel

    return factory
