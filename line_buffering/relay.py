"""Relay remote command output from a paramiko channel into line buffers."""

import logging
import time
from typing import Optional, Tuple

import paramiko

from .buffer import LineBuffer
from .exceptions import RelayTimeoutError, ChannelRelayFailedError

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096
POLL_INTERVAL = 0.01


def _poll(chan: paramiko.Channel, read_chunk_size: int) -> Tuple[Optional[bytes], Optional[bytes], bool]:
    """Read whatever is ready on both streams and report whether the command is done."""
    try:
        out = chan.recv(read_chunk_size) if chan.recv_ready() else None
        err = chan.recv_stderr(read_chunk_size) if chan.recv_stderr_ready() else None
        # Finished and drained
        done = chan.exit_status_ready() and not chan.recv_ready() and not chan.recv_stderr_ready()
        return out, err, done
    except Exception as e:
        logger.error("Channel relay failed: %s", e)
        raise ChannelRelayFailedError(f"Relaying channel output failed: {e}") from e


def relay_channel(
    chan: paramiko.Channel,
    stdout: LineBuffer,
    stderr: LineBuffer,
    timeout: float = 60.0,
    read_chunk_size: int = READ_CHUNK_SIZE,
    poll_interval: float = POLL_INTERVAL,
) -> int:
    """
    Pump a running command's output into two line buffers until it exits.
    Args:
        chan: Channel on which a command is already executing.
        stdout: Receives the command's stdout bytes.
        stderr: Receives the command's stderr bytes.
        timeout: Seconds without output (and without exit) before giving up.
        read_chunk_size: Maximum bytes read per recv call.
        poll_interval: Seconds to sleep when neither stream had data.
    Returns:
        The command's exit status. Both buffers are closed on return, so
        trailing output without a final newline is dispatched too.
    Raises:
        RelayTimeoutError: No output and no exit within `timeout`.
        ChannelRelayFailedError: Reading from the channel failed.
        Consumer and LineBuffer errors propagate unchanged.
    """
    chan.settimeout(0.0)  # non-blocking
    last_activity_time = time.monotonic()

    while True:
        out, err, done = _poll(chan, read_chunk_size)
        if out:
            stdout.write(out)
            last_activity_time = time.monotonic()
        if err:
            stderr.write(err)
            last_activity_time = time.monotonic()

        if done:
            break

        if (time.monotonic() - last_activity_time) > timeout:
            raise RelayTimeoutError(f"No output or exit status within {timeout} seconds")

        if not out and not err:
            time.sleep(poll_interval)

    try:
        stdout.close()
    finally:
        stderr.close()
    try:
        return chan.recv_exit_status()
    except Exception as e:
        raise ChannelRelayFailedError(f"Reading exit status failed: {e}") from e


def run_command(
    transport: paramiko.Transport,
    command: str,
    stdout: LineBuffer,
    stderr: LineBuffer,
    timeout: float = 60.0,
    poll_interval: float = POLL_INTERVAL,
) -> int:
    """Execute `command` on a new session and relay its output; returns the exit status."""
    if transport is None or not transport.is_active():
        raise ChannelRelayFailedError("SSH transport is not active")

    chan = transport.open_session()
    try:
        logger.info(f"Running remote command: {command}")
        chan.exec_command(command)
        exit_code = relay_channel(chan, stdout, stderr, timeout=timeout, poll_interval=poll_interval)
        logger.info(f"Remote command exited with status {exit_code}")
        return exit_code
    finally:
        chan.close()
