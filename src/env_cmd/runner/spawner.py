from __future__ import annotations

import signal
import subprocess
from typing import Dict, Mapping, Protocol, Sequence

from env_cmd.utils.logger import get_logger

logger = get_logger(__name__)

FORWARDED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class Spawner(Protocol):
    def spawn(self, command: str, args: Sequence[str], env: Mapping[str, str]) -> int:
        ...


def exit_code_from_returncode(returncode: int) -> int:
    """Map a Popen return code to a shell-style exit code (128 + N when killed by signal N)."""
    if returncode < 0:
        return 128 - returncode
    return returncode


class SubprocessSpawner:
    """Runs the command with inherited stdio and waits for it to finish."""

    def spawn(self, command: str, args: Sequence[str], env: Mapping[str, str]) -> int:
        logger.info("spawning_command", command=command, argc=len(args))
        proc = subprocess.Popen([command, *args], env=dict(env))
        previous: Dict[int, object] = {}

        def _forward(signum, frame) -> None:
            logger.debug("forwarding_signal", signal=signum, pid=proc.pid)
            proc.send_signal(signum)

        for sig in FORWARDED_SIGNALS:
            previous[sig] = signal.signal(sig, _forward)
        try:
            returncode = proc.wait()
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)
        logger.info("command_exited", command=command, returncode=returncode)
        return exit_code_from_returncode(returncode)
