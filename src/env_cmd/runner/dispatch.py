from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Sequence

from env_cmd.cli.args import parse_args
from env_cmd.config import Settings
from env_cmd.runner.spawner import Spawner, SubprocessSpawner
from env_cmd.sources.filesystem import FileSystem
from env_cmd.sources.resolver import resolve_env
from env_cmd.utils.logger import get_logger

logger = get_logger(__name__)


def merge_env(base: Mapping[str, str], overrides: Mapping[str, str]) -> Dict[str, str]:
    """Copy ``base`` and write every key of ``overrides`` over it."""
    merged = dict(base)
    merged.update(overrides)
    return merged


def env_cmd(
    argv: Sequence[str],
    spawner: Spawner | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    fs: FileSystem | None = None,
    settings: Settings | None = None,
) -> int:
    """Resolve the env source named in ``argv``, merge it and run the command.

    Returns the exit code of the child process. ``os.environ`` is only read.
    """
    parsed = parse_args(argv)
    spawner = spawner or SubprocessSpawner()
    snapshot = dict(os.environ if environ is None else environ)
    settings = settings or Settings.from_environ(snapshot)

    loaded = resolve_env(parsed.env_source, cwd=cwd, fs=fs, settings=settings)
    merged = merge_env(snapshot, loaded)
    overridden = sorted(key for key in loaded if key in snapshot)
    logger.debug("environment_merged", loaded=len(loaded), overridden=overridden)
    return spawner.spawn(parsed.command, parsed.command_args, merged)
