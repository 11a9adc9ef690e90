from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

from env_cmd.config import Settings
from env_cmd.errors import SourceNotFoundError
from env_cmd.parsing.env_string import parse_env_string
from env_cmd.sources.filesystem import FileSystem, LocalFileSystem
from env_cmd.sources.rc_file import load_rc_file, select_section
from env_cmd.sources.structured import load_structured_module
from env_cmd.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DirectText:
    path: Path


@dataclass(frozen=True)
class StructuredModule:
    path: Path


@dataclass(frozen=True)
class Section:
    name: str
    rc_path: Path


@dataclass(frozen=True)
class DefaultFile:
    path: Path


EnvSource = Union[DirectText, StructuredModule, Section, DefaultFile]


@dataclass(frozen=True)
class Resolved:
    env: Dict[str, str]
    origin: EnvSource


@dataclass(frozen=True)
class Unresolved:
    path: Path
    reason: str


Outcome = Union[Resolved, Unresolved]


def plan_sources(env_source: str, cwd: Path, settings: Settings) -> List[EnvSource]:
    """Return the ordered list of places ``env_source`` may refer to.

    Structured modules are tried on their own. Anything else is read as a
    plain file first, then looked up as a section of the rc file, and finally
    the default env file in ``cwd`` is used.
    """
    if env_source.endswith(tuple(settings.structured_extensions)):
        return [StructuredModule(path=cwd / env_source)]
    return [
        DirectText(path=cwd / env_source),
        Section(name=env_source, rc_path=cwd / settings.rc_file_name),
        DefaultFile(path=cwd / settings.default_env_file),
    ]


def attempt_source(source: EnvSource, fs: FileSystem) -> Outcome:
    if isinstance(source, StructuredModule):
        return Resolved(env=load_structured_module(source.path), origin=source)
    if isinstance(source, Section):
        return _attempt_section(source, fs)
    return _attempt_text(source, fs)


def _attempt_text(source: Union[DirectText, DefaultFile], fs: FileSystem) -> Outcome:
    text = fs.read_text(source.path)
    if text is None:
        return Unresolved(path=source.path, reason="file missing or unreadable")
    return Resolved(env=parse_env_string(text), origin=source)


def _attempt_section(source: Section, fs: FileSystem) -> Outcome:
    config = load_rc_file(fs, source.rc_path)
    if config is None:
        return Unresolved(path=source.rc_path, reason="rc file missing or unreadable")
    env = select_section(config, source.name, origin=str(source.rc_path))
    if env is None:
        return Unresolved(path=source.rc_path, reason=f"no section named {source.name!r}")
    return Resolved(env=env, origin=source)


def resolve_env(
    env_source: str,
    cwd: Path | None = None,
    fs: FileSystem | None = None,
    settings: Settings | None = None,
) -> Dict[str, str]:
    cwd = cwd or Path.cwd()
    fs = fs or LocalFileSystem()
    settings = settings or Settings()

    last_path = cwd / settings.default_env_file
    for source in plan_sources(env_source, cwd, settings):
        outcome = attempt_source(source, fs)
        if isinstance(outcome, Resolved):
            if isinstance(source, DefaultFile):
                logger.warning(
                    "falling_back_to_default_env_file",
                    missing=str(cwd / env_source),
                    fallback=str(source.path),
                )
            logger.debug("source_resolved", origin=type(source).__name__, keys=list(outcome.env))
            return outcome.env
        logger.debug("source_unresolved", path=str(outcome.path), reason=outcome.reason)
        last_path = outcome.path
    raise SourceNotFoundError(last_path)
