from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (minischeme package directory)
_PACKAGE_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _PACKAGE_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_REPL_HOST = '127.0.0.1'
_DEFAULT_REPL_PORT = 8765


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    """Prelude source files, in load order.

    MINISCHEME_PRELUDE_PATH lists files or directories; a directory contributes
    its *.scm files sorted by name. Missing entries are skipped.
    """
    files: List[Path] = []
    for p in paths_from_env('MINISCHEME_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR]):
        if p.is_dir():
            files.extend(sorted(p.glob('*.scm')))
        elif p.is_file():
            files.append(p)
    return files


def get_log_level() -> int:
    name = os.environ.get('MINISCHEME_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('MINISCHEME_REPL_HOST', _DEFAULT_REPL_HOST)
    port = os.environ.get('MINISCHEME_REPL_PORT')
    return host, int(port) if port else _DEFAULT_REPL_PORT


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
