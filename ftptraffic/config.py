"""FTP Traffic Analyzer - Configuration and input loading"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: Tuple[str, ...] = ('zip', 'exe')
DEFAULT_LOG_FILE = 'traffic.txt'
DEFAULT_ENDINGS_FILE = 'config-endings.txt'


@dataclass(frozen=True)
class ExtensionsConfig:
    """Extensions to track and where they came from"""
    extensions: Tuple[str, ...]
    source: Optional[str]
    used_default: bool


def normalize_extensions(extensions: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Lowercase, trim and de-duplicate extensions, keeping their order.

    Falls back to ``DEFAULT_EXTENSIONS`` when nothing usable is left.
    """
    result = []
    for ext in extensions or ():
        ext = ext.strip().lstrip('.').strip().lower()
        if ext and ext not in result:
            result.append(ext)
    return tuple(result) or DEFAULT_EXTENSIONS


def load_extensions(filepath: str) -> ExtensionsConfig:
    """Read one extension per line from an endings file"""
    path = Path(filepath)
    lines = []
    if path.is_file():
        lines = path.read_text(encoding='utf-8-sig', errors='ignore').splitlines()

    usable = [line for line in lines if line.strip().lstrip('.').strip()]
    extensions = normalize_extensions(usable)
    if not usable:
        logger.warning("Endings file not found or empty: %s", path.resolve())
        logger.warning("Default endings assumed: %s", '|'.join(extensions))
        return ExtensionsConfig(extensions, None, True)

    logger.info("Endings file read: %s", path.resolve())
    logger.info("Endings searched for: %s", '|'.join(extensions))
    return ExtensionsConfig(extensions, str(path), False)


def load_log_text(filepath: str) -> str:
    """Load a whole log file as text, without a leading BOM"""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Log file not found: {filepath}")

    with open(path, 'r', encoding='utf-8-sig', errors='ignore') as f:
        text = f.read()

    logger.info("File to analyze read: %s", path.resolve())
    return text
