"""FTP Traffic Analyzer - Core analysis engine"""

import logging
from typing import Iterable, Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import load_log_text, normalize_extensions
from .counter import count_downloads
from .models import AnalysisResult
from .timestamps import detect_format, scan_range

logger = logging.getLogger(__name__)


def analyze(text: str, extensions: Optional[Iterable[str]] = None) -> AnalysisResult:
    """Count tracked downloads and collect timestamps of one log text.

    Deterministic: the same text and extensions always give an equal result.
    """
    endings = normalize_extensions(extensions)
    downloads = count_downloads(text, endings)
    format_index, timestamp_format = detect_format(text)
    timestamps = scan_range(text, endings, timestamp_format)

    return AnalysisResult(
        extensions=endings,
        downloads=downloads,
        format_index=format_index,
        timestamp_format=timestamp_format,
        timestamps=timestamps,
    )


class TrafficAnalyzer:
    """Analyzes log files for tracked downloads"""

    def __init__(self, extensions: Optional[Iterable[str]] = None, console=None):
        self.extensions = normalize_extensions(extensions)
        self.console = console

    def analyze_text(self, text: str) -> AnalysisResult:
        return analyze(text, self.extensions)

    def analyze_file(self, filepath: str) -> AnalysisResult:
        text = load_log_text(filepath)
        logger.debug("Analyzing %d characters of %s", len(text), filepath)

        if self.console is None:
            return self.analyze_text(text)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True
        ) as progress:
            progress.add_task("Analyzing log...", total=None)
            result = self.analyze_text(text)

        return result
