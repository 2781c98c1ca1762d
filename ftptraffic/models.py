"""FTP Traffic Analyzer - Data models"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Optional, Tuple


@dataclass(frozen=True)
class TimestampFormat:
    """Candidate timestamp layout with its parser and renderer"""
    name: str
    parse: Callable[[str], Optional[datetime]] = field(repr=False)
    render: Callable[[datetime], str] = field(repr=False)


@dataclass(frozen=True)
class TimestampRange:
    """Earliest/latest instants of the whole log and of tracked downloads"""
    global_min: Optional[datetime] = None
    global_max: Optional[datetime] = None
    first_match: Optional[datetime] = None
    last_match: Optional[datetime] = None


@dataclass(frozen=True)
class DownloadCounts:
    """Download counts of the pattern variant that matched"""
    table: Tuple[Tuple[str, int], ...] = ()
    total: int = 0
    pattern: Optional[str] = None


@dataclass(frozen=True)
class AnalysisResult:
    """Complete outcome of one analysis run"""
    extensions: Tuple[str, ...]
    downloads: DownloadCounts
    format_index: int = -1
    timestamp_format: Optional[TimestampFormat] = None
    timestamps: TimestampRange = field(default_factory=TimestampRange)

    @property
    def total_downloads(self) -> int:
        return self.downloads.total

    @property
    def download_table(self) -> Tuple[Tuple[str, int], ...]:
        return self.downloads.table

    def format_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        if value is None or self.timestamp_format is None:
            return None
        return self.timestamp_format.render(value)

    def to_dict(self) -> Dict:
        times = {}
        for name in ('global_min', 'global_max', 'first_match', 'last_match'):
            value = getattr(self.timestamps, name)
            times[name] = {
                'text': self.format_timestamp(value),
                'iso': value.isoformat() if value else None,
            }

        return {
            'summary': {
                'total_downloads': self.downloads.total,
                'unique_files': len(self.downloads.table),
                'pattern': self.downloads.pattern,
                'extensions': list(self.extensions),
            },
            'timestamp_format': {
                'index': self.format_index,
                'name': self.timestamp_format.name if self.timestamp_format else None,
            },
            'timestamps': times,
            'downloads': dict(self.downloads.table),
        }
