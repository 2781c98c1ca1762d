"""FTP Traffic Analyzer package"""

from .patterns import VERSION
from .config import DEFAULT_EXTENSIONS, load_extensions, load_log_text, normalize_extensions
from .models import AnalysisResult, DownloadCounts, TimestampFormat, TimestampRange
from .counter import build_match_key, count_downloads
from .timestamps import TIMESTAMP_FORMATS, detect_format, scan_range
from .analyzer import TrafficAnalyzer, analyze
from .output import print_report, report_to_json

__all__ = [
    'VERSION', 'DEFAULT_EXTENSIONS', 'AnalysisResult', 'DownloadCounts', 'TimestampFormat',
    'TimestampRange', 'TIMESTAMP_FORMATS', 'TrafficAnalyzer', 'analyze', 'build_match_key',
    'count_downloads', 'detect_format', 'scan_range', 'load_extensions', 'load_log_text',
    'normalize_extensions', 'print_report', 'report_to_json',
]
