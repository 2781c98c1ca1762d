"""FTP Traffic Analyzer - Constants and patterns"""

import re
from typing import List, Sequence

VERSION = "1.0.0"

NOT_FOUND_NOTE = " [404 file/page not found]"

# Any square-bracketed token, e.g. the CLF timestamp
BRACKET_PATTERN = re.compile(r'\[.+?\]')

# Download patterns, tried in order. The first one names the domain between
# byte count and referrer, which only some hosts log.
DOWNLOAD_PATTERNS = {
    'primary': r'(GET[ \t].*?\.(?:{endings}))[ \t].+?"[ \t](\d+)[ \t]\d+[ \t](.+?)[ \t]"',
    'fallback': r'(GET[ \t].*?\.(?:{endings}))[ \t].+?"[ \t](\d+)[ \t]\d+',
}

# Bracketed timestamp directly followed by a tracked GET request
TIMED_DOWNLOAD_PATTERN = r'\[.+?\][ \t]"GET[ \t].*?\.(?:{endings})[ \t].+?"[ \t]\d+[ \t]\d+'


def endings_alternation(extensions: Sequence[str]) -> str:
    return '|'.join(re.escape(ext) for ext in extensions)


def compile_download_patterns(extensions: Sequence[str]) -> List[tuple]:
    """Compile the download pattern variants as (name, regex) pairs"""
    endings = endings_alternation(extensions)
    return [
        (name, re.compile(pattern.format(endings=endings), re.IGNORECASE))
        for name, pattern in DOWNLOAD_PATTERNS.items()
    ]


def compile_timed_download_pattern(extensions: Sequence[str]):
    endings = endings_alternation(extensions)
    return re.compile(TIMED_DOWNLOAD_PATTERN.format(endings=endings), re.IGNORECASE)
