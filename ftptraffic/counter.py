"""FTP Traffic Analyzer - Download counting"""

import logging
from collections import Counter
from typing import Optional, Sequence

from .models import DownloadCounts
from .patterns import NOT_FOUND_NOTE, compile_download_patterns

logger = logging.getLogger(__name__)

# Referrer/domain is inserted right after "GET "
SPLICE_OFFSET = 4


def build_match_key(get_text: str, status: str, referrer: Optional[str] = None) -> str:
    """Build the count table key for one matched request.

    ``get_text`` is the captured ``GET <path>`` text. A captured referrer is
    spliced in after ``GET `` so the key reads like the logged domain plus
    path, e.g. ``GET example.com/f.zip``. Requests answered with 404 get an
    annotation, which keeps them apart from successful downloads.
    """
    key = get_text
    if referrer is not None:
        key = key[:SPLICE_OFFSET] + referrer + key[SPLICE_OFFSET:]
    if status == '404':
        key += NOT_FOUND_NOTE
    return key


def count_downloads(text: str, extensions: Sequence[str]) -> DownloadCounts:
    """Count GET requests for the given extensions.

    Pattern variants are tried in order and the first one with at least one
    match supplies the result; counts of different variants are never mixed.
    """
    for name, pattern in compile_download_patterns(extensions):
        counts: Counter = Counter()
        total = 0

        for match in pattern.finditer(text):
            total += 1
            referrer = match.group(3) if pattern.groups == 3 else None
            counts[build_match_key(match.group(1), match.group(2), referrer)] += 1

        if total:
            logger.debug("%s download pattern matched %d requests", name, total)
            return DownloadCounts(table=tuple(sorted(counts.items())), total=total, pattern=name)

        logger.debug("%s download pattern found no requests", name)

    return DownloadCounts()
