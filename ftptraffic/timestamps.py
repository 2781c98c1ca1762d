"""FTP Traffic Analyzer - Timestamp detection and range scanning"""

import logging
import re
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import List, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import TimestampFormat, TimestampRange
from .patterns import BRACKET_PATTERN, compile_timed_download_pattern

logger = logging.getLogger(__name__)

_ISO_SHAPE = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}')
_ZONE_SUFFIX = re.compile(r'^(?P<stamp>.+?)\[(?P<zone>[^\[\]]+)\]$')

# English month names regardless of the process locale
MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

_CLF_STAMP = re.compile(
    r'^(?P<day>\d{1,2})/(?P<month>[A-Za-z]{3})/(?P<year>\d{4})'
    r':(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})'
    r' (?:(?P<utc>Z)|(?P<sign>[+-])(?P<off_h>\d{2}):?(?P<off_m>\d{2}))$'
)


def _iso(token: str) -> Optional[datetime]:
    if not _ISO_SHAPE.match(token):
        return None
    try:
        return datetime.fromisoformat(token)
    except ValueError:
        return None


def _split_zone(token: str) -> Tuple[str, Optional[str]]:
    match = _ZONE_SUFFIX.match(token)
    if match:
        return match.group('stamp'), match.group('zone')
    return token, None


def _zone(name: str):
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def _offset_text(value: datetime) -> str:
    offset = value.strftime('%z')
    return 'Z' if offset in ('+0000', '') else offset


def parse_clf(token: str) -> Optional[datetime]:
    match = _CLF_STAMP.match(token)
    if not match or match.group('month').title() not in MONTHS:
        return None

    parts = match.groupdict()
    try:
        if parts['utc']:
            tz = timezone.utc
        else:
            offset = timedelta(hours=int(parts['off_h']), minutes=int(parts['off_m']))
            tz = timezone(-offset if parts['sign'] == '-' else offset)
        return datetime(int(parts['year']), MONTHS.index(parts['month'].title()) + 1,
                        int(parts['day']), int(parts['hour']), int(parts['minute']),
                        int(parts['second']), tzinfo=tz)
    except (ValueError, OverflowError):
        return None


def render_clf(value: datetime) -> str:
    return (f"{value.day}/{MONTHS[value.month - 1]}/{value.year:04d}"
            f":{value:%H:%M:%S} {_offset_text(value)}")


def parse_iso_date_time(token: str) -> Optional[datetime]:
    """Offset date-time with optional zone id, or a zone id alone"""
    stamp, zone_name = _split_zone(token)
    value = _iso(stamp)
    if value is None:
        return None
    if zone_name is None:
        return value if value.tzinfo else None

    zone = _zone(zone_name)
    if zone is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def render_iso_zoned(value: datetime) -> str:
    if isinstance(value.tzinfo, ZoneInfo):
        return f"{value.isoformat()}[{value.tzinfo.key}]"
    return value.isoformat()


def parse_iso_instant(token: str) -> Optional[datetime]:
    if not token.endswith(('Z', 'z')):
        return None
    value = _iso(token)
    return value.astimezone(timezone.utc) if value else None


def render_iso_instant(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def parse_iso_local_date_time(token: str) -> Optional[datetime]:
    # Local times carry no offset and are read as UTC
    value = _iso(token)
    if value is None or value.tzinfo is not None:
        return None
    return value.replace(tzinfo=timezone.utc)


def render_iso_local(value: datetime) -> str:
    return value.replace(tzinfo=None).isoformat()


def parse_iso_offset_date_time(token: str) -> Optional[datetime]:
    value = _iso(token)
    if value is None or value.tzinfo is None:
        return None
    return value


def render_iso_offset(value: datetime) -> str:
    return value.isoformat()


def parse_iso_zoned_date_time(token: str) -> Optional[datetime]:
    """Offset date-time, the zone id in brackets is optional"""
    stamp, zone_name = _split_zone(token)
    value = parse_iso_offset_date_time(stamp)
    if value is None or zone_name is None:
        return value
    zone = _zone(zone_name)
    return value.astimezone(zone) if zone else None


def parse_rfc_1123(token: str) -> Optional[datetime]:
    if ',' not in token:
        return None
    try:
        value = parsedate_to_datetime(token)
    except (TypeError, ValueError, IndexError, OverflowError):
        return None
    if value is None or value.tzinfo is None:
        return None
    return value


def render_rfc_1123(value: datetime) -> str:
    if value.utcoffset().total_seconds() == 0:
        return format_datetime(value.astimezone(timezone.utc), usegmt=True)
    return format_datetime(value)


# Priority order matters, several layouts overlap
TIMESTAMP_FORMATS: List[TimestampFormat] = [
    TimestampFormat('clf', parse_clf, render_clf),
    TimestampFormat('iso_date_time', parse_iso_date_time, render_iso_zoned),
    TimestampFormat('iso_instant', parse_iso_instant, render_iso_instant),
    TimestampFormat('iso_local_date_time', parse_iso_local_date_time, render_iso_local),
    TimestampFormat('iso_offset_date_time', parse_iso_offset_date_time, render_iso_offset),
    TimestampFormat('iso_zoned_date_time', parse_iso_zoned_date_time, render_iso_zoned),
    TimestampFormat('rfc_1123', parse_rfc_1123, render_rfc_1123),
]


def bracket_content(token: str) -> str:
    return token[1:-1]


def find_probe_token(text: str) -> Optional[str]:
    """Return the content of the first bracketed token in the text"""
    match = BRACKET_PATTERN.search(text)
    return bracket_content(match.group()) if match else None


def detect_format(text: str) -> Tuple[int, Optional[TimestampFormat]]:
    """Pick the first candidate format able to parse the probe token.

    Only the first bracketed token of the text is examined. Returns
    ``(-1, None)`` when there is none or no candidate parses it.
    """
    probe = find_probe_token(text)
    if probe is None:
        logger.debug("No bracketed token found, timestamps disabled")
        return -1, None

    for index, candidate in enumerate(TIMESTAMP_FORMATS):
        if candidate.parse(probe) is not None:
            logger.debug("Timestamp format %d (%s) parses %r", index, candidate.name, probe)
            return index, candidate

    logger.debug("No timestamp format parses probe token %r", probe)
    return -1, None


class _Extremes:
    """Running min/max, replaced only on strict improvement"""

    def __init__(self):
        self.low: Optional[datetime] = None
        self.high: Optional[datetime] = None

    def add(self, value: datetime):
        if self.low is None or value < self.low:
            self.low = value
        if self.high is None or value > self.high:
            self.high = value


def scan_range(text: str, extensions: Sequence[str],
               timestamp_format: Optional[TimestampFormat]) -> TimestampRange:
    """Collect the global and the download timestamp extremes"""
    if timestamp_format is None:
        return TimestampRange()

    overall = _Extremes()
    for match in BRACKET_PATTERN.finditer(text):
        # Brackets are not always timestamps
        value = timestamp_format.parse(bracket_content(match.group()))
        if value is not None:
            overall.add(value)

    downloads = _Extremes()
    for match in compile_timed_download_pattern(extensions).finditer(text):
        token = bracket_content(BRACKET_PATTERN.search(match.group()).group())
        value = timestamp_format.parse(token)
        if value is None:
            logger.warning("Unparseable timestamp %r before download request at offset %d",
                           token, match.start())
            continue
        downloads.add(value)

    return TimestampRange(
        global_min=overall.low,
        global_max=overall.high,
        first_match=downloads.low,
        last_match=downloads.high,
    )
