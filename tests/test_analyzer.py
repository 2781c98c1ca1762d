from datetime import datetime, timedelta, timezone

from rich.console import Console

from ftptraffic import TrafficAnalyzer, analyze

CLF_LINE = '127.0.0.1 - - [10/Oct/2000:13:55:36 -0700] "GET /f.zip HTTP/1.0" 200 1234\n'


def test_single_download_at_single_instant():
    result = analyze(CLF_LINE, ['zip', 'exe'])
    instant = datetime(2000, 10, 10, 13, 55, 36, tzinfo=timezone(timedelta(hours=-7)))

    assert result.download_table == (('GET /f.zip', 1),)
    assert result.total_downloads == 1
    assert result.format_index == 0
    times = result.timestamps
    assert times.global_min == times.global_max == times.first_match == times.last_match == instant


def test_no_brackets_still_counts():
    result = analyze('"GET /f.zip HTTP/1.0" 200 1234\n"GET /g.exe HTTP/1.0" 200 1\n')

    assert result.format_index == -1
    assert result.timestamp_format is None
    assert result.timestamps.global_min is None
    assert result.timestamps.last_match is None
    assert result.download_table == (('GET /f.zip', 1), ('GET /g.exe', 1))


def test_empty_extensions_use_defaults(plain_log):
    result = analyze(plain_log, [])
    assert result.extensions == ('zip', 'exe')
    assert result.total_downloads == 3
    assert analyze(plain_log).extensions == ('zip', 'exe')


def test_analysis_is_idempotent(plain_log, domain_log):
    text = plain_log + domain_log
    assert analyze(text, ['exe', 'zip']) == analyze(text, ['exe', 'zip'])


def test_download_range_within_global_range(plain_log, domain_log):
    for text in (plain_log, domain_log):
        times = analyze(text).timestamps
        assert times.global_min <= times.first_match <= times.last_match <= times.global_max


def test_keys_end_with_tracked_extension(plain_log, domain_log):
    result = analyze(plain_log + domain_log, ['ZIP', 'exe'])
    for key, _ in result.download_table:
        path = key.replace(' [404 file/page not found]', '')
        assert path.lower().endswith(('.zip', '.exe'))


def test_empty_text():
    result = analyze('')
    assert result.total_downloads == 0
    assert result.download_table == ()
    assert result.format_index == -1


def test_to_dict(plain_log):
    data = analyze(plain_log).to_dict()
    assert data['summary']['total_downloads'] == 3
    assert data['summary']['pattern'] == 'fallback'
    assert data['timestamp_format'] == {'index': 0, 'name': 'clf'}
    assert data['timestamps']['global_min']['text'] == '10/Oct/2000:12:00:00 -0700'
    assert data['timestamps']['global_max']['iso'] == '2000-10-10T14:00:00-07:00'
    assert data['downloads'] == {'GET /f.zip': 2, 'GET /g.exe': 1}


def test_analyzer_reads_file(log_file):
    result = TrafficAnalyzer(['zip']).analyze_file(str(log_file))
    assert result.download_table == (('GET /f.zip', 2),)
    assert result.extensions == ('zip',)


def test_analyzer_with_console(log_file):
    console = Console(record=True, force_terminal=False)
    result = TrafficAnalyzer(console=console).analyze_file(str(log_file))
    assert result.total_downloads == 3


def test_to_dict_renders_rfc_1123_log():
    text = ('a - - [Tue, 10 Oct 2000 20:55:36 GMT] "GET /f.zip HTTP/1.0" 200 1\n'
            'b - - [Tue, 10 Oct 2000 21:30:00 GMT] "GET /index.html HTTP/1.0" 200 1\n')
    data = analyze(text).to_dict()
    assert data['timestamp_format'] == {'index': 6, 'name': 'rfc_1123'}
    assert data['timestamps']['global_min']['text'] == 'Tue, 10 Oct 2000 20:55:36 GMT'
    assert data['timestamps']['global_max']['text'] == 'Tue, 10 Oct 2000 21:30:00 GMT'
    assert data['timestamps']['last_match']['iso'] == '2000-10-10T20:55:36+00:00'


def test_to_dict_renders_local_iso_log():
    text = ('a - - [2000-10-10T13:55:36] "GET /f.zip HTTP/1.0" 200 1\n'
            'b - - [2000-10-10T09:00:00] "GET /g.exe HTTP/1.0" 200 1\n')
    data = analyze(text).to_dict()
    assert data['timestamp_format'] == {'index': 3, 'name': 'iso_local_date_time'}
    assert data['timestamps']['first_match']['text'] == '2000-10-10T09:00:00'
    assert data['timestamps']['last_match']['text'] == '2000-10-10T13:55:36'
    assert data['timestamps']['global_min']['iso'] == '2000-10-10T09:00:00+00:00'
