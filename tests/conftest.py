import pytest

PLAIN_LOG = (
    '127.0.0.1 - - [10/Oct/2000:13:55:36 -0700] "GET /f.zip HTTP/1.0" 200 1234\n'
    '127.0.0.2 - - [10/Oct/2000:14:00:00 -0700] "GET /index.html HTTP/1.0" 200 512\n'
    '127.0.0.3 - - [10/Oct/2000:12:00:00 -0700] "GET /f.zip HTTP/1.0" 200 1234\n'
    '127.0.0.4 - - [10/Oct/2000:13:00:00 -0700] "GET /g.exe HTTP/1.0" 200 99\n'
)

DOMAIN_LOG = (
    '10.0.0.1 - - [08/Dec/2021:09:15:00 +0100] "GET /pub/tool.exe HTTP/1.1" 200 5120 '
    'example.com "-" "Mozilla/5.0"\n'
    '10.0.0.2 - - [08/Dec/2021:10:30:00 +0100] "GET /pub/tool.exe HTTP/1.1" 200 5120 '
    'example.com "-" "Wget/1.21"\n'
    '10.0.0.3 - - [08/Dec/2021:11:45:00 +0100] "GET /pub/gone.zip HTTP/1.1" 404 0 '
    'example.com "-" "curl/7.68"\n'
)


@pytest.fixture
def plain_log():
    return PLAIN_LOG


@pytest.fixture
def domain_log():
    return DOMAIN_LOG


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / 'traffic.txt'
    path.write_text(PLAIN_LOG, encoding='utf-8')
    return path
