from datetime import datetime

from resmachine._utils import format_http_date, iter_body_chunks, to_directive_name


def test_format_http_date():
    assert format_http_date(0) == "Thu, 01 Jan 1970 00:00:00 GMT"
    assert format_http_date(1445412480.0) == "Wed, 21 Oct 2015 07:28:00 GMT"
    assert format_http_date(datetime(2015, 10, 21, 7, 28)) == "Wed, 21 Oct 2015 07:28:00 GMT"


def test_to_directive_name():
    assert to_directive_name("stale_while_revalidate") == "stale-while-revalidate"
    assert to_directive_name("Max-Age") == "max-age"


def test_iter_body_chunks():
    assert list(iter_body_chunks("héllo")) == ["héllo".encode("utf-8")]
    assert list(iter_body_chunks(b"raw")) == [b"raw"]
    assert list(iter_body_chunks(["a", b"b"])) == [b"a", b"b"]
    assert list(iter_body_chunks(chunk for chunk in ["x", "y"])) == [b"x", b"y"]
