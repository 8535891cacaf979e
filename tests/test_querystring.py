from reqline.querystring import build_full_url, build_query_string


def test_empty():
    assert build_query_string({}) == ""


def test_scalars():
    params = {"s": "x", "i": 3, "f": 1.5, "whole": 2.0, "t": True, "n": False}

    assert build_query_string(params) == "s=x&i=3&f=1.5&whole=2&t=true&n=false"


def test_reserved_characters_are_escaped():
    params = {"q": "a b&c=d", "path": "/x?y", "mark": "it's (ok)!"}

    assert build_query_string(params) == "q=a%20b%26c%3Dd&path=%2Fx%3Fy&mark=it's%20(ok)!"


def test_unicode_is_utf8_encoded():
    assert build_query_string({"name": "café"}) == "name=caf%C3%A9"


def test_lists_repeat_the_key():
    assert build_query_string({"id": [1, "two", True]}) == "id=1&id=two&id=true"


def test_null_and_objects_encode_empty():
    assert build_query_string({"a": None, "b": {"c": 1}, "d": [[1]]}) == "a=&b=&d="


def test_full_url_without_query():
    assert build_full_url("http://x.test", {}) == "http://x.test"


def test_full_url_with_query():
    assert build_full_url("http://x.test/p", {"a": 1}) == "http://x.test/p?a=1"
