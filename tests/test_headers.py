from resmachine import CacheControl, Headers, format_directives
from resmachine._core._headers import http_quote, is_token_string


class TestHeaders:
    def test_case_insensitive_lookup(self):
        headers = Headers({"Content-Type": "text/html"})

        assert headers["content-type"] == "text/html"
        assert "CONTENT-TYPE" in headers

    def test_first_spelling_is_kept(self):
        headers = Headers({"Content-Type": "text/html"})
        headers["content-type"] = "application/json"

        assert list(headers) == ["Content-Type"]
        assert headers["Content-Type"] == "application/json"

    def test_last_write_wins(self):
        headers = Headers()
        headers["Vary"] = ["Accept"]
        headers["Vary"] = "Cookie"

        assert headers["Vary"] == "Cookie"

    def test_list_values_are_copied(self):
        values = ["a", "b"]
        headers = Headers({"X": values})
        values.append("c")

        assert headers["X"] == ["a", "b"]

    def test_delete(self):
        headers = Headers({"X-A": "1", "X-B": "2"})
        del headers["x-a"]

        assert list(headers) == ["X-B"]
        assert len(headers) == 1

    def test_get_list(self):
        headers = Headers({"A": "1", "B": ["2", "3"]})

        assert headers.get_list("a") == ["1"]
        assert headers.get_list("b") == ["2", "3"]
        assert headers.get_list("c") is None

    def test_equality(self):
        assert Headers({"A": "1"}) == Headers({"a": "1"})
        assert Headers({"A": "1"}) == {"a": "1"}
        assert Headers({"A": "1"}) != Headers({"A": "2"})


class TestFlattened:
    def test_joins_lists(self):
        headers = Headers({"X": ["a", "b", "c"]})
        assert headers.flattened(",") == {"X": "a,b,c"}

    def test_passes_strings_through(self):
        assert Headers({"X": "v"}).flattened() == {"X": "v"}

    def test_custom_separator(self):
        headers = Headers({"Vary": ["Accept", "Cookie"], "X": "v"})
        assert headers.flattened(", ") == {"Vary": "Accept, Cookie", "X": "v"}

    def test_does_not_mutate(self):
        headers = Headers({"X": ["a", "b"], "Y": "v"})
        before = dict(headers.items())

        first = headers.flattened()
        second = headers.flattened()

        assert first == second
        assert dict(headers.items()) == before
        assert headers["X"] == ["a", "b"]

    def test_empty(self):
        assert Headers().flattened() == {}


class TestMultiItems:
    def test_set_cookie_is_kept_apart(self):
        headers = Headers({"Set-Cookie": ["a=1; Expires=Thu, 01 Jan 1970 00:00:00 GMT", "b=2"], "Vary": ["A", "B"]})

        assert headers.multi_items() == [
            ("Set-Cookie", "a=1; Expires=Thu, 01 Jan 1970 00:00:00 GMT"),
            ("Set-Cookie", "b=2"),
            ("Vary", "A,B"),
        ]

    def test_multi_line_names_are_case_insensitive(self):
        headers = Headers({"set-cookie": ["a=1", "b=2"]})

        assert headers.multi_items(multi_line=["SET-COOKIE"]) == [("set-cookie", "a=1"), ("set-cookie", "b=2")]


class TestFormatDirectives:
    def test_values_and_flags(self):
        assert format_directives({"max-age": 3600, "private": True}) == "max-age=3600, private"

    def test_false_and_none_are_dropped(self):
        assert format_directives({"public": False, "max-age": None, "no-store": True}) == "no-store"

    def test_names_are_normalized(self):
        assert format_directives({"Max_Age": 0, "NO-TRANSFORM": True}) == "max-age=0, no-transform"

    def test_field_names(self):
        assert format_directives({"private": ["Set-Cookie", "Authorization"]}) == 'private="Set-Cookie, Authorization"'

    def test_non_token_values_are_quoted(self):
        assert format_directives({"ext": "a b"}) == 'ext="a b"'

    def test_token_values_are_not_quoted(self):
        assert format_directives({"community": "UCI"}) == "community=UCI"


class TestCacheControl:
    def test_render_order(self):
        cc = CacheControl(public=True, no_cache=["Set-Cookie"], s_maxage=60, max_age=30)

        assert str(cc) == 'max-age=30, s-maxage=60, no-cache="Set-Cookie", public'

    def test_empty(self):
        assert str(CacheControl()) == ""

    def test_extensions(self):
        assert str(CacheControl(no_store=True, extensions=["community=UCI"])) == "no-store, community=UCI"

    def test_zero_is_rendered(self):
        assert str(CacheControl(max_age=0)) == "max-age=0"


def test_token_helpers():
    assert is_token_string("max-age")
    assert not is_token_string("a b")
    assert not is_token_string("")
    assert http_quote('say "hi"') == '"say \\"hi\\""'
