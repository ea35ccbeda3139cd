"""Tests for the YouTrack query encoder."""

from datetime import datetime, timezone

from youtrack_client.issues.query import build_query, encode_query_value


class TestEncodeQueryValue:
    """Tests for encode_query_value."""

    def test_absent_values(self):
        assert encode_query_value(None) is None
        assert encode_query_value("") is None

    def test_booleans_render_as_literals(self):
        assert encode_query_value(True) == "true"
        assert encode_query_value(False) == "false"

    def test_integers(self):
        assert encode_query_value(0) == "0"
        assert encode_query_value(25) == "25"

    def test_datetime_renders_as_epoch_millis(self):
        moment = datetime(2018, 1, 1, tzinfo=timezone.utc)
        assert encode_query_value(moment) == "1514764800000"

    def test_text_is_percent_encoded(self):
        assert encode_query_value("Fix it & ship") == "Fix+it+%26+ship"
        assert encode_query_value("Ünïcode") == "%C3%9Cn%C3%AFcode"

    def test_raw_text_is_left_alone(self):
        assert encode_query_value("john.doe@example.com", raw=True) == (
            "john.doe@example.com"
        )


class TestBuildQuery:
    """Tests for build_query."""

    def test_keeps_declared_order(self):
        query = build_query([("b", "2"), ("a", "1"), ("c", "3")])
        assert query == "b=2&a=1&c=3"

    def test_absent_parameters_leave_no_empty_tokens(self):
        query = build_query(
            [("command", "tag urgent"), ("comment", ""), ("runAs", None), ("x", "y")]
        )
        assert query == "command=tag+urgent&x=y"
        assert "&&" not in query
        assert not query.startswith("&")
        assert not query.endswith("&")

    def test_all_absent_gives_empty_string(self):
        assert build_query([("filter", None), ("max", None)]) == ""

    def test_false_flag_is_included(self):
        assert build_query([("wikifyDescription", False)]) == "wikifyDescription=false"

    def test_same_input_same_output(self):
        params = [("summary", "Bug in login"), ("description", "a=b&c"), ("max", 5)]
        assert build_query(params) == build_query(params)

    def test_raw_parameters(self):
        query = build_query(
            [("command", "comment"), ("runAs", "bob smith")], raw=("runAs",)
        )
        assert query == "command=comment&runAs=bob smith"
