"""Tests for rendering issue fields, comments and tags as commands."""

import pytest

from youtrack_client.issues.constants import RESERVED_FIELDS
from youtrack_client.issues.formatting import (
    format_comment_command,
    format_field_command,
    format_tag_command,
    is_reserved_field,
)
from youtrack_client.models import (
    Command,
    IssueField,
    YouTrackComment,
    YouTrackTag,
)


class TestReservedFields:
    """Tests for reserved field detection."""

    def test_reserved_set(self):
        assert RESERVED_FIELDS == {
            "id",
            "entityid",
            "jiraid",
            "summary",
            "description",
        }

    @pytest.mark.parametrize(
        "name", ["id", "ID", "entityId", "JiraId", "Summary", "DESCRIPTION"]
    )
    def test_reserved_names_produce_no_command(self, name):
        assert is_reserved_field(name)
        assert format_field_command("DEMO-1", IssueField.create(name, "x")) is None

    @pytest.mark.parametrize("name", ["Priority", "State", "Idea", "summary2"])
    def test_other_names_produce_a_command(self, name):
        assert not is_reserved_field(name)
        assert format_field_command("DEMO-1", IssueField.create(name, "x")) is not None


class TestFormatFieldCommand:
    """Tests for format_field_command."""

    def test_single_value(self):
        command = format_field_command(
            "DEMO-42", IssueField.create("Priority", "Critical")
        )
        assert command == Command(
            issue_id="DEMO-42", command="Priority Critical", comment=""
        )

    def test_multi_value(self):
        command = format_field_command(
            "DEMO-42", IssueField.create("Platform", ["linux", "mac"])
        )
        assert command.command == "Platform linux mac"

    def test_scalar_rendered_as_text(self):
        command = format_field_command("DEMO-42", IssueField.create("Estimation", 3))
        assert command.command == "Estimation 3"

    def test_text_is_not_split(self):
        command = format_field_command(
            "DEMO-42", IssueField.create("Subsystem", "UI")
        )
        assert command.command == "Subsystem UI"


class TestFormatCommentAndTag:
    """Tests for comment and tag commands."""

    def test_comment_with_author(self):
        command = format_comment_command(
            "DEMO-42", YouTrackComment(text="hi", author="bob")
        )
        assert command.command == "comment"
        assert command.comment == "hi"
        assert command.run_as == "bob"

    def test_comment_without_author(self):
        command = format_comment_command("DEMO-42", YouTrackComment(text="hi"))
        assert command.run_as is None

    def test_comment_text_is_not_part_of_the_command(self):
        command = format_comment_command(
            "DEMO-42", YouTrackComment(text="State Fixed")
        )
        assert command.command == "comment"

    def test_tag(self):
        command = format_tag_command("DEMO-42", YouTrackTag(value="urgent"))
        assert command.issue_id == "DEMO-42"
        assert command.command == "tag urgent"
        assert command.comment is None
