"""
YouTrack issue models.

This module provides Pydantic models for YouTrack issues and their fields.
A field value is either a single value or a list of values; which one is
decided when the field is set on the issue, never when it is rendered.
"""

import logging
from collections.abc import Iterable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from .base import ApiModel
from .comment import YouTrackComment
from .constants import EMPTY_STRING
from .tag import YouTrackTag

logger = logging.getLogger(__name__)


class SingleFieldValue(BaseModel):
    """A field holding one value."""

    kind: Literal["single"] = "single"
    value: str = EMPTY_STRING

    def render(self) -> str:
        return self.value

    def to_simplified_value(self) -> str:
        return self.value


class MultiFieldValue(BaseModel):
    """A field holding several values, e.g. affected platforms."""

    kind: Literal["multi"] = "multi"
    values: list[str] = Field(default_factory=list)

    def render(self) -> str:
        return " ".join(self.values)

    def to_simplified_value(self) -> list[str]:
        return list(self.values)


FieldValue = Annotated[SingleFieldValue | MultiFieldValue, Field(discriminator="kind")]


def _value_to_text(value: Any) -> str:
    # Enum-like bundle values come back as {"value": ..., ...} objects
    if isinstance(value, dict):
        return str(value.get("value", EMPTY_STRING))
    if value is None:
        return EMPTY_STRING
    return str(value)


def to_field_value(value: Any) -> SingleFieldValue | MultiFieldValue:
    """
    Wrap a raw value in the matching field value variant.

    Strings and other scalars become single values; any other iterable
    becomes a multi value with each item rendered as text.

    Args:
        value: The raw value

    Returns:
        The field value variant
    """
    if isinstance(value, SingleFieldValue | MultiFieldValue):
        return value
    if isinstance(value, str | bytes | dict) or not isinstance(value, Iterable):
        if isinstance(value, bytes):
            value = value.decode()
        return SingleFieldValue(value=_value_to_text(value))
    return MultiFieldValue(values=[_value_to_text(item) for item in value])


class IssueField(BaseModel):
    """A named field of an issue."""

    name: str
    value: FieldValue = Field(default_factory=SingleFieldValue)

    @classmethod
    def create(cls, name: str, value: Any) -> "IssueField":
        return cls(name=name, value=to_field_value(value))


class YouTrackIssue(ApiModel):
    """
    Model representing a YouTrack issue.

    ``id`` is assigned by the server and stays None until the issue has been
    created. ``fields`` keeps every field in the order it was set or received,
    including ``summary`` and ``description`` when they come from the server.
    """

    id: str | None = None
    entity_id: str | None = None
    summary: str = EMPTY_STRING
    description: str = EMPTY_STRING
    fields: list[IssueField] = Field(default_factory=list)
    comments: list[YouTrackComment] = Field(default_factory=list)
    tags: list[YouTrackTag] = Field(default_factory=list)

    def set_field(self, name: str, value: Any) -> IssueField:
        """
        Set a field, replacing an existing field with the same name.

        Names are compared case-insensitively; a replaced field keeps its
        position. Setting ``summary`` or ``description`` also updates the
        attribute of the same name, which is what issue creation sends.

        Args:
            name: The field name, e.g. 'Priority'
            value: A string or scalar for a single value, or an iterable for
                a multi value

        Returns:
            The field that was set
        """
        field = IssueField.create(name, value)
        if name.lower() == "summary":
            self.summary = field.value.render()
        elif name.lower() == "description":
            self.description = field.value.render()

        for index, existing in enumerate(self.fields):
            if existing.name.lower() == name.lower():
                self.fields[index] = field
                return field
        self.fields.append(field)
        return field

    def get_field(self, name: str) -> IssueField | None:
        """
        Look up a field by name (case-insensitive).

        Args:
            name: The field name

        Returns:
            The field, or None if the issue has no such field
        """
        for field in self.fields:
            if field.name.lower() == name.lower():
                return field
        return None

    def add_comment(self, text: str, author: str | None = None) -> YouTrackComment:
        comment = YouTrackComment(text=text, author=author)
        self.comments.append(comment)
        return comment

    def add_tag(self, value: str) -> YouTrackTag:
        tag = YouTrackTag(value=value)
        self.tags.append(tag)
        return tag

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "YouTrackIssue":
        """
        Create a YouTrackIssue from a YouTrack API response.

        Args:
            data: The issue data from the YouTrack API

        Returns:
            A YouTrackIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        summary = EMPTY_STRING
        description = EMPTY_STRING
        fields: list[IssueField] = []
        for entry in data.get("field") or []:
            if not isinstance(entry, dict) or not entry.get("name"):
                logger.debug(f"Skipping malformed field entry: {entry}")
                continue

            name = str(entry["name"])
            raw_value = entry.get("value")
            if name.lower() == "summary":
                summary = _value_to_text(raw_value)
            elif name.lower() == "description":
                description = _value_to_text(raw_value)
            fields.append(IssueField.create(name, raw_value))

        comments = [
            YouTrackComment.from_api_response(comment)
            for comment in data.get("comment") or []
        ]
        tags = [YouTrackTag.from_api_response(tag) for tag in data.get("tag") or []]

        issue_id = data.get("id")
        entity_id = data.get("entityId")

        return cls(
            id=str(issue_id) if issue_id is not None else None,
            entity_id=str(entity_id) if entity_id is not None else None,
            summary=summary,
            description=description,
            fields=fields,
            comments=comments,
            tags=tags,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary."""
        result: dict[str, Any] = {
            "summary": self.summary,
        }

        if self.id:
            result["id"] = self.id

        if self.description:
            result["description"] = self.description

        custom_fields = {
            field.name: field.value.to_simplified_value()
            for field in self.fields
            if field.name.lower() not in ("summary", "description")
        }
        if custom_fields:
            result["fields"] = custom_fields

        if self.comments:
            result["comments"] = [
                comment.to_simplified_dict() for comment in self.comments
            ]

        if self.tags:
            result["tags"] = [tag.value for tag in self.tags]

        return result
