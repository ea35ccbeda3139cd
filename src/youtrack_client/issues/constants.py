"""Constants specific to YouTrack issue operations."""

# Handled by the issue creation call itself, or not settable by a command
RESERVED_FIELDS: frozenset[str] = frozenset(
    {
        "id",
        "entityid",
        "jiraid",
        "summary",
        "description",
    }
)

ISSUE_PATH = "rest/issue"

# Precedes the new issue id in the Location header of a creation response
ISSUE_LOCATION_MARKER = "rest/issue/"

COMMENT_COMMAND = "comment"
TAG_COMMAND = "tag"

UNKNOWN_ERROR_MESSAGE = "Unknown error"
