import json
from typing import Any

from requests import Response
from requests.structures import CaseInsensitiveDict

MOCK_YOUTRACK_ISSUE_RESPONSE = {
    "id": "DEMO-42",
    "entityId": "2-42",
    "jiraId": None,
    "field": [
        {"name": "projectShortName", "value": "DEMO"},
        {"name": "numberInProject", "value": "42"},
        {"name": "summary", "value": "Crash on startup"},
        {"name": "description", "value": "The app crashes when opened."},
        {"name": "created", "value": "1514764800000"},
        {"name": "reporterName", "value": "alice"},
        {"name": "Priority", "value": ["Critical"], "valueId": ["Critical"]},
        {"name": "Platform", "value": ["linux", "mac"]},
        {
            "name": "Assignee",
            "value": [{"value": "bob", "fullName": "Bob Smith"}],
        },
    ],
    "comment": [
        {
            "id": "4-17",
            "author": "bob",
            "authorFullName": "Bob Smith",
            "issueId": "DEMO-42",
            "parentId": None,
            "deleted": False,
            "jiraId": None,
            "text": "Reproduced on linux.",
            "shownForIssueAuthor": False,
            "created": 1514768400000,
            "updated": None,
            "permittedGroup": None,
            "replies": [],
        }
    ],
    "tag": [{"value": "urgent", "cssClass": "c1"}],
}

MOCK_YOUTRACK_ISSUE_LIST_RESPONSE = {
    "issue": [
        MOCK_YOUTRACK_ISSUE_RESPONSE,
        {
            "id": "DEMO-43",
            "entityId": "2-43",
            "field": [{"name": "summary", "value": "Typo in settings"}],
            "comment": [],
            "tag": [],
        },
    ]
}

MOCK_YOUTRACK_COMMENTS_RESPONSE = [
    {
        "id": "4-17",
        "author": "bob",
        "authorFullName": "Bob Smith",
        "issueId": "DEMO-42",
        "deleted": False,
        "text": "Reproduced on linux.",
        "created": 1514768400000,
        "updated": None,
    },
    {
        "id": "4-18",
        "author": "alice",
        "authorFullName": "Alice Jones",
        "issueId": "DEMO-42",
        "deleted": False,
        "text": "Fixed in build 12.",
        "created": 1514772000000,
        "updated": 1514775600000,
    },
]


def make_response(
    status_code: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
    text: str | None = None,
    url: str = "https://youtrack.example.com/rest/issue",
) -> Response:
    """Build a real requests Response with the given status, body and headers."""
    response = Response()
    response.status_code = status_code
    response.url = url
    response.headers = CaseInsensitiveDict(headers or {})
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    response.encoding = "utf-8"
    return response


def requested_urls(mock_rest_api) -> list[tuple[str, str]]:
    """Return (method, path) for every request sent through a mocked transport."""
    return [
        (call.kwargs["method"], call.kwargs["path"])
        for call in mock_rest_api.request.call_args_list
    ]
