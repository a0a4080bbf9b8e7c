"""Classified report schema.

`REPORT_SCHEMA` is the declarative contract sent to the completion endpoint as
its structured-output format. `ClassifiedReport` validates what comes back
against the same contract, so a response that slips past the endpoint's
constraint is still rejected here. Validation is strict: parse completions with
`model_validate_json` so dates arrive as `YYYY-MM-DD` strings and nothing is
coerced across types.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, model_validator

Category = Literal["bug", "feature-request", "documentation"]
Status = Literal["OPEN", "CLOSED"]
UserType = Literal["CONTRIBUTOR", "MAINTAINER"]
UserMaturity = Literal["NOVICE", "POWER-USER"]

REPORT_SCHEMA: dict[str, Any] = {
    "name": "report_schema",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "category": {
                "type": "string",
                "enum": ["bug", "feature-request", "documentation"],
                "description": "The type of issue.",
            },
            "subcategory": {
                "type": "string",
                "description": "The specific feature or area in question.",
            },
            "date_opened": {
                "type": "string",
                "format": "date",
                "description": "The date in YYYY-MM-DD format.",
            },
            "status": {
                "type": "string",
                "enum": ["OPEN", "CLOSED"],
                "description": "The status of the issue.",
            },
            "author": {
                "type": "object",
                "properties": {
                    "user-type": {
                        "type": "string",
                        "enum": ["CONTRIBUTOR", "MAINTAINER"],
                        "description": "The type of user reporting the issue.",
                    },
                    "user-maturity": {
                        "type": "string",
                        "enum": ["NOVICE", "POWER-USER"],
                        "description": "The experience level of the user.",
                    },
                    "user-maturity-confidence": {
                        "type": "number",
                        "minimum": 0,
                        "maximum": 1,
                        "description": "The confidence level of the user's experience.",
                    },
                },
                "required": ["user-type", "user-maturity", "user-maturity-confidence"],
                "additionalProperties": False,
            },
            "github_issue_url": {
                "type": "string",
                "description": "The URL of the GitHub issue.",
            },
            "title": {
                "type": "string",
                "description": "The title of the GitHub issue",
            },
            "summary": {
                "type": "string",
                "description": "A one sentence summary of the issue",
            },
            "date_closed": {
                "type": ["string", "null"],
                "format": "date",
                "description": "The date when the issue was closed, or null if it is still open.",
            },
        },
        "required": [
            "category",
            "subcategory",
            "date_opened",
            "status",
            "author",
            "github_issue_url",
            "title",
            "summary",
            "date_closed",
        ],
        "additionalProperties": False,
    },
}


class Author(BaseModel):
    """Profile of the user who opened the issue."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True, strict=True)

    user_type: UserType = Field(alias="user-type")
    user_maturity: UserMaturity = Field(alias="user-maturity")
    user_maturity_confidence: float = Field(alias="user-maturity-confidence", ge=0.0, le=1.0)


class ClassifiedReport(BaseModel):
    """One classified issue, as produced by the completion endpoint."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True, strict=True)

    category: Category
    subcategory: str
    date_opened: date
    status: Status
    author: Author
    github_issue_url: HttpUrl
    title: str
    summary: str
    date_closed: date | None

    @model_validator(mode="after")
    def _closed_date_matches_status(self) -> ClassifiedReport:
        if self.status == "OPEN" and self.date_closed is not None:
            raise ValueError("date_closed must be null while the issue is OPEN")
        if self.status == "CLOSED" and self.date_closed is None:
            raise ValueError("date_closed is required once the issue is CLOSED")
        return self

    def to_wire(self) -> dict[str, Any]:
        """Return the report keyed by schema field names, JSON-compatible."""
        return self.model_dump(mode="json", by_alias=True)
