"""Classify one raw GitHub issue into a report record."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from github_issue_report.core.config import LLMConfig
from github_issue_report.errors import ClassificationError, CompletionError
from github_issue_report.github.client import RawIssue
from github_issue_report.llm.provider import LLMProvider
from github_issue_report.report.schema import REPORT_SCHEMA, ClassifiedReport

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "Extract information about a GitHub issue based on the response_format schema. "
    "The user prompt will be the issue info from the GitHub API."
)


def build_messages(issue: RawIssue) -> list[dict[str, str]]:
    """Return the system/user message pair for one issue."""

    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": json.dumps(issue)},
    ]


class IssueClassifier:
    """Turns raw issues into `ClassifiedReport` objects, one completion each."""

    def __init__(self, provider: LLMProvider, config: LLMConfig) -> None:
        self.provider = provider
        self.config = config

    def classify(self, issue: RawIssue) -> ClassifiedReport:
        """Classify a single issue.

        Raises:
            ClassificationError: The completion was empty, refused, not JSON, or
                did not satisfy the report schema.
        """

        try:
            content = self.provider.structured_chat(
                build_messages(issue),
                REPORT_SCHEMA,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        except CompletionError as e:
            raise ClassificationError(f"No usable completion: {e}") from e

        try:
            report = ClassifiedReport.model_validate_json(content)
        except ValidationError as e:
            logger.debug("Rejected completion", extra={"content": content[:500]})
            raise ClassificationError(
                f"Completion does not match {REPORT_SCHEMA['name']}: {e}"
            ) from e

        logger.debug(
            "Classified issue",
            extra={"url": str(report.github_issue_url), "category": report.category},
        )
        return report
