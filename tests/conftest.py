"""Test configuration and fixtures."""

from __future__ import annotations

import json
from typing import Any

import pytest

from github_issue_report.core.config import GitHubConfig, LLMConfig, ReportConfig


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials and a developer `.env` out of every test."""
    for name in (
        "GITHUB_TOKEN",
        "GITHUB_BASE_URL",
        "GITHUB_TIMEOUT",
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
        "OPENAI_TEMPERATURE",
        "OPENAI_MAX_TOKENS",
        "OPENAI_BASE_URL",
        "REPORT_OWNER",
        "REPORT_REPO",
        "REPORT_LOG_LEVEL",
        "REPORT_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def llm_config() -> LLMConfig:
    """Provide a test LLM configuration."""
    return LLMConfig(api_key="test-key")


@pytest.fixture
def github_config() -> GitHubConfig:
    """Provide a test GitHub configuration."""
    return GitHubConfig(token="test-token")


@pytest.fixture
def report_config(llm_config: LLMConfig, github_config: GitHubConfig) -> ReportConfig:
    """Provide a test report configuration."""
    return ReportConfig(
        owner="octo-org",
        repo="octo-repo",
        log_level="DEBUG",
        llm=llm_config,
        github=github_config,
    )


def make_issue(number: int, *, state: str = "open") -> dict[str, Any]:
    """Build a minimal raw issue as returned by the GitHub REST API."""
    return {
        "number": number,
        "title": f"Issue {number}",
        "body": f"Body of issue {number}",
        "state": state,
        "created_at": "2024-03-01T10:00:00Z",
        "closed_at": "2024-03-05T12:00:00Z" if state == "closed" else None,
        "html_url": f"https://github.com/octo-org/octo-repo/issues/{number}",
        "user": {"login": f"user{number}"},
        "author_association": "NONE",
    }


def make_report_payload(number: int, **overrides: Any) -> dict[str, Any]:
    """Build a completion payload that satisfies the report schema."""
    payload: dict[str, Any] = {
        "category": "bug",
        "subcategory": f"area-{number}",
        "date_opened": "2024-03-01",
        "status": "OPEN",
        "author": {
            "user-type": "CONTRIBUTOR",
            "user-maturity": "NOVICE",
            "user-maturity-confidence": 0.5,
        },
        "github_issue_url": f"https://github.com/octo-org/octo-repo/issues/{number}",
        "title": f"Issue {number}",
        "summary": f"Summary of issue {number}.",
        "date_closed": None,
    }
    payload.update(overrides)
    return payload


def make_report_json(number: int, **overrides: Any) -> str:
    return json.dumps(make_report_payload(number, **overrides))


@pytest.fixture(name="make_issue")
def make_issue_fixture():
    """Factory for raw GitHub issues."""
    return make_issue


@pytest.fixture(name="make_report_json")
def make_report_json_fixture():
    """Factory for schema-conformant completion payloads."""
    return make_report_json


@pytest.fixture(name="make_report_payload")
def make_report_payload_fixture():
    """Factory for schema-conformant report dicts."""
    return make_report_payload
