#!/usr/bin/env python3
"""Programmatic report example.

This demonstrates using the report components directly:

* load settings from `.env`
* classify the issues of a repository given on the command line
* print a one-line summary per issue instead of the full JSON report
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from github_issue_report.core.config import ReportConfig
from github_issue_report.github.client import GitHubClient
from github_issue_report.llm.openai_provider import OpenAIProvider
from github_issue_report.report.classifier import IssueClassifier
from github_issue_report.report.generator import ReportGenerator


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify GitHub issues (programmatic example).")
    parser.add_argument("--repo", required=True, help='Target repository in the form "owner/repo"')
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    owner, _, repo = args.repo.partition("/")

    config = ReportConfig()
    config.setup_logging()

    with GitHubClient(config.github) as github:
        classifier = IssueClassifier(OpenAIProvider(config.llm), config.llm)
        reports = ReportGenerator(github=github, classifier=classifier).generate(owner, repo)

    for report in reports:
        print(f"[{report.status}] {report.category}/{report.subcategory}: {report.title}")
        print(f"    {report.summary}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
