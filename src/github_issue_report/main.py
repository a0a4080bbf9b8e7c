"""CLI entrypoint for the issue report.

Fetches the configured repository's issues, classifies them one by one and
prints the collected report. Owner and repository come from configuration.
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

from github_issue_report import __version__
from github_issue_report.core.config import ReportConfig
from github_issue_report.github.client import GitHubClient
from github_issue_report.llm.openai_provider import OpenAIProvider
from github_issue_report.report.classifier import IssueClassifier
from github_issue_report.report.generator import ReportGenerator
from github_issue_report.report.schema import ClassifiedReport

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="issue-report",
        description="Classify the GitHub issues of a repository with an LLM",
    )
    parser.add_argument(
        "--version", action="version", version=f"github-issue-report {__version__}"
    )
    return parser


def _print_progress(done: int, total: int) -> None:
    if done == 0:
        print(f"fetched {total} issues")
        print("analyzing issues...")
    else:
        print(f"analyzed issue {done}/{total}")


def format_reports(reports: Sequence[ClassifiedReport]) -> str:
    return json.dumps([report.to_wire() for report in reports], indent=2, ensure_ascii=False)


def main(argv: Sequence[str] | None = None) -> int:
    build_parser().parse_args(argv)

    try:
        config = ReportConfig()
        config.setup_logging()
        logger.info("Generating issue report", extra={"repo": config.repository})

        with GitHubClient(config.github) as github:
            classifier = IssueClassifier(OpenAIProvider(config.llm), config.llm)
            generator = ReportGenerator(github=github, classifier=classifier)

            print("fetching issues...")
            reports = generator.generate(config.owner, config.repo, on_progress=_print_progress)

        print("Generated Report:")
        print(format_reports(reports))
        return 0

    except Exception:
        logger.exception("Report generation failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
