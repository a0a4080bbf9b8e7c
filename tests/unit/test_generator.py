"""Unit tests for sequential report generation."""

from __future__ import annotations

import itertools
import logging
from unittest.mock import Mock

import pytest
import requests

from github_issue_report.core.config import GitHubConfig
from github_issue_report.errors import ClassificationError
from github_issue_report.github.client import GitHubClient
from github_issue_report.report.classifier import IssueClassifier
from github_issue_report.report.generator import ReportGenerator
from github_issue_report.report.schema import ClassifiedReport


class RecordingClassifier:
    """Classifier double that tags each report with the issue number it saw.

    Every call records a (start, end) tick pair from a shared counter so tests
    can check that no call started before the previous one finished.
    """

    def __init__(self, make_report_json, fail_on: int | None = None) -> None:
        self._make_report_json = make_report_json
        self._fail_on = fail_on
        self._clock = itertools.count()
        self.calls: list[tuple[int, int, int]] = []

    def classify(self, issue: dict) -> ClassifiedReport:
        start = next(self._clock)
        number = issue["number"]
        if len(self.calls) + 1 == self._fail_on:
            self.calls.append((number, start, next(self._clock)))
            raise ClassificationError(f"cannot classify #{number}")
        report = ClassifiedReport.model_validate_json(self._make_report_json(number))
        self.calls.append((number, start, next(self._clock)))
        return report


def _github_returning(issues: list[dict]) -> Mock:
    github = Mock(spec=GitHubClient)
    github.list_issues.return_value = issues
    return github


def test_reports_preserve_fetch_order(make_issue, make_report_json) -> None:
    issues = [make_issue(n) for n in (9, 2, 7, 4)]
    classifier = RecordingClassifier(make_report_json)
    generator = ReportGenerator(github=_github_returning(issues), classifier=classifier)

    reports = generator.generate("octo-org", "octo-repo")

    assert len(reports) == len(issues)
    assert [r.title for r in reports] == ["Issue 9", "Issue 2", "Issue 7", "Issue 4"]


def test_one_sequential_call_per_issue(make_issue, make_report_json) -> None:
    issues = [make_issue(n) for n in range(1, 6)]
    github = _github_returning(issues)
    classifier = RecordingClassifier(make_report_json)

    ReportGenerator(github=github, classifier=classifier).generate("o", "r")

    github.list_issues.assert_called_once_with("o", "r")
    assert [number for number, _, _ in classifier.calls] == [1, 2, 3, 4, 5]
    for (_, _, previous_end), (_, next_start, _) in itertools.pairwise(classifier.calls):
        assert next_start > previous_end


def test_progress_is_reported_after_fetch_and_each_issue(make_issue, make_report_json) -> None:
    progress: list[tuple[int, int]] = []
    generator = ReportGenerator(
        github=_github_returning([make_issue(1), make_issue(2)]),
        classifier=RecordingClassifier(make_report_json),
    )

    generator.generate("o", "r", on_progress=lambda done, total: progress.append((done, total)))

    assert progress == [(0, 2), (1, 2), (2, 2)]


def test_empty_repository_yields_empty_report() -> None:
    classifier = Mock(spec=IssueClassifier)
    generator = ReportGenerator(github=_github_returning([]), classifier=classifier)

    assert generator.generate("o", "r") == []
    classifier.classify.assert_not_called()


def test_fetch_failure_skips_classification() -> None:
    github = Mock(spec=GitHubClient)
    github.list_issues.side_effect = requests.HTTPError("404 Client Error")
    classifier = Mock(spec=IssueClassifier)
    progress = Mock()

    with pytest.raises(requests.HTTPError):
        ReportGenerator(github=github, classifier=classifier).generate(
            "o", "r", on_progress=progress
        )

    classifier.classify.assert_not_called()
    progress.assert_not_called()


def test_mid_run_failure_aborts_remaining_issues(make_issue, make_report_json) -> None:
    issues = [make_issue(n) for n in range(1, 6)]
    classifier = RecordingClassifier(make_report_json, fail_on=3)
    completed: list[int] = []

    with pytest.raises(ClassificationError, match="#3"):
        ReportGenerator(github=_github_returning(issues), classifier=classifier).generate(
            "o", "r", on_progress=lambda done, total: completed.append(done)
        )

    assert [number for number, _, _ in classifier.calls] == [1, 2, 3]
    assert completed == [0, 1, 2]


def test_fetched_count_is_logged_once(
    caplog: pytest.LogCaptureFixture, make_issue, make_report_json
) -> None:
    response = Mock(spec=requests.Response)
    response.json.return_value = [make_issue(1), make_issue(2)]
    session = Mock(spec=requests.Session)
    session.headers = {}
    session.get.return_value = response
    github = GitHubClient(GitHubConfig(token="t"), session=session)
    generator = ReportGenerator(github=github, classifier=RecordingClassifier(make_report_json))

    with caplog.at_level(logging.DEBUG):
        generator.generate("o", "r")

    fetched = [record for record in caplog.records if "Fetched" in record.getMessage()]
    assert len(fetched) == 1
    assert fetched[0].getMessage() == "Fetched 2 issues"
    assert fetched[0].repo == "o/r"
