"""Issue classification and report generation."""

from github_issue_report.report.classifier import IssueClassifier
from github_issue_report.report.generator import ReportGenerator
from github_issue_report.report.schema import REPORT_SCHEMA, Author, ClassifiedReport

__all__ = [
    "REPORT_SCHEMA",
    "Author",
    "ClassifiedReport",
    "IssueClassifier",
    "ReportGenerator",
]
