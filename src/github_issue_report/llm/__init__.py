"""LLM package initialization."""

from github_issue_report.llm.openai_provider import OpenAIProvider
from github_issue_report.llm.provider import LLMProvider

__all__ = [
    "LLMProvider",
    "OpenAIProvider",
]
