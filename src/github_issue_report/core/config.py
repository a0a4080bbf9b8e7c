"""Core configuration for the issue report."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_issue_report.logging import configure_logging


class LLMConfig(BaseSettings):
    """Configuration for the completion endpoint used to classify issues."""

    api_key: str | None = Field(
        default=None,
        description="OpenAI API key",
    )
    model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model to use",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature (0 keeps classification deterministic)",
    )
    max_tokens: int = Field(
        default=500,
        gt=0,
        description="Output token budget per classified issue",
    )
    base_url: str | None = Field(
        default=None,
        description="Alternative OpenAI-compatible API base URL",
    )

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        extra="ignore",
    )


class GitHubConfig(BaseSettings):
    """Configuration for GitHub integration."""

    token: str | None = Field(
        default=None,
        description="GitHub personal access token",
    )
    base_url: str = Field(
        default="https://api.github.com",
        description="GitHub API base URL",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (None waits indefinitely)",
    )

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        extra="ignore",
    )


class ReportConfig(BaseSettings):
    """Main configuration for a report run."""

    owner: str = Field(
        default="clairefro",
        description="Owner of the repository whose issues are reported",
    )
    repo: str = Field(
        default="obsidian-chat-cbt-plugin",
        description="Name of the repository whose issues are reported",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    llm: LLMConfig = Field(
        default_factory=LLMConfig,
        description="LLM configuration",
    )
    github: GitHubConfig = Field(
        default_factory=GitHubConfig,
        description="GitHub configuration",
    )

    model_config = SettingsConfigDict(
        env_prefix="REPORT_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def repository(self) -> str:
        """Return the reported repository as "owner/repo"."""
        return f"{self.owner}/{self.repo}"

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        configure_logging("DEBUG" if self.debug else self.log_level, debug=self.debug)
