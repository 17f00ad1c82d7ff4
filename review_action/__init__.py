"""AI code review GitHub Action: reviews pull request diffs with an OpenAI model."""

__version__ = "0.1.0"
