"""Services for external API interactions."""

from review_action.services.github_service import GitHubService, read_event_payload

__all__ = ["GitHubService", "read_event_payload"]
