"""Review model client using Pydantic AI and OpenAI."""

import json
import logging
import re
from typing import Any

from openai import AsyncOpenAI
from pydantic import ValidationError
from pydantic_ai import Agent, RunContext
from pydantic_ai.exceptions import UnexpectedModelBehavior
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from review_action.errors import ReviewModelError
from review_action.models.outputs import ReviewSuggestion

logger = logging.getLogger(__name__)

# Near-deterministic sampling with a bounded reply
REVIEW_MODEL_SETTINGS = ModelSettings(
    temperature=0.2,
    max_tokens=2000,
    top_p=1,
    frequency_penalty=0,
    presence_penalty=0,
)

_CODE_FENCE_RE = re.compile(r"^```[\w-]*\s*\n(.*?)\n?```$", re.DOTALL)


def build_openai_model(model_name: str, api_key: str) -> OpenAIChatModel:
    """Create the OpenAI chat model used for reviews.

    The underlying OpenAI client is built with ``max_retries=0``: a failed
    request ends the run instead of being retried.
    """
    openai_client = AsyncOpenAI(api_key=api_key, max_retries=0)
    return OpenAIChatModel(
        model_name, provider=OpenAIProvider(openai_client=openai_client)
    )


def _strip_code_fence(text: str) -> str:
    if match := _CODE_FENCE_RE.match(text):
        return match.group(1).strip()
    return text


def parse_review_suggestions(text: str | None) -> list[ReviewSuggestion] | None:
    """Parse the model's reply into suggestions.

    Args:
        text: Raw reply; expected to be a JSON array of
            ``{"lineNumber", "reviewComment"}`` objects

    Returns:
        The suggestions (possibly empty), or None if the reply is not a JSON
        array. Entries that are not valid suggestion objects are skipped.
    """
    reply = _strip_code_fence((text or "").strip()) or "[]"

    try:
        data: Any = json.loads(reply)
    except json.JSONDecodeError as e:
        logger.warning(f"Review model reply is not valid JSON: {e}")
        return None

    if not isinstance(data, list):
        logger.warning(
            f"Review model reply is a JSON {type(data).__name__}, expected an array"
        )
        return None

    suggestions = []
    for entry in data:
        try:
            suggestions.append(ReviewSuggestion.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Skipping malformed review suggestion {entry!r}: {e}")
    return suggestions


def review_prompt(ctx: RunContext[str]) -> str:
    """Send the rendered chunk prompt as the system message."""
    return ctx.deps


class ReviewModelClient:
    """Sends review prompts to the model and parses the replies.

    An unusable reply yields None for that prompt only. A failure to reach
    the provider raises ReviewModelError and ends the run.
    """

    def __init__(
        self,
        model: Model | str,
        model_settings: ModelSettings | None = None,
    ):
        # retries=0: an unusable reply is not sent back to the model
        self.agent: Agent[str, str] = Agent(
            model=model,
            deps_type=str,
            output_type=str,
            model_settings=model_settings or REVIEW_MODEL_SETTINGS,
            retries=0,
        )
        self.agent.system_prompt(review_prompt)

    @classmethod
    def from_openai(cls, model_name: str, api_key: str) -> "ReviewModelClient":
        """Create a client for an OpenAI model."""
        return cls(build_openai_model(model_name, api_key))

    async def get_ai_response(self, prompt: str) -> list[ReviewSuggestion] | None:
        """Run one review prompt, sent as the only (system) message.

        Args:
            prompt: Prompt built for a single diff chunk

        Returns:
            Parsed suggestions, or None when the reply could not be used

        Raises:
            ReviewModelError: If the model provider call itself failed
        """
        try:
            result = await self.agent.run(deps=prompt)
        except UnexpectedModelBehavior as e:
            logger.warning(f"Review model returned an unusable response: {e}")
            return None
        except Exception as e:
            raise ReviewModelError(f"Error fetching AI response: {e}") from e

        return parse_review_suggestions(result.output)
