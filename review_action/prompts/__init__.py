"""Prompts sent to the review model."""

from .code_reviewer_prompt import REVIEW_INSTRUCTIONS, create_prompt

__all__ = ["REVIEW_INSTRUCTIONS", "create_prompt"]
