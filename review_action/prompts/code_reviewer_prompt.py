"""Prompt for reviewing a single diff chunk."""

from review_action.models.diff import DiffChunk, DiffFile
from review_action.models.github_types import PRDetails

REVIEW_INSTRUCTIONS = """Your task is to review pull requests. Instructions:
- Provide the response in following JSON format:  [{"lineNumber":  <line_number>, "reviewComment": "<review comment>"}]
- Do not give positive comments or compliments.
- Provide comments and suggestions ONLY if there is something to improve, otherwise return an empty array.
- Write the comment in GitHub Markdown format.
- Use the given description only for the overall context and only comment the code.
- Do not be nitpicky. Provide only useful and valuable suggestions.
- IMPORTANT: NEVER suggest adding comments to the code.
- IMPORTANT: If applicable, provide a suggestion. Here is an example of how to create a suggestion:
```suggestion
				{className: cx("icon", item.icon?.props.className, theme)}
```"""


def format_chunk(chunk: DiffChunk) -> str:
    """Render a chunk as its header followed by numbered change lines.

    Each change is prefixed with the line it anchors to: the new-file line
    number for added and context lines, the old-file one for deleted lines.
    """
    lines = [chunk.content]
    lines.extend(f"{change.line_number} {change.content}" for change in chunk.changes)
    return "\n".join(lines)


def create_prompt(file: DiffFile, chunk: DiffChunk, pr_details: PRDetails) -> str:
    """Build the review prompt for one chunk of one file.

    Args:
        file: File being reviewed
        chunk: Chunk of that file to review
        pr_details: Pull request title and description for context

    Returns:
        Complete prompt string
    """
    return f"""{REVIEW_INSTRUCTIONS}

Review the following code diff in the file "{file.to_path}" and take the pull request title and description into account when writing the response.

Pull request title: {pr_details.title}
Pull request description:

---
{pr_details.description}
---

Git diff to review:

```diff
{format_chunk(chunk)}
```
"""
