"""
Prompts Module - Prompt templates for consistent LLM interactions.
"""

from contentai.ai.prompts.content_prompts import (
    TASK_INSTRUCTIONS,
    build_system_prompt,
    build_tool_prompt,
)

__all__ = [
    "TASK_INSTRUCTIONS",
    "build_system_prompt",
    "build_tool_prompt",
]
