"""
Content Prompt Templates - system instructions for the four content tools.

The user's prompt is always sent as the primary message. Everything built
here goes to the provider's system channel:

    <fixed instruction for the task kind>

    Preferences:
    - Tone: professional
    - Length: medium

    Enhancements to apply:
    - SEO Enhancer: Optimizes content for search engines

    Additional instructions:
    <caller's custom system prompt>

build_tool_prompt() assembles the user prompt from raw tool input the way
the content tools phrase it ("Rewrite the following content to ...: <text>").
"""

from typing import List, Optional

from contentai.ai.catalog import get_enhancer
from contentai.ai.schemas.content import (
    ContentTask,
    GeneratePrefs,
    RewritePrefs,
    SummarizePrefs,
    TaskKind,
    TranslatePrefs,
)


# ---------------------------------------------------------------------------
# FIXED INSTRUCTIONS PER TASK KIND
# ---------------------------------------------------------------------------

TASK_INSTRUCTIONS = {
    TaskKind.GENERATE: (
        "You are a professional content writer. Create original, well-structured content "
        "based on the user's request. Use Markdown with a title, clear section headings "
        "and bullet points where they help the reader."
    ),
    TaskKind.REWRITE: (
        "You are an expert editor. Rewrite the text provided by the user in the requested "
        "style. Preserve the original meaning and key facts. Return only the rewritten text."
    ),
    TaskKind.SUMMARIZE: (
        "You are an expert at distilling information. Summarize the text provided by the "
        "user in the requested format and length. Keep the most important points and do "
        "not add information that is not in the source."
    ),
    TaskKind.TRANSLATE: (
        "You are a professional translator. Translate the text provided by the user from "
        "the source language to the target language. Preserve meaning, tone and formatting. "
        "Return only the translation."
    ),
}


# ---------------------------------------------------------------------------
# LABELS
# ---------------------------------------------------------------------------

LANGUAGE_NAMES = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "zh": "Chinese (Simplified)",
    "ja": "Japanese",
    "ko": "Korean",
    "ar": "Arabic",
    "hi": "Hindi",
    "te": "Telugu",
    "nl": "Dutch",
    "sv": "Swedish",
    "no": "Norwegian",
}

CONTENT_TYPE_LABELS = {
    "blog-post": "Blog Post",
    "social-media": "Social Media",
    "email": "Email",
    "product-description": "Product Description",
    "article": "Article",
    "marketing-copy": "Marketing Copy",
    "technical-doc": "Technical Documentation",
}

REWRITE_STYLE_LABELS = {
    "improve": "Improve Writing",
    "simplify": "Simplify Language",
    "formal": "Make More Formal",
    "casual": "Make More Casual",
    "expand": "Expand Ideas",
    "shorten": "Make Shorter",
    "professional": "Professional Tone",
    "creative": "Creative Enhancement",
}

SUMMARY_TYPE_LABELS = {
    "bullet-points": "Bullet Points",
    "paragraph": "Paragraph",
    "key-takeaways": "Key Takeaways",
    "executive-summary": "Executive Summary",
    "outline": "Outline Format",
}


def humanize(value: str) -> str:
    """'blog-post' → 'Blog Post'"""
    return value.replace("-", " ").replace("_", " ").title()


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, code)


# ---------------------------------------------------------------------------
# SYSTEM PROMPT
# ---------------------------------------------------------------------------

def describe_preferences(task: ContentTask) -> List[str]:
    """Render the task's preferences as 'Label: value' lines."""
    prefs = task.preferences
    if isinstance(prefs, GeneratePrefs):
        return [
            f"Content type: {CONTENT_TYPE_LABELS.get(prefs.content_type, humanize(prefs.content_type))}",
            f"Tone: {prefs.tone}",
            f"Length: {prefs.length}",
        ]
    if isinstance(prefs, RewritePrefs):
        return [f"Rewrite style: {REWRITE_STYLE_LABELS.get(prefs.rewrite_style, humanize(prefs.rewrite_style))}"]
    if isinstance(prefs, SummarizePrefs):
        return [
            f"Summary format: {SUMMARY_TYPE_LABELS.get(prefs.summary_type, humanize(prefs.summary_type))}",
            f"Summary length: {prefs.summary_length}",
        ]
    if isinstance(prefs, TranslatePrefs):
        return [
            f"Source language: {language_name(prefs.source_lang)}",
            f"Target language: {language_name(prefs.target_lang)}",
        ]
    return []


def describe_enhancers(enhancer_ids: List[str]) -> List[str]:
    """Look up enhancer descriptions; unknown ids are skipped."""
    lines = []
    for enhancer_id in enhancer_ids:
        enhancer = get_enhancer(enhancer_id)
        if enhancer:
            lines.append(f"{enhancer.name}: {enhancer.description}")
    return lines


def build_system_prompt(task: ContentTask) -> str:
    """
    Build the system/preamble message for a task.

    Args:
        task: The content task

    Returns:
        Instruction text for the provider's system channel
    """
    sections = [TASK_INSTRUCTIONS[task.task_kind]]

    preference_lines = describe_preferences(task)
    if preference_lines:
        sections.append("Preferences:\n" + "\n".join(f"- {line}" for line in preference_lines))

    enhancer_lines = describe_enhancers(task.config.enhancers)
    if enhancer_lines:
        sections.append("Enhancements to apply:\n" + "\n".join(f"- {line}" for line in enhancer_lines))

    if task.config.system_prompt and task.config.system_prompt.strip():
        sections.append("Additional instructions:\n" + task.config.system_prompt.strip())

    return "\n\n".join(sections)


# ---------------------------------------------------------------------------
# TOOL PROMPTS
# ---------------------------------------------------------------------------

def build_tool_prompt(
    task_kind: TaskKind,
    text: str,
    preferences: Optional[object] = None,
) -> str:
    """
    Phrase raw tool input as the user prompt for a task kind.

    Example:
        >>> build_tool_prompt(TaskKind.TRANSLATE, "Hello", TranslatePrefs(target_lang="es"))
        'Translate the following text from English to Spanish: Hello'
    """
    text = text.strip()

    if task_kind == TaskKind.GENERATE:
        prefs = preferences if isinstance(preferences, GeneratePrefs) else GeneratePrefs()
        label = CONTENT_TYPE_LABELS.get(prefs.content_type, humanize(prefs.content_type))
        return f"Create a {label} with a {prefs.tone} tone and {prefs.length} length about: {text}"

    if task_kind == TaskKind.REWRITE:
        prefs = preferences if isinstance(preferences, RewritePrefs) else RewritePrefs()
        label = REWRITE_STYLE_LABELS.get(prefs.rewrite_style, humanize(prefs.rewrite_style))
        return f"Rewrite the following content to {label}: {text}"

    if task_kind == TaskKind.SUMMARIZE:
        prefs = preferences if isinstance(preferences, SummarizePrefs) else SummarizePrefs()
        label = SUMMARY_TYPE_LABELS.get(prefs.summary_type, humanize(prefs.summary_type))
        return f"Create a {label} summary ({prefs.summary_length} length) of: {text}"

    prefs = preferences if isinstance(preferences, TranslatePrefs) else TranslatePrefs()
    return (
        f"Translate the following text from {language_name(prefs.source_lang)} "
        f"to {language_name(prefs.target_lang)}: {text}"
    )
