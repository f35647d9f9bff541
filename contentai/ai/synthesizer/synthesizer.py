"""
Local Synthesizer - template-driven demo content when no provider answers.

One pure function per task kind renders Markdown from the declarative tables
in templates.py. Randomness only ever picks between filler variants, so the
heading structure of a document depends on the task alone:

    generate  → # Title / ## Overview / ## Key Points / ## Body / ## Conclusion
    rewrite   → ## Original Content / ## Enhanced Version / ## Improvements Applied / ## Quality Metrics
    summarize → ## <format heading> / ## Content Analysis
    translate → ## Original Text (<source>) / ## Translation (<target>)

Requested enhancers each append a "### <Name> Applied" block.
"""

import logging
import random
from typing import Callable, Dict, List, Optional

from contentai.ai.catalog import get_enhancer, model_display_name
from contentai.ai.prompts.content_prompts import (
    CONTENT_TYPE_LABELS,
    REWRITE_STYLE_LABELS,
    SUMMARY_TYPE_LABELS,
    humanize,
    language_name,
)
from contentai.ai.schemas.content import (
    ContentTask,
    GeneratePrefs,
    RewritePrefs,
    SummarizePrefs,
    TaskKind,
    TranslatePrefs,
)
from contentai.ai.synthesizer import templates as t
from contentai.ai.synthesizer.text_analysis import (
    analyze_text,
    assess_complexity,
    extract_key_points,
    extract_original_text,
    extract_topics,
    identify_themes,
    word_count,
)

logger = logging.getLogger("contentai.ai.synthesizer")


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------

def _pick(table: Dict[str, List[str]], key: str, rng: random.Random) -> str:
    return rng.choice(table.get(key) or table[t.DEFAULT_KEY])


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def _fill(template: str, topic: str) -> str:
    return template.format(topic=topic, Topic=_capitalize(topic))


def _as_sentence(text: str) -> str:
    return text.strip().rstrip(".!?") + "."


def _quote(text: str) -> str:
    return "\n".join(f"> {line}" if line.strip() else ">" for line in text.strip().splitlines())


# ---------------------------------------------------------------------------
# GENERATE
# ---------------------------------------------------------------------------

def synthesize_generate(task: ContentTask, rng: random.Random) -> str:
    prefs = task.preferences if isinstance(task.preferences, GeneratePrefs) else GeneratePrefs()
    subject = extract_original_text(task.prompt)
    topics = extract_topics(subject)[:3] or ["the topic"]
    main_topic = topics[0]
    label = CONTENT_TYPE_LABELS.get(prefs.content_type, humanize(prefs.content_type))
    lowered = task.prompt.lower()

    title = t.TITLES.get(prefs.content_type, "{Topic}: Key Insights")
    lines = [
        f"# {_fill(title, ' '.join(topics[:2]).title())}",
        "",
        "## Overview",
        "",
        _fill(_pick(t.INTRODUCTIONS, prefs.tone, rng), main_topic),
        "",
        "## Key Points",
        "",
    ]
    for topic in topics:
        lines.append(f"- **{_capitalize(topic)}**: {_fill(_pick(t.INSIGHTS, prefs.tone, rng), topic)}")

    lines += ["", "## Body", "", f"This {label.lower()} is written in a {prefs.tone} tone.", ""]
    for index, topic in enumerate(topics, start=1):
        lines += [f"### {index}. {_capitalize(topic)}", "", _fill(_pick(t.TOPIC_DETAILS, prefs.tone, rng), topic), ""]

    if prefs.length in ("long", "very-long"):
        for heading, text in t.LONG_FORM_SECTIONS:
            lines += [f"### {heading}", "", _fill(text, main_topic), ""]

    if any(trigger in lowered for trigger in t.EXAMPLE_TRIGGERS):
        lines += ["## Practical Examples", ""]
        for heading, text in t.EXAMPLES:
            lines += [f"### {heading}", "", _fill(text, main_topic), ""]

    if any(trigger in lowered for trigger in t.STEP_TRIGGERS):
        lines += ["## Implementation Steps", ""]
        for heading, text in t.STEPS:
            lines += [f"### {heading}", "", _fill(text, main_topic), ""]

    lines += [
        "## Conclusion",
        "",
        _fill(_pick(t.CONCLUSIONS, prefs.tone, rng), main_topic),
        "",
        "---",
        f"*{label} drafted from local templates for {model_display_name(task.config.model_id)}.*",
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# REWRITE
# ---------------------------------------------------------------------------

def synthesize_rewrite(task: ContentTask, rng: random.Random) -> str:
    prefs = task.preferences if isinstance(task.preferences, RewritePrefs) else RewritePrefs()
    style = prefs.rewrite_style
    original = extract_original_text(task.prompt)

    transform: Callable[[str], str] = t.REWRITE_TRANSFORMS.get(style, str.strip)
    frame = rng.choice(t.REWRITE_FRAMES.get(style, ["{text}"]))
    rewritten = frame.format(text=transform(original))

    before = analyze_text(original)
    after = analyze_text(rewritten)
    improvements = t.IMPROVEMENTS.get(style, t.IMPROVEMENTS["improve"])

    lines = [
        f"# Rewritten Content: {REWRITE_STYLE_LABELS.get(style, humanize(style))}",
        "",
        "## Original Content",
        "",
        _quote(original),
        "",
        "## Enhanced Version",
        "",
        rewritten,
        "",
        "## Improvements Applied",
        "",
    ]
    lines += [f"- {item}" for item in improvements]
    lines += [
        "",
        "## Quality Metrics",
        "",
        f"- **Original**: {before.summary}",
        f"- **Rewritten**: {after.summary}",
        f"- **Readability score**: {after.readability_score}/100",
        f"- **Clarity rating**: {after.clarity_rating}/10",
        f"- **Professional standard**: {after.professional_rating}/10",
        f"- **Words per sentence**: {before.avg_words_per_sentence:.1f} → {after.avg_words_per_sentence:.1f}",
        f"- **Engagement level**: {after.engagement_level}",
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# SUMMARIZE
# ---------------------------------------------------------------------------

def _summary_body(summary_type: str, points: List[str], themes: List[str], rng: random.Random) -> List[str]:
    if summary_type == "paragraph":
        lead = rng.choice(t.PARAGRAPH_LEADS).format(themes=", ".join(themes))
        return [" ".join([lead] + [_as_sentence(p) for p in points])]

    if summary_type == "key-takeaways":
        return [f"{i}. **Takeaway {i}**: {_as_sentence(p)}" for i, p in enumerate(points, start=1)]

    if summary_type == "executive-summary":
        return [
            f"**Overview**: The content centers on {', '.join(themes)}.",
            "",
            "**Key Findings**:",
            "",
            *[f"- {_as_sentence(p)}" for p in points],
            "",
            f"**Recommendation**: Focus follow-up work on {themes[0]}.",
        ]

    if summary_type == "outline":
        lines = ["1. Main Themes"]
        lines += [f"   - {_capitalize(theme)}" for theme in themes]
        lines.append("2. Supporting Points")
        lines += [f"   - {_as_sentence(p)}" for p in points]
        return lines

    return [f"- {_as_sentence(p)}" for p in points]


def synthesize_summarize(task: ContentTask, rng: random.Random) -> str:
    prefs = task.preferences if isinstance(task.preferences, SummarizePrefs) else SummarizePrefs()
    original = extract_original_text(task.prompt)
    limit = t.SUMMARY_POINT_LIMITS.get(prefs.summary_length, t.SUMMARY_POINT_LIMITS["medium"])
    points = extract_key_points(original, limit)
    themes = identify_themes(original) or ["the main subject"]
    stats = analyze_text(original)
    summary_words = sum(word_count(p) for p in points)

    heading = t.SUMMARY_HEADINGS.get(prefs.summary_type, t.DEFAULT_SUMMARY_HEADING)
    label = SUMMARY_TYPE_LABELS.get(prefs.summary_type, humanize(prefs.summary_type))

    lines = [
        "# Content Summary",
        "",
        f"**Format**: {label} | **Length**: {prefs.summary_length}",
        "",
        f"## {heading}",
        "",
        *_summary_body(prefs.summary_type, points, themes, rng),
        "",
        "## Content Analysis",
        "",
        f"- **Source**: {stats.summary}",
        f"- **Main themes**: {', '.join(themes)}",
        f"- **Complexity**: {assess_complexity(original)}",
        f"- **Compression**: {min(100, round(summary_words / stats.word_count * 100))}% of the original length",
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# TRANSLATE
# ---------------------------------------------------------------------------

def synthesize_translate(task: ContentTask, rng: random.Random, fallback: bool = False) -> str:
    """Original text plus a labeled placeholder; fallback names the failed call instead of a missing key."""
    prefs = task.preferences if isinstance(task.preferences, TranslatePrefs) else TranslatePrefs()
    original = extract_original_text(task.prompt)
    source = language_name(prefs.source_lang)
    target = language_name(prefs.target_lang)

    lines = [
        "# Translation Preview",
        "",
        t.TRANSLATION_FALLBACK_NOTICE if fallback else t.TRANSLATION_DEMO_NOTICE,
        "",
        f"## Original Text ({source})",
        "",
        original,
        "",
        f"## Translation ({target})",
        "",
        t.TRANSLATION_PLACEHOLDER.format(target=target),
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# ENHANCERS
# ---------------------------------------------------------------------------

def enhancer_blocks(enhancer_ids: List[str]) -> List[str]:
    """Render a '### <Name> Applied' block per known enhancer, in request order."""
    blocks = []
    for enhancer_id in enhancer_ids:
        enhancer = get_enhancer(enhancer_id)
        if enhancer is None:
            logger.debug(f"Unknown enhancer skipped: {enhancer_id}")
            continue
        highlights = enhancer.highlights or [enhancer.description]
        blocks.append("\n".join([f"### {enhancer.name} Applied", ""] + [f"- {h}" for h in highlights]))
    return blocks


SYNTHESIZERS: Dict[TaskKind, Callable[[ContentTask, random.Random], str]] = {
    TaskKind.GENERATE: synthesize_generate,
    TaskKind.REWRITE: synthesize_rewrite,
    TaskKind.SUMMARIZE: synthesize_summarize,
    TaskKind.TRANSLATE: synthesize_translate,
}


class LocalSynthesizer:
    """
    Renders demo content for a task without any network access.

    Pass a seeded ``random.Random`` to make the filler text reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def synthesize(self, task: ContentTask, fallback: bool = False) -> str:
        """Render a task. fallback=True marks content that replaces a failed provider call."""
        if task.task_kind == TaskKind.TRANSLATE:
            body = synthesize_translate(task, self.rng, fallback=fallback)
        else:
            body = SYNTHESIZERS[task.task_kind](task, self.rng)
        blocks = enhancer_blocks(task.config.enhancers)
        if blocks:
            body = "\n\n".join([body] + blocks)
        logger.debug(f"Synthesized {task.task_kind.value} content ({len(body)} chars)")
        return body
