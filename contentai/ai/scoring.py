"""
Confidence & Suggestions - heuristics attached to every envelope.

Confidence is a quality proxy, not a calibrated probability. Each source has
its own band so a caller can tell the paths apart from the number alone:

    provider   [0.75, 0.98]   real model output
    simulated  [0.50, 0.70]   local templates, no provider configured
    fallback   [0.10, 0.30]   local templates after a provider failure
    error      0.10           nothing could be produced

Suggestions are three picks from a per-task pool plus tips derived from the
returned content, capped at four.
"""

import random
from typing import Dict, List, Optional, Tuple

from contentai.ai.catalog import get_model
from contentai.ai.schemas.content import ResponseSource, TaskKind
from contentai.ai.synthesizer.text_analysis import extract_topics, has_bullets, has_headings, word_count

CONFIDENCE_RANGES: Dict[ResponseSource, Tuple[float, float]] = {
    ResponseSource.PROVIDER: (0.75, 0.98),
    ResponseSource.SIMULATED: (0.5, 0.7),
    ResponseSource.FALLBACK: (0.1, 0.3),
    ResponseSource.ERROR: (0.1, 0.1),
}

CATEGORY_BONUS = {
    "language": 0.04,
    "creative": 0.03,
    "analytical": 0.05,
    "multimodal": 0.02,
}

TASK_BONUS = {
    TaskKind.GENERATE: 0.02,
    TaskKind.REWRITE: 0.035,
    TaskKind.SUMMARIZE: 0.045,
    TaskKind.TRANSLATE: 0.025,
}

ENHANCER_BONUS = 0.015
MAX_SUGGESTIONS = 4
MIN_SUGGESTIONS = 2


def _clamp(value: float, source: ResponseSource) -> float:
    low, high = CONFIDENCE_RANGES[source]
    return min(max(round(value, 3), low), high)


def calculate_confidence(
    source: ResponseSource,
    task_kind: TaskKind,
    model_id: str,
    content: str = "",
    enhancers: Optional[List[str]] = None,
    rng: Optional[random.Random] = None,
) -> float:
    """
    Score an envelope.

    Args:
        source: Which path produced the content
        task_kind: The task kind
        model_id: Requested model id (its catalog category adds a bonus)
        content: The returned content
        enhancers: Requested enhancer ids
        rng: Source of jitter; pass a seeded Random for reproducible scores

    Returns:
        Confidence inside the band for ``source``
    """
    rng = rng or random.Random()
    enhancer_count = len(enhancers or [])

    if source == ResponseSource.PROVIDER:
        model = get_model(model_id)
        score = 0.85
        score += CATEGORY_BONUS.get(model.category, 0.0) if model else 0.0
        score += enhancer_count * ENHANCER_BONUS
        score += TASK_BONUS.get(task_kind, 0.0)
        if has_headings(content):
            score += 0.01
        if has_bullets(content):
            score += 0.01
        if word_count(content) >= 150:
            score += 0.01
        score += (rng.random() - 0.5) * 0.04
        return _clamp(score, source)

    if source == ResponseSource.SIMULATED:
        score = 0.62 + enhancer_count * 0.01 + (rng.random() - 0.5) * 0.04
        return _clamp(score, source)

    if source == ResponseSource.FALLBACK:
        return _clamp(0.2 + (rng.random() - 0.5) * 0.1, source)

    return CONFIDENCE_RANGES[ResponseSource.ERROR][0]


# ---------------------------------------------------------------------------
# SUGGESTIONS
# ---------------------------------------------------------------------------

GENERAL_SUGGESTIONS = [
    "Consider adjusting the tone to better match your target audience",
    "Try experimenting with different content lengths for various use cases",
    "Add specific examples to make the content more relatable and actionable",
]

SUGGESTION_POOLS: Dict[TaskKind, List[str]] = {
    TaskKind.GENERATE: [
        "For {topic} content, consider adding case studies or real-world examples",
        "Try different content formats (listicles, how-to guides, comparisons) for variety",
        "Consider creating a series of related content pieces for comprehensive coverage",
    ],
    TaskKind.REWRITE: [
        "Compare multiple rewrite styles to find the most effective approach",
        "Consider your audience's expertise level when choosing complexity",
        "Test different versions with your target audience for optimal results",
    ],
    TaskKind.SUMMARIZE: [
        "Try different summary formats for various distribution channels",
        "Consider creating both brief and detailed summary versions",
        "Adapt summary style based on your audience's time constraints",
    ],
    TaskKind.TRANSLATE: [
        "Consider cultural context and local expressions for better localization",
        "Review technical terminology with native speakers in your industry",
        "Test translations with your target market for cultural appropriateness",
    ],
}


def content_tips(content: str) -> List[str]:
    """Tips derived from the shape of the returned content."""
    tips = []
    count = word_count(content)
    if count < 100:
        tips.append("The result is brief; request a longer length for more depth")
    elif count > 800:
        tips.append("Consider splitting this into shorter pieces for easier reading")
    if not has_headings(content):
        tips.append("Add section headings to make the content easier to scan")
    return tips


def build_suggestions(
    task_kind: TaskKind,
    prompt: str,
    content: str,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Pick follow-up suggestions for an envelope.

    Returns between MIN_SUGGESTIONS and MAX_SUGGESTIONS entries.
    """
    rng = rng or random.Random()
    topics = extract_topics(prompt)
    topic = topics[0] if topics else "this"

    pool = [s.format(topic=topic) for s in SUGGESTION_POOLS.get(task_kind, []) + GENERAL_SUGGESTIONS]
    picks = rng.sample(pool, 3)

    suggestions = picks + [tip for tip in content_tips(content) if tip not in picks]
    return suggestions[:MAX_SUGGESTIONS]
