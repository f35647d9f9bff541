"""
Text Analysis - small heuristics over prompts and source text.

Everything here is deterministic; randomness lives in the synthesizer.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import List

STOP_WORDS = {
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "about", "write", "create", "generate", "this", "that", "from",
    "into", "your", "their", "there", "what", "which", "have", "will", "would",
    "should", "could", "tone", "length", "medium", "short", "long",
}

# Prefixes the content tools put in front of the user's text
_ORIGINAL_TEXT_PATTERNS = [
    re.compile(r"rewrite the following content.*?:\s*(.*)", re.IGNORECASE | re.DOTALL),
    re.compile(r"translate the following text.*?:\s*(.*)", re.IGNORECASE | re.DOTALL),
    re.compile(r"create a.*?summary.*?of:\s*(.*)", re.IGNORECASE | re.DOTALL),
    re.compile(r"summarize.*?:\s*(.*)", re.IGNORECASE | re.DOTALL),
    re.compile(r"create a.*?about:\s*(.*)", re.IGNORECASE | re.DOTALL),
]

_WORD_RE = re.compile(r"[^\W\d_][\w'-]*", re.UNICODE)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


@dataclass
class TextStats:
    word_count: int
    sentence_count: int
    avg_words_per_sentence: float
    readability_score: int
    engagement_level: str
    clarity_rating: int
    professional_rating: int

    @property
    def summary(self) -> str:
        return f"{self.word_count} words, {self.sentence_count} sentences"


def words(text: str) -> List[str]:
    return _WORD_RE.findall(text)


def word_count(text: str) -> int:
    return len(text.split())


def sentences(text: str, min_length: int = 1) -> List[str]:
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if len(s.strip()) >= min_length]


def extract_topics(prompt: str, limit: int = 5) -> List[str]:
    """
    Pick up to ``limit`` distinct significant words from a prompt,
    in order of first appearance.

    Example:
        >>> extract_topics("Write a blog post about renewable energy storage")
        ['blog', 'post', 'renewable', 'energy', 'storage']
    """
    topics: List[str] = []
    for word in words(prompt.lower()):
        if len(word) > 3 and word not in STOP_WORDS and word not in topics:
            topics.append(word)
        if len(topics) == limit:
            break
    return topics


def extract_original_text(prompt: str) -> str:
    """Strip a tool prefix ("Rewrite the following content to X: ...") from a prompt."""
    for pattern in _ORIGINAL_TEXT_PATTERNS:
        match = pattern.search(prompt)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return prompt.strip()


def analyze_text(text: str) -> TextStats:
    count = max(1, word_count(text))
    sentence_total = max(1, len(sentences(text)))
    avg = count / sentence_total
    lowered = text.lower()
    return TextStats(
        word_count=count,
        sentence_count=sentence_total,
        avg_words_per_sentence=avg,
        readability_score=int(min(100, max(0, 100 - avg * 2))),
        engagement_level="High" if count > 100 else "Medium",
        clarity_rating=8 if avg < 20 else 6,
        professional_rating=9 if ("professional" in lowered or "business" in lowered) else 7,
    )


def extract_key_points(text: str, limit: int = 7) -> List[str]:
    """Sentences long enough to carry a point; short inputs fall back to the whole text."""
    points = sentences(text, min_length=21)[:limit]
    if not points and text.strip():
        points = [text.strip()]
    return points


def identify_themes(text: str, limit: int = 5) -> List[str]:
    """Most frequent significant words, ties broken by first appearance."""
    significant = [w for w in words(text.lower()) if len(w) > 4 and w not in STOP_WORDS]
    return [word for word, _ in Counter(significant).most_common(limit)]


def assess_complexity(text: str) -> str:
    count = max(1, word_count(text))
    avg_word_length = len(re.sub(r"\s+", "", text)) / count
    if avg_word_length > 6:
        return "High"
    if avg_word_length > 4:
        return "Medium"
    return "Low"


def has_headings(text: str) -> bool:
    return bool(re.search(r"^#{1,6}\s+\S", text, re.MULTILINE))


def has_bullets(text: str) -> bool:
    return bool(re.search(r"^\s*(?:[-*•]|\d+\.)\s+\S", text, re.MULTILINE))
