"""
Synthesizer Templates - declarative phrase tables for demo content.

Each table maps a preference value (tone, style, summary type...) to a list
of interchangeable variants. The synthesizer picks one variant at random, so
the filler text changes between calls while the document structure does not.

Placeholders use str.format fields: {topic}, {Topic}, {text}.
"""

import re
from typing import Callable, Dict, List

DEFAULT_KEY = "_default"


# ---------------------------------------------------------------------------
# GENERATE
# ---------------------------------------------------------------------------

TITLES: Dict[str, str] = {
    "blog-post": "The Complete Guide to {Topic}",
    "social-media": "{Topic}: What You Need to Know",
    "email": "Important Update About {Topic}",
    "article": "Understanding {Topic}: A Comprehensive Analysis",
    "marketing-copy": "Transform Your Business with {Topic}",
    "product-description": "Premium {Topic} Solution",
    "technical-doc": "{Topic} Technical Reference",
}

INTRODUCTIONS: Dict[str, List[str]] = {
    "professional": [
        "In today's dynamic landscape, understanding {topic} has become increasingly important for success.",
        "Organizations that take {topic} seriously consistently outperform those that treat it as an afterthought.",
    ],
    "casual": [
        "Let's dive into {topic} and explore what makes it so interesting right now.",
        "So, {topic}. Let's talk about why it's worth your time.",
    ],
    "friendly": [
        "Welcome! Today we're going to explore {topic} together and pick up some useful insights.",
        "Glad you're here! Let's take a relaxed look at {topic}.",
    ],
    "persuasive": [
        "Imagine what becomes possible when you truly master {topic}.",
        "The case for {topic} has never been stronger, and here is why.",
    ],
    "informative": [
        "This overview of {topic} covers the essential knowledge and practical insights you need.",
        "Here is a structured look at {topic}, from fundamentals to practical use.",
    ],
    "creative": [
        "Picture this: {topic} isn't just a concept, it's a doorway to new ideas.",
        "Every story about {topic} starts with a question worth asking.",
    ],
    DEFAULT_KEY: [
        "This content explores {topic} with a focus on practical applications and valuable insights.",
    ],
}

TOPIC_DETAILS: Dict[str, List[str]] = {
    "professional": [
        "Professional work on {topic} requires careful planning and strategic execution, with a focus on measurable outcomes.",
        "Best practice for {topic} is to set clear goals, track results and iterate on what the data shows.",
    ],
    "casual": [
        "When it comes to {topic}, keep it simple and practical. Focus on what actually works.",
        "Don't overthink {topic}. Start small and build from there.",
    ],
    "creative": [
        "{Topic} opens up a world of creative possibilities. Try the approach nobody else is taking.",
        "Treat {topic} as a sketchbook: experiment freely, then refine what works.",
    ],
    DEFAULT_KEY: [
        "Understanding {topic} means looking at it from several perspectives and tying it back to your goals.",
        "The practical side of {topic} is where most of the value shows up.",
    ],
}

INSIGHTS: Dict[str, List[str]] = {
    "professional": ["Strategic attention to {topic} drives measurable outcomes"],
    "casual": ["{Topic} is easier to get right than most people think"],
    "creative": ["{Topic} offers plenty of room for creative expression"],
    DEFAULT_KEY: ["Understanding {topic} provides significant practical value"],
}

CONCLUSIONS: Dict[str, List[str]] = {
    "professional": [
        "Mastering {topic} is a strategic advantage. The points above provide a solid foundation for putting it into practice.",
    ],
    "casual": [
        "So there you have it: the essentials of {topic}. Take these ideas and make them work for you.",
    ],
    "persuasive": [
        "The opportunity in {topic} is right in front of you. Start today and see the results for yourself.",
    ],
    DEFAULT_KEY: [
        "This exploration of {topic} gives you the knowledge and tools to move forward with confidence.",
    ],
}

LONG_FORM_SECTIONS = [
    ("Advanced Considerations", "For a deeper treatment of {topic}, weigh the trade-offs between speed, cost and quality at each stage."),
    ("Implementation Roadmap", "Plan the rollout of {topic} in phases: pilot, review, expand, and standardize."),
]

EXAMPLES = [
    ("Example 1: Real-World Application", "Consider how {topic} applies in an everyday scenario and which principle it demonstrates."),
    ("Example 2: Industry Case Study", "Teams that adopted {topic} deliberately report clearer priorities and better results."),
    ("Example 3: Putting It Into Practice", "Apply {topic} to one concrete project this week and note what changes."),
]

STEPS = [
    ("Step 1: Assessment and Planning", "Evaluate where {topic} can have the most impact today."),
    ("Step 2: Strategy Development", "Define an approach that fits your goals and resources."),
    ("Step 3: Implementation", "Execute the plan, monitoring progress and adjusting as needed."),
    ("Step 4: Evaluation and Optimization", "Measure results and refine the approach."),
]

EXAMPLE_TRIGGERS = ("example", "instance", "case study")
STEP_TRIGGERS = ("how to", "step", "process", "guide")


# ---------------------------------------------------------------------------
# REWRITE
# ---------------------------------------------------------------------------

def _sub_words(replacements: Dict[str, str]) -> Callable[[str], str]:
    """Build a whole-word, case-insensitive replacement function."""
    pattern = re.compile(r"\b(" + "|".join(map(re.escape, replacements)) + r")\b", re.IGNORECASE)
    return lambda text: pattern.sub(lambda m: replacements[m.group(1).lower()], text)


def _shorten(text: str) -> str:
    parts = [s.strip() for s in re.split(r"(?<=[.!?])\s+", text.strip()) if s.strip()]
    if len(parts) <= 1:
        return text.strip()
    return " ".join(parts[: (len(parts) + 1) // 2])


REWRITE_TRANSFORMS: Dict[str, Callable[[str], str]] = {
    "improve": _sub_words({"good": "excellent", "nice": "excellent", "great": "excellent", "big": "significant", "large": "significant"}),
    "simplify": _sub_words({"utilize": "use", "implement": "use", "facilitate": "help", "numerous": "many", "multiple": "many"}),
    "formal": _sub_words({"get": "obtain", "got": "obtained", "really": "particularly", "very": "particularly"}),
    "casual": _sub_words({"obtain": "get", "acquire": "get", "particularly": "really"}),
    "expand": lambda text: text.strip(),
    "shorten": _shorten,
    "professional": _sub_words({"i think": "analysis indicates", "i believe": "analysis indicates", "you should": "it is recommended to"}),
    "creative": lambda text: text.strip(),
}

REWRITE_FRAMES: Dict[str, List[str]] = {
    "improve": [
        "{text}\n\nThis revision sharpens word choice and flow while keeping the original intent.",
        "{text}\n\nThe wording above is tightened for precision and impact.",
    ],
    "simplify": [
        "{text}\n\nThis version uses everyday language that is easy to follow.",
    ],
    "formal": [
        "{text}\n\nThis version adopts a register suitable for business and academic contexts.",
    ],
    "casual": [
        "{text}\n\nThis version reads more like a conversation.",
    ],
    "expand": [
        "{text}\n\nBuilding on these points, it is worth considering the broader context, supporting evidence and practical applications that give the message more depth.",
    ],
    "shorten": ["{text}"],
    "professional": [
        "{text}\n\nThis revision keeps an objective tone suited to business communication.",
    ],
    "creative": [
        "Imagine this: {text}\n\nSeen from a fresh angle, the same idea opens up new possibilities.",
        "{text}\n\nThink of it as a canvas where familiar ideas meet unexpected solutions.",
    ],
}

IMPROVEMENTS: Dict[str, List[str]] = {
    "improve": ["Enhanced clarity and precision", "Improved sentence structure", "Stronger word choices", "Better flow and transitions"],
    "simplify": ["Simplified vocabulary", "Shorter sentences", "Clearer explanations", "Removed jargon"],
    "formal": ["Professional terminology", "Objective tone", "Structured presentation"],
    "casual": ["Conversational tone", "Accessible language", "Friendly approach"],
    "expand": ["Added context", "Supporting detail", "Broader implications"],
    "shorten": ["Removed redundancy", "Kept the leading points", "Reduced length"],
    "professional": ["Objective phrasing", "Business-appropriate wording", "Consistent voice"],
    "creative": ["Fresh framing", "Vivid language", "Narrative hook"],
}


# ---------------------------------------------------------------------------
# SUMMARIZE
# ---------------------------------------------------------------------------

SUMMARY_POINT_LIMITS = {"short": 3, "medium": 5, "long": 7}

SUMMARY_HEADINGS = {
    "bullet-points": "Key Points Summary",
    "paragraph": "Summary Paragraph",
    "key-takeaways": "Key Takeaways",
    "executive-summary": "Executive Summary",
    "outline": "Outline",
}
DEFAULT_SUMMARY_HEADING = "Summary"

PARAGRAPH_LEADS = [
    "This content focuses on {themes}.",
    "The central themes here are {themes}.",
]


# ---------------------------------------------------------------------------
# TRANSLATE
# ---------------------------------------------------------------------------

TRANSLATION_DEMO_NOTICE = (
    "> **Demo mode:** no translation provider is configured. The text under "
    "\"Translation\" is an untranslated placeholder, not an accurate translation. "
    "Add an API key to get a real translation."
)

TRANSLATION_FALLBACK_NOTICE = (
    "> **Demo mode:** the translation provider call failed. The text under "
    "\"Translation\" is an untranslated placeholder, not an accurate translation."
)

TRANSLATION_PLACEHOLDER = "[Untranslated placeholder: {target} translation is not available in demo mode]"


# ---------------------------------------------------------------------------
# BANNERS
# ---------------------------------------------------------------------------

SIMULATION_NOTICE = (
    "> **Demo mode:** no AI provider is configured, so this content was generated "
    "from local templates."
)
