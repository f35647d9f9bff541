"""
Model & Enhancer Catalog - Static registries offered to the UI.

MODELS lists the model presets a user can pick; the category feeds the
confidence heuristic. ENHANCERS lists the post-processing directives a user
can stack on a request. An enhancer does not trigger a second model pass:
its description is added to the system prompt for real calls and a
descriptive block is appended to simulated content.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ModelInfo:
    """A selectable model preset."""
    id: str
    name: str
    description: str
    category: str  # language | creative | analytical | multimodal
    capabilities: List[str] = field(default_factory=list)
    temperature: float = 0.7
    max_tokens: int = 2048


@dataclass(frozen=True)
class EnhancerInfo:
    """A named post-processing directive."""
    id: str
    name: str
    description: str
    highlights: List[str] = field(default_factory=list)


MODELS: List[ModelInfo] = [
    ModelInfo(
        id="gemini-pro",
        name="Gemini Pro",
        description="Google's most capable model for complex reasoning and creative tasks",
        category="language",
        capabilities=["text-generation", "reasoning", "analysis", "creative-writing"],
        temperature=0.7,
        max_tokens=4096,
    ),
    ModelInfo(
        id="gemini-pro-vision",
        name="Gemini Pro Vision",
        description="Multimodal model capable of understanding text and images",
        category="multimodal",
        capabilities=["text-generation", "image-analysis", "reasoning", "creative-writing"],
        temperature=0.6,
        max_tokens=4096,
    ),
    ModelInfo(
        id="gemini-1.5-pro",
        name="Gemini 1.5 Pro",
        description="Advanced model with extended context window and enhanced capabilities",
        category="language",
        capabilities=["text-generation", "analysis", "creative-writing", "code-generation"],
        temperature=0.6,
        max_tokens=8192,
    ),
    ModelInfo(
        id="gemini-flash",
        name="Gemini Flash",
        description="Fast and efficient model optimized for quick responses",
        category="language",
        capabilities=["text-generation", "reasoning", "quick-responses"],
        temperature=0.8,
        max_tokens=2048,
    ),
    ModelInfo(
        id="gpt-4o-mini",
        name="GPT-4o mini",
        description="OpenAI's fast, affordable model for everyday writing tasks",
        category="language",
        capabilities=["text-generation", "reasoning", "analysis"],
        temperature=0.7,
        max_tokens=4096,
    ),
    ModelInfo(
        id="creative-writer",
        name="Creative Writer",
        description="Specialized for creative and narrative content",
        category="creative",
        capabilities=["creative-writing", "storytelling", "poetry", "dialogue"],
        temperature=0.9,
        max_tokens=3000,
    ),
    ModelInfo(
        id="analytical-mind",
        name="Analytical Mind",
        description="Optimized for data analysis and logical reasoning",
        category="analytical",
        capabilities=["analysis", "reasoning", "research", "fact-checking"],
        temperature=0.3,
        max_tokens=2048,
    ),
]


ENHANCERS: List[EnhancerInfo] = [
    EnhancerInfo(
        id="tone-optimizer",
        name="Tone Optimizer",
        description="Adjusts content tone for target audience",
        highlights=[
            "Voice and tone calibrated for target audience",
            "Consistent messaging throughout content",
            "Emotional resonance enhanced",
        ],
    ),
    EnhancerInfo(
        id="seo-enhancer",
        name="SEO Enhancer",
        description="Optimizes content for search engines",
        highlights=[
            "Strategic keyword placement for search visibility",
            "Meta-description ready structure",
            "Header hierarchy optimized for crawling",
        ],
    ),
    EnhancerInfo(
        id="readability-improver",
        name="Readability Improver",
        description="Enhances text clarity and readability",
        highlights=[
            "Sentence complexity tuned for the audience",
            "Vocabulary accessibility improved",
            "Paragraph structure enhanced for better flow",
        ],
    ),
    EnhancerInfo(
        id="fact-checker",
        name="Fact Checker",
        description="Verifies factual accuracy of content",
        highlights=[
            "Claims flagged for verification",
            "Factual consistency maintained",
            "Unsupported statements softened",
        ],
    ),
    EnhancerInfo(
        id="creativity-booster",
        name="Creativity Booster",
        description="Adds creative elements and unique perspectives",
        highlights=[
            "Fresh angles on familiar topics",
            "Metaphors and storytelling elements",
            "Varied sentence rhythm",
        ],
    ),
    EnhancerInfo(
        id="structure-optimizer",
        name="Structure Optimizer",
        description="Improves content organization and flow",
        highlights=[
            "Logical information architecture",
            "Clear section transitions",
            "Hierarchical content organization",
        ],
    ),
    # Per-tool optimizers the unified tool adds automatically
    EnhancerInfo(
        id="generate-optimizer",
        name="Generation Optimizer",
        description="Keeps generated content focused on the requested topic and format",
    ),
    EnhancerInfo(
        id="rewrite-optimizer",
        name="Rewrite Optimizer",
        description="Preserves the original meaning while applying the requested style",
    ),
    EnhancerInfo(
        id="summarize-optimizer",
        name="Summary Optimizer",
        description="Prioritizes the most important points of the source text",
    ),
    EnhancerInfo(
        id="translate-optimizer",
        name="Translation Optimizer",
        description="Favors natural phrasing in the target language",
    ),
]

_MODELS_BY_ID: Dict[str, ModelInfo] = {m.id: m for m in MODELS}
_ENHANCERS_BY_ID: Dict[str, EnhancerInfo] = {e.id: e for e in ENHANCERS}


def get_model(model_id: str) -> Optional[ModelInfo]:
    return _MODELS_BY_ID.get(model_id)


def get_enhancer(enhancer_id: str) -> Optional[EnhancerInfo]:
    return _ENHANCERS_BY_ID.get(enhancer_id)


def model_display_name(model_id: str) -> str:
    """Human-readable model name, falling back to the raw id."""
    model = get_model(model_id)
    return model.name if model else model_id
