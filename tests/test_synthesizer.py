"""
Tests for the local synthesizer.

Randomness only picks between filler variants, so the heading structure of
each document must be identical for any seed.
"""

import random
import re

import pytest

from contentai.ai.prompts import build_tool_prompt
from contentai.ai.schemas import (
    ContentTask,
    GeneratePrefs,
    ModelConfig,
    RewritePrefs,
    SummarizePrefs,
    TaskKind,
    TranslatePrefs,
)
from contentai.ai.synthesizer import LocalSynthesizer, enhancer_blocks
from contentai.ai.synthesizer import templates
from contentai.ai.synthesizer.text_analysis import extract_topics, has_headings

SOURCE_TEXT = (
    "Renewable energy adoption accelerated sharply over the last decade. "
    "Solar installations became cheaper than coal in most regions. "
    "Wind farms now supply a large share of electricity in northern Europe. "
    "Battery storage remains the main bottleneck for round-the-clock supply. "
    "Grid operators are investing heavily in transmission upgrades. "
    "Policy support continues to shape how quickly new capacity comes online."
)


def _task(kind: TaskKind, text: str, prefs, enhancers=None) -> ContentTask:
    return ContentTask(
        prompt=build_tool_prompt(kind, text, prefs),
        task_kind=kind,
        preferences=prefs,
        config=ModelConfig(enhancers=enhancers or []),
    )


def _headings(content: str):
    return [line for line in content.splitlines() if line.startswith("#")]


class TestHeadingStability:
    """The document outline depends on the task, never on the seed."""

    @pytest.mark.parametrize("task", [
        _task(TaskKind.GENERATE, "Urban beekeeping", GeneratePrefs(tone="casual")),
        _task(TaskKind.REWRITE, "This is a good idea.", RewritePrefs(rewrite_style="creative")),
        _task(TaskKind.SUMMARIZE, SOURCE_TEXT, SummarizePrefs(summary_type="paragraph")),
        _task(TaskKind.TRANSLATE, "Good morning", TranslatePrefs(target_lang="de")),
    ], ids=["generate", "rewrite", "summarize", "translate"])
    def test_headings_identical_across_seeds(self, task):
        outlines = {
            tuple(_headings(LocalSynthesizer(random.Random(seed)).synthesize(task)))
            for seed in range(8)
        }

        assert len(outlines) == 1

    def test_same_seed_same_content(self):
        task = _task(TaskKind.GENERATE, "Urban beekeeping", GeneratePrefs())

        first = LocalSynthesizer(random.Random(7)).synthesize(task)
        second = LocalSynthesizer(random.Random(7)).synthesize(task)

        assert first == second


class TestGenerate:
    """Tests for generated demo content."""

    def test_outline(self):
        task = _task(TaskKind.GENERATE, "Urban beekeeping for beginners", GeneratePrefs())

        content = LocalSynthesizer(random.Random(1)).synthesize(task)
        headings = _headings(content)

        assert headings[0] == "# The Complete Guide to Urban Beekeeping"
        for heading in ["## Overview", "## Key Points", "## Body", "## Conclusion"]:
            assert heading in headings
        assert "### 1. Urban" in headings
        assert "## Practical Examples" not in headings
        assert "## Implementation Steps" not in headings

    def test_topics_come_from_user_text_not_tool_prefix(self):
        task = _task(TaskKind.GENERATE, "Composting", GeneratePrefs(content_type="article"))

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert "Blog" not in content.splitlines()[0]
        assert "### 1. Composting" in content

    def test_long_length_adds_sections(self):
        task = _task(TaskKind.GENERATE, "Composting", GeneratePrefs(length="long"))

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        for heading, _ in templates.LONG_FORM_SECTIONS:
            assert f"### {heading}" in content

    def test_examples_and_steps_triggered_by_prompt(self):
        task = _task(TaskKind.GENERATE, "How to start composting, with an example", GeneratePrefs())

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert "## Practical Examples" in content
        assert "## Implementation Steps" in content
        assert content.index("## Practical Examples") < content.index("## Conclusion")

    def test_topicless_prompt_still_renders(self):
        task = _task(TaskKind.GENERATE, "AI", GeneratePrefs())

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert "### 1. The topic" in content


class TestRewrite:
    """Tests for rewritten demo content."""

    def test_outline_and_original_quoted(self):
        task = _task(TaskKind.REWRITE, "We will utilize numerous tools.", RewritePrefs(rewrite_style="simplify"))

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert content.startswith("# Rewritten Content: Simplify Language")
        assert "> We will utilize numerous tools." in content
        assert "We will use many tools." in content
        for heading in ["## Original Content", "## Enhanced Version", "## Improvements Applied", "## Quality Metrics"]:
            assert heading in content

    def test_shorten_keeps_leading_sentences(self):
        text = "First point here. Second point here. Third point here. Fourth point here."
        task = _task(TaskKind.REWRITE, text, RewritePrefs(rewrite_style="shorten"))

        content = LocalSynthesizer(random.Random(1)).synthesize(task)
        enhanced = content.split("## Enhanced Version")[1].split("## Improvements Applied")[0]

        assert "First point here. Second point here." in enhanced
        assert "Fourth point" not in enhanced

    def test_quality_metrics_lines(self):
        task = _task(TaskKind.REWRITE, "Solar is cheap now. Panels last long.", RewritePrefs(rewrite_style="improve"))

        content = LocalSynthesizer(random.Random(1)).synthesize(task)
        metrics = content.split("## Quality Metrics")[1]

        assert "- **Words per sentence**: 4.0 → " in metrics
        assert re.search(r"- \*\*Professional standard\*\*: [79]/10", metrics)

    def test_unknown_style_falls_back(self):
        task = _task(TaskKind.REWRITE, "Plain text.", RewritePrefs(rewrite_style="pirate"))

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert content.startswith("# Rewritten Content: Pirate")
        for item in templates.IMPROVEMENTS["improve"]:
            assert f"- {item}" in content


class TestSummarize:
    """Tests for summarized demo content."""

    @pytest.mark.parametrize("summary_type", list(templates.SUMMARY_HEADINGS))
    def test_heading_per_type(self, summary_type):
        task = _task(TaskKind.SUMMARIZE, SOURCE_TEXT, SummarizePrefs(summary_type=summary_type))

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert f"## {templates.SUMMARY_HEADINGS[summary_type]}" in content
        assert "## Content Analysis" in content

    def test_length_limits_points(self):
        task = _task(
            TaskKind.SUMMARIZE,
            SOURCE_TEXT,
            SummarizePrefs(summary_type="key-takeaways", summary_length="short"),
        )

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert "**Takeaway 3**" in content
        assert "**Takeaway 4**" not in content

    def test_short_input_becomes_single_point(self):
        task = _task(TaskKind.SUMMARIZE, "Too short", SummarizePrefs())

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert "- Too short." in content


class TestTranslate:
    """Demo translations must never pass for real ones."""

    def test_placeholder_and_notice(self):
        task = _task(TaskKind.TRANSLATE, "Good morning, team", TranslatePrefs(source_lang="en", target_lang="es"))

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert "Demo mode" in content
        assert "## Original Text (English)" in content
        assert "## Translation (Spanish)" in content
        assert "Good morning, team" in content
        assert templates.TRANSLATION_PLACEHOLDER.format(target="Spanish") in content

    def test_fallback_notice(self):
        task = _task(TaskKind.TRANSLATE, "Good morning, team", TranslatePrefs(source_lang="en", target_lang="es"))

        content = LocalSynthesizer(random.Random(1)).synthesize(task, fallback=True)

        assert templates.TRANSLATION_FALLBACK_NOTICE in content
        assert templates.TRANSLATION_DEMO_NOTICE not in content
        assert templates.TRANSLATION_PLACEHOLDER.format(target="Spanish") in content


class TestEnhancerBlocks:
    """Tests for enhancer blocks appended to demo content."""

    def test_blocks_follow_request_order(self):
        blocks = enhancer_blocks(["structure-optimizer", "no-such-enhancer", "seo-enhancer"])

        assert len(blocks) == 2
        assert blocks[0].startswith("### Structure Optimizer Applied")
        assert blocks[1].startswith("### SEO Enhancer Applied")
        assert "- Strategic keyword placement for search visibility" in blocks[1]

    def test_enhancer_without_highlights_uses_description(self):
        blocks = enhancer_blocks(["translate-optimizer"])

        assert blocks == ["### Translation Optimizer Applied\n\n- Favors natural phrasing in the target language"]

    def test_no_enhancers(self):
        assert enhancer_blocks([]) == []

    def test_blocks_appended_to_content(self):
        task = _task(TaskKind.TRANSLATE, "Hi there", TranslatePrefs(), enhancers=["fact-checker"])

        content = LocalSynthesizer(random.Random(1)).synthesize(task)

        assert content.rstrip().endswith("- Unsupported statements softened")
        assert "### Fact Checker Applied" in content


class TestTextAnalysis:
    """Spot checks for the text heuristics the synthesizer relies on."""

    def test_extract_topics(self):
        assert extract_topics("Write a blog post about renewable energy storage") == [
            "blog", "post", "renewable", "energy", "storage",
        ]

    def test_has_headings(self):
        assert has_headings("intro\n## Section\ntext") is True
        assert has_headings("#hashtag only") is False
