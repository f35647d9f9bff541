"""
Synthesizer Module - Local demo content for simulation and fallback paths.
"""

from contentai.ai.synthesizer.synthesizer import LocalSynthesizer, enhancer_blocks
from contentai.ai.synthesizer.templates import SIMULATION_NOTICE

__all__ = [
    "LocalSynthesizer",
    "enhancer_blocks",
    "SIMULATION_NOTICE",
]
