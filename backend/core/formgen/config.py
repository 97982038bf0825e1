# formgen/config.py
"""
Tunable thresholds of the inference engine.

The values are heuristics, not business rules: the API layer overrides
them from environment settings.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InferenceConfig:
    # Profiler
    sample_size: int = 3

    # Detector
    min_match_ratio: float = 0.7          # value rules below this ratio are not candidates
    text_baseline_confidence: float = 0.5
    enum_max_distinct: int = 5
    enum_max_ratio: float = 0.5           # distinct / total rows
    textarea_min_length: int = 100
    max_alternatives: int = 3
    alternative_min_score: float = 0.1

    # Generator
    required_null_ratio: float = 0.1
    low_confidence_threshold: float = 0.7
    max_options: int = 20

    # Quality analyzer
    consistency_threshold: float = 0.7


DEFAULT_CONFIG = InferenceConfig()
