# detector/detector.py
"""
Type detector: turns a ColumnProfile into exactly one TypeDetectionResult.

Every enabled rule scores the column. Rules reaching ``min_match_ratio``
are candidates, ``text`` is always a candidate at the baseline confidence,
and the best score wins with ties broken by registry priority.
"""

import logging
from typing import List, Optional, Tuple

from .models import (
    FieldType, RuleScore, AlternativeType, TypeDetectionResult
)
from .rule_registry import RuleRegistry
from .semantic import semantic_hint
from .suggestions import build_suggestions
from ..profiler.models import ColumnProfile
from ..config import InferenceConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)

TEXT_RULE_ID = "text"


class TypeDetector:
    """Scores every enabled rule against a column and picks the winner."""

    def __init__(self, config: Optional[InferenceConfig] = None,
                 rule_registry: Optional[RuleRegistry] = None):
        self.config = config or DEFAULT_CONFIG
        self.rule_registry = rule_registry or RuleRegistry()

    def detect(self, profile: ColumnProfile) -> TypeDetectionResult:
        if profile.is_empty:
            return TypeDetectionResult(
                column_index=profile.column_index,
                column_name=profile.column_name,
                field_type=FieldType.TEXT,
                confidence=0.0,
                reasoning="Column has no values"
            )

        scores = self._score_rules(profile)
        candidates = [
            (rank, score) for rank, score in scores
            if score.score >= self.config.min_match_ratio
        ]
        # text ranks after every rule
        text_rank = len(self.rule_registry.get_enabled_rules())
        candidates.append((text_rank, self._text_baseline(profile)))

        # Highest score first, lowest rank breaks ties
        candidates.sort(key=lambda item: (-item[1].score, item[0]))
        winner = candidates[0][1]

        field_type = winner.field_type
        confidence = winner.score
        reasoning = winner.reasoning
        options = winner.options

        if winner.rule_id == TEXT_RULE_ID:
            hint = semantic_hint(profile.column_name)
            if hint is not None and hint[0] != FieldType.TEXT:
                field_type, keyword = hint
                reasoning = f"Column name contains '{keyword}'; values are free text"

        alternatives = self._alternatives(scores, winner, field_type)
        suggestions = build_suggestions(field_type, profile)

        logger.debug(
            f"Column '{profile.column_name}' detected as {field_type.value} "
            f"(confidence {confidence:.2f})"
        )

        return TypeDetectionResult(
            column_index=profile.column_index,
            column_name=profile.column_name,
            field_type=field_type,
            confidence=confidence,
            reasoning=reasoning,
            options=options,
            alternatives=tuple(alternatives),
            validation_suggestions=tuple(suggestions)
        )

    def detect_all(self, profiles: List[ColumnProfile]) -> List[TypeDetectionResult]:
        return [self.detect(profile) for profile in profiles]

    def _score_rules(self, profile: ColumnProfile) -> List[Tuple[int, RuleScore]]:
        """Scores of every applicable enabled rule, paired with its rank."""
        scores = []

        for rank, rule in enumerate(self.rule_registry.get_enabled_rules()):
            if rule.should_skip(profile):
                continue

            config = self.rule_registry.effective_config(rule.rule_id, self.config)
            result = rule.score(profile, config)
            if result is not None:
                scores.append((rank, result))

        return scores

    def _text_baseline(self, profile: ColumnProfile) -> RuleScore:
        total = profile.non_null_count
        return RuleScore(
            rule_id=TEXT_RULE_ID,
            field_type=FieldType.TEXT,
            score=self.config.text_baseline_confidence,
            matched=total,
            total=total,
            reasoning="No specific pattern matched; free text"
        )

    def _alternatives(self, scores: List[Tuple[int, RuleScore]], winner: RuleScore,
                      chosen: FieldType) -> List[AlternativeType]:
        ranked = sorted(scores, key=lambda item: (-item[1].score, item[0]))
        alternatives = []

        for _, score in ranked:
            if score.rule_id == winner.rule_id or score.field_type == chosen:
                continue
            if score.score <= self.config.alternative_min_score:
                continue
            alternatives.append(AlternativeType(
                field_type=score.field_type,
                confidence=score.score,
                reasoning=score.reasoning
            ))
            if len(alternatives) >= self.config.max_alternatives:
                break

        if winner.rule_id != TEXT_RULE_ID and chosen != FieldType.TEXT \
                and len(alternatives) < self.config.max_alternatives:
            alternatives.append(AlternativeType(
                field_type=FieldType.TEXT,
                confidence=self.config.text_baseline_confidence,
                reasoning="Any value can be entered as free text"
            ))

        return alternatives
