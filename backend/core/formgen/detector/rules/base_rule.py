# detector/rules/base_rule.py
"""
Base contract for every type detection rule.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import FieldType, RuleScore
from ...profiler.models import ColumnProfile
from ...config import InferenceConfig


class BaseRule(ABC):
    """Interface of a detection rule: scores how well a column fits one field type."""

    def __init__(self, rule_id: str, description: str):
        self.rule_id = rule_id
        self.description = description
        self.enabled = True

    @property
    @abstractmethod
    def field_type(self) -> FieldType:
        """Field type proposed by the rule."""
        pass

    @abstractmethod
    def score(self, profile: ColumnProfile, config: InferenceConfig) -> Optional[RuleScore]:
        """
        Scores the column against the rule.

        Args:
            profile: Column to evaluate
            config: Detection thresholds

        Returns:
            RuleScore with a score in [0, 1], or None when the rule does not apply
        """
        pass

    def should_skip(self, profile: ColumnProfile) -> bool:
        """Columns without values are never scored."""
        return profile.is_empty

    def __repr__(self) -> str:
        return f"<Rule {self.rule_id}: {self.description}>"


class ValueMatchRule(BaseRule):
    """
    Rule that scores the fraction of non-null values accepted by a predicate.
    """

    label = "values"

    @abstractmethod
    def matches(self, value: str) -> bool:
        pass

    def score(self, profile: ColumnProfile, config: InferenceConfig) -> Optional[RuleScore]:
        values = profile.non_null_values
        if not values:
            return None

        matched = sum(1 for value in values if self.matches(value))
        if matched == 0:
            return None

        ratio = matched / len(values)
        return RuleScore(
            rule_id=self.rule_id,
            field_type=self.field_type,
            score=ratio,
            matched=matched,
            total=len(values),
            reasoning=f"{matched}/{len(values)} values look like {self.label}"
        )
