# detector/rules/choice_rules.py
"""
Rules: enumerable types (yes/no and select).

Both rules carry the distinct values, in order of first appearance, as the
options of the resulting field.
"""

from typing import Optional

from .base_rule import BaseRule
from ..models import FieldType, RuleScore
from ..patterns import is_boolean
from ...profiler.models import ColumnProfile
from ...config import InferenceConfig


class YesNoRule(BaseRule):
    """Boolean vocabulary: yes/no, y/n, true/false (case-insensitive)."""

    def __init__(self):
        super().__init__(
            rule_id="yesno",
            description="Values drawn from a boolean vocabulary"
        )

    @property
    def field_type(self):
        return FieldType.YESNO

    def score(self, profile: ColumnProfile, config: InferenceConfig) -> Optional[RuleScore]:
        values = profile.non_null_values
        if not values:
            return None

        matched = sum(1 for value in values if is_boolean(value))
        if matched == 0:
            return None

        return RuleScore(
            rule_id=self.rule_id,
            field_type=self.field_type,
            score=matched / len(values),
            matched=matched,
            total=len(values),
            reasoning=f"{matched}/{len(values)} values are yes/no answers",
            options=tuple(profile.distinct_values())
        )


class SelectRule(BaseRule):
    """
    Low-cardinality columns: at most enum_max_distinct distinct values and a
    distinct/total ratio of at most enum_max_ratio.
    """

    def __init__(self):
        super().__init__(
            rule_id="select",
            description="Few distinct values repeated across rows"
        )

    @property
    def field_type(self):
        return FieldType.SELECT

    def score(self, profile: ColumnProfile, config: InferenceConfig) -> Optional[RuleScore]:
        if profile.total_count == 0:
            return None

        distinct = profile.distinct_values()
        ratio = len(distinct) / profile.total_count

        if len(distinct) > config.enum_max_distinct or ratio > config.enum_max_ratio:
            return None

        return RuleScore(
            rule_id=self.rule_id,
            field_type=self.field_type,
            score=1.0,
            matched=profile.non_null_count,
            total=profile.non_null_count,
            reasoning=(
                f"{len(distinct)} distinct values over {profile.total_count} rows "
                f"(ratio {ratio:.2f})"
            ),
            options=tuple(distinct)
        )
