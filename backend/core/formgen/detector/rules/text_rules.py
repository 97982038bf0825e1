# detector/rules/text_rules.py
"""
Rule: long free text.
"""

from typing import Optional

from .base_rule import BaseRule
from ..models import FieldType, RuleScore
from ...profiler.models import ColumnProfile
from ...config import InferenceConfig


class TextareaRule(BaseRule):

    def __init__(self):
        super().__init__(
            rule_id="textarea",
            description="Multi-line or long values"
        )

    @property
    def field_type(self):
        return FieldType.TEXTAREA

    def score(self, profile: ColumnProfile, config: InferenceConfig) -> Optional[RuleScore]:
        values = profile.non_null_values
        if not values:
            return None

        matched = sum(
            1 for value in values
            if len(value) > config.textarea_min_length or "\n" in value
        )
        if matched == 0:
            return None

        return RuleScore(
            rule_id=self.rule_id,
            field_type=self.field_type,
            score=matched / len(values),
            matched=matched,
            total=len(values),
            reasoning=(
                f"{matched}/{len(values)} values are multi-line or longer than "
                f"{config.textarea_min_length} characters"
            )
        )
