# detector/rule_registry.py
"""
Central registry of detection rules.
"""

from dataclasses import fields, replace
from typing import Dict, Type, List, Optional

from .models import RuleConfiguration
from .rules import ALL_RULES, BaseRule
from ..config import InferenceConfig


class RuleRegistry:
    """Registration, priority and configuration of detection rules."""

    def __init__(self):
        self._rules: Dict[str, Type[BaseRule]] = {}
        self._rule_instances: Dict[str, BaseRule] = {}
        self._configurations: Dict[str, RuleConfiguration] = {}

        self.register_default_rules()

    def register_default_rules(self):
        """Registers every default rule, keeping ALL_RULES order as priority."""
        for rule_id, rule_class in ALL_RULES.items():
            self.register_rule(rule_id, rule_class)

    def register_rule(self, rule_id: str, rule_class: Type[BaseRule], priority: Optional[int] = None):
        """
        Registers a new rule.

        Rules registered without an explicit priority rank after every
        rule already registered.
        """
        if rule_id in self._rules:
            raise ValueError(f"Rule already registered: {rule_id}")

        self._rules[rule_id] = rule_class
        self._rule_instances[rule_id] = rule_class()

        if priority is None:
            priority = len(self._configurations)

        self._configurations[rule_id] = RuleConfiguration(
            rule_id=rule_id,
            enabled=True,
            priority=priority
        )

    def get_rule(self, rule_id: str) -> Optional[BaseRule]:
        if rule_id not in self._rule_instances:
            return None

        instance = self._rule_instances[rule_id]
        config = self._configurations.get(rule_id)
        if config:
            instance.enabled = config.enabled

        return instance

    def get_enabled_rules(self) -> List[BaseRule]:
        """Enabled rules sorted by priority (lowest value first)."""
        enabled = [
            (config.priority, rule_id)
            for rule_id, config in self._configurations.items()
            if config.enabled
        ]
        return [self._rule_instances[rule_id] for _, rule_id in sorted(enabled)]

    def priority_of(self, rule_id: str) -> int:
        return self._configurations[rule_id].priority

    def configure_rule(self, rule_id: str, enabled: bool = None, priority: int = None, **params):
        """
        Configures one rule.

        Extra keyword arguments override InferenceConfig thresholds for
        this rule only (e.g. ``enum_max_distinct=10`` for ``select``).
        """
        if rule_id not in self._configurations:
            raise ValueError(f"Rule not found: {rule_id}")

        known = {f.name for f in fields(InferenceConfig)}
        unknown = set(params) - known
        if unknown:
            raise ValueError(f"Unknown parameters for rule {rule_id}: {', '.join(sorted(unknown))}")

        config = self._configurations[rule_id]

        if enabled is not None:
            config.enabled = enabled

        if priority is not None:
            config.priority = priority

        if params:
            config.params.update(params)

    def effective_config(self, rule_id: str, base: InferenceConfig) -> InferenceConfig:
        """Base thresholds with the rule's own overrides applied."""
        params = self._configurations[rule_id].params
        return replace(base, **params) if params else base

    def list_rules(self) -> List[Dict]:
        """Every registered rule with its state."""
        rules_info = []

        for rule_id, instance in self._rule_instances.items():
            config = self._configurations[rule_id]

            rules_info.append({
                "rule_id": rule_id,
                "description": instance.description,
                "field_type": instance.field_type.value,
                "enabled": config.enabled,
                "priority": config.priority,
                "params": dict(config.params),
                "class": instance.__class__.__name__
            })

        return sorted(rules_info, key=lambda info: info["priority"])
