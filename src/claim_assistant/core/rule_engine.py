"""
Dictionary-based Rule Engine for document classification.
Allows easy addition and management of classification rules.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .models import DocumentType, UploadedFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationContext:
    """Inputs visible to a classification rule."""

    files: tuple[UploadedFile, ...]
    text: str

    @classmethod
    def build(
        cls, files: Sequence[UploadedFile], extracted_text: str | None
    ) -> "ClassificationContext":
        return cls(files=tuple(files), text=(extracted_text or "").lower())

    @property
    def has_image(self) -> bool:
        return any(f.is_image for f in self.files)

    @property
    def image_filenames(self) -> list[str]:
        return [f.filename.lower() for f in self.files if f.is_image]


@dataclass
class ClassificationRule:
    """Definition of a classification rule."""

    rule_id: str
    name: str
    description: str
    labels: list[DocumentType]
    keywords: list[str] = field(default_factory=list)
    matcher: Callable[[ClassificationContext], bool] | None = None
    enabled: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def matches(self, context: ClassificationContext) -> bool:
        if self.matcher is not None:
            return self.matcher(context)
        return any(keyword in context.text for keyword in self.keywords)


class RuleEngine:
    """
    Dictionary-based rule engine for managing and executing
    classification rules.

    Every enabled rule is evaluated independently and in registration
    order; a match never suppresses later rules.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ClassificationRule] = {}

    def add_rule(self, rule: ClassificationRule) -> None:
        """Add a rule to the engine, replacing any rule with the same ID."""
        self._rules[rule.rule_id] = rule

    def remove_rule(self, rule_id: str) -> bool:
        """Remove a rule from the engine."""
        if rule_id not in self._rules:
            return False
        del self._rules[rule_id]
        return True

    def get_rule(self, rule_id: str) -> ClassificationRule | None:
        """Get a specific rule by ID."""
        return self._rules.get(rule_id)

    def enable_rule(self, rule_id: str) -> bool:
        """Enable a specific rule."""
        if rule_id in self._rules:
            self._rules[rule_id].enabled = True
            return True
        return False

    def disable_rule(self, rule_id: str) -> bool:
        """Disable a specific rule."""
        if rule_id in self._rules:
            self._rules[rule_id].enabled = False
            return True
        return False

    def execute_rule(
        self, rule: ClassificationRule, context: ClassificationContext
    ) -> list[DocumentType]:
        """Execute a single rule against the batch."""
        if not rule.enabled:
            return []

        try:
            matched = rule.matches(context)
        except Exception:
            # Failing rules count as not fired
            logger.exception("Classification rule %s failed", rule.rule_id)
            return []

        if matched:
            logger.debug("Rule %s fired: %s", rule.rule_id, rule.name)
            return list(rule.labels)
        return []

    def execute_all(self, context: ClassificationContext) -> list[DocumentType]:
        """Execute all enabled rules, returning labels in rule order."""
        labels: list[DocumentType] = []
        for rule in self._rules.values():
            labels.extend(self.execute_rule(rule, context))
        return labels

    def list_rules(self) -> list[dict[str, Any]]:
        """List all rules with their status."""
        return [
            {
                "rule_id": rule.rule_id,
                "name": rule.name,
                "labels": [label.value for label in rule.labels],
                "enabled": rule.enabled,
                "description": rule.description,
            }
            for rule in self._rules.values()
        ]
