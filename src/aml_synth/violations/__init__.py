"""Rule catalog and violation scenario composition."""

from aml_synth.violations.catalog import (
    CATEGORY_LABELS,
    RULE_CATALOG,
    get_rule,
    rule_codes,
    rules_by_category,
)
from aml_synth.violations.composer import ViolationComposer

__all__ = [
    "CATEGORY_LABELS",
    "RULE_CATALOG",
    "ViolationComposer",
    "get_rule",
    "rule_codes",
    "rules_by_category",
]
