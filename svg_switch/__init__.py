"""
SVG conditional processing package.

This package decides whether an element inside an SVG ``<switch>`` is
eligible for rendering, based on its ``requiredFeatures``,
``requiredExtensions`` and ``systemLanguage`` attributes. It provides:

- svg_switch.rules: Registries, attribute bag and the switch evaluator.
- svg_switch.parsing: Tokenizer for list-valued attributes.
- svg_switch.locale: The process's preferred-language source.

Guidelines:
- Evaluation is stateless; nothing is cached between calls.
- Evaluation never raises; every failure excludes the element.
"""

from .rules.engine import (
    SwitchEvaluator,
    evaluate_switch_conditions,
    fulfills_requirement,
    locale_compare,
    matches_system_language,
)
from .rules.models import Attribute, PropertyBag, SwitchEvaluation
from .rules.registry import EXTENSIONS, FEATURES, Registry

__all__ = [
    "Attribute",
    "EXTENSIONS",
    "FEATURES",
    "PropertyBag",
    "Registry",
    "SwitchEvaluation",
    "SwitchEvaluator",
    "evaluate_switch_conditions",
    "fulfills_requirement",
    "locale_compare",
    "matches_system_language",
]
