"""
Conditional processing rules.

Modules of interest:
- registry: Sorted, immutable catalogs of supported features and extensions.
- models: Attribute identifiers, the attribute bag and evaluation results.
- engine: requiredFeatures / requiredExtensions / systemLanguage checks and
  the switch evaluator combining them.
"""
