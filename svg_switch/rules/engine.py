"""
Switch evaluation engine for SVG conditional processing.

See http://www.w3.org/TR/SVG/struct.html#ConditionalProcessing
"""

from typing import Iterable, Mapping, Optional, Tuple, Union

from shared.errors import SwitchProcessingException
from shared.logging import get_logger
from ..locale.languages import LanguageSource, system_languages
from ..parsing.list_parser import parse_list
from .models import Attribute, PropertyBag, SwitchEvaluation
from .registry import EXTENSIONS, FEATURES, Registry

AttributeBag = Union[PropertyBag, Mapping[str, str], Iterable[Tuple[str, str]]]

logger = get_logger("svg_switch.rule_engine")

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def _ascii_casefold_equal(a: str, b: str) -> bool:
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


def fulfills_requirement(value: Optional[str], registry: Registry) -> bool:
    """True if every listed token is in the registry.

    An attribute that yields no tokens is an unsatisfied requirement.
    """
    tokens = parse_list(value)
    if not tokens:
        return False

    for token in tokens:
        if not registry.contains(token):
            return False
    return True


def locale_compare(a: str, b: str) -> bool:
    """Match preferred language ``a`` against required tag ``b``.

    Not symmetric: ``a`` matches when its first ``len(b)`` characters
    equal ``b``, or, when ``b`` has a hyphen, when both agree up to it.
    """
    # exact-ish match first
    if _ascii_casefold_equal(a[:len(b)], b):
        return True

    hyphen = b.find("-")
    if hyphen < 0:
        return False

    return _ascii_casefold_equal(a[:hyphen], b[:hyphen])


def matches_system_language(value: Optional[str], language_source: Optional[LanguageSource] = None) -> bool:
    """True if the first preferred language matches any listed tag."""
    tokens = parse_list(value)
    if not tokens:
        return False

    languages = (language_source or system_languages)()
    if not languages:
        logger.debug("No preferred language available", system_language=value)
        return False

    lang = languages[0]
    return any(locale_compare(lang, token) for token in tokens)


class SwitchEvaluator:
    """Evaluates conditional-processing attributes of one element."""

    def __init__(
        self,
        features: Registry = FEATURES,
        extensions: Registry = EXTENSIONS,
        language_source: Optional[LanguageSource] = None,
    ):
        self.logger = get_logger("svg_switch.evaluator")
        self.features = features
        self.extensions = extensions
        self.language_source = language_source

    def evaluate(self, attributes: AttributeBag) -> SwitchEvaluation:
        """Returns whether the element should be processed under <switch> semantics."""
        required_features_ok = True
        required_extensions_ok = True
        system_language_ok = True
        has_conditional = False

        try:
            bag = PropertyBag.coerce(attributes)
        except SwitchProcessingException as e:
            # Unreadable attributes exclude the element
            self.logger.warning("Invalid switch attributes", error=str(e), code=e.code, details=e.details)
            return SwitchEvaluation(
                permitted=False,
                has_conditional=True,
                required_features_ok=False,
                required_extensions_ok=False,
                system_language_ok=False,
            )

        for _, attr, value in bag:
            if attr is Attribute.REQUIRED_FEATURES:
                required_features_ok = fulfills_requirement(value, self.features)
                has_conditional = True
            elif attr is Attribute.REQUIRED_EXTENSIONS:
                required_extensions_ok = fulfills_requirement(value, self.extensions)
                has_conditional = True
            elif attr is Attribute.SYSTEM_LANGUAGE:
                system_language_ok = matches_system_language(value, self.language_source)
                has_conditional = True

        result = SwitchEvaluation(
            permitted=required_features_ok and required_extensions_ok and system_language_ok,
            has_conditional=has_conditional,
            required_features_ok=required_features_ok,
            required_extensions_ok=required_extensions_ok,
            system_language_ok=system_language_ok,
        )

        if has_conditional:
            self.logger.debug(
                "Switch attributes evaluated",
                permitted=result.permitted,
                required_features_ok=required_features_ok,
                required_extensions_ok=required_extensions_ok,
                system_language_ok=system_language_ok,
            )

        return result


_default_evaluator = SwitchEvaluator()


def evaluate_switch_conditions(attributes: AttributeBag) -> SwitchEvaluation:
    """Evaluate an element with the built-in registries and system languages."""
    return _default_evaluator.evaluate(attributes)
