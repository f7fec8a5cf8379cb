"""
Data models for conditional processing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from shared.errors import AttributeValueError


class Attribute(str, Enum):
    """SVG attribute identifiers."""
    REQUIRED_FEATURES = "requiredFeatures"
    REQUIRED_EXTENSIONS = "requiredExtensions"
    SYSTEM_LANGUAGE = "systemLanguage"
    ID = "id"
    CLASS = "class"
    STYLE = "style"
    TRANSFORM = "transform"
    X = "x"
    Y = "y"
    WIDTH = "width"
    HEIGHT = "height"
    XML_LANG = "xml:lang"

    @property
    def is_conditional(self) -> bool:
        return self in CONDITIONAL_ATTRIBUTES

    @classmethod
    def lookup(cls, name: Union[str, "Attribute"]) -> Optional["Attribute"]:
        """Resolve an attribute name, or None if it is not recognized."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None


CONDITIONAL_ATTRIBUTES = frozenset({
    Attribute.REQUIRED_FEATURES,
    Attribute.REQUIRED_EXTENSIONS,
    Attribute.SYSTEM_LANGUAGE,
})


class PropertyBag:
    """Immutable, ordered attributes of a single element."""

    def __init__(self, attributes: Union[Mapping[str, str], Iterable[Tuple[str, str]], None] = None):
        if attributes is None:
            pairs = ()
        elif isinstance(attributes, Mapping):
            pairs = tuple(attributes.items())
        else:
            pairs = tuple(attributes)

        items = []
        for key, value in pairs:
            name = key.value if isinstance(key, Attribute) else str(key)
            if not isinstance(value, str):
                raise AttributeValueError(
                    name,
                    f"expected a string, got {type(value).__name__}"
                )
            items.append((name, Attribute.lookup(name), value))

        self._items: Tuple[Tuple[str, Optional[Attribute], str], ...] = tuple(items)

    @classmethod
    def coerce(cls, attributes: Union["PropertyBag", Mapping[str, str], Iterable[Tuple[str, str]], None]) -> "PropertyBag":
        if isinstance(attributes, cls):
            return attributes
        return cls(attributes)

    def __iter__(self) -> Iterator[Tuple[str, Optional[Attribute], str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, name: Union[str, Attribute], default: Optional[str] = None) -> Optional[str]:
        """Value of the last occurrence of an attribute."""
        key = name.value if isinstance(name, Attribute) else name
        for item_name, _, value in reversed(self._items):
            if item_name == key:
                return value
        return default

    def has_conditional_attributes(self) -> bool:
        return any(attr is not None and attr.is_conditional for _, attr, _ in self._items)

    def __repr__(self) -> str:
        return f"PropertyBag({[(name, value) for name, _, value in self._items]!r})"


@dataclass(frozen=True)
class SwitchEvaluation:
    """Result of evaluating an element's conditional attributes."""
    permitted: bool
    has_conditional: bool
    required_features_ok: bool = True
    required_extensions_ok: bool = True
    system_language_ok: bool = True

    def __iter__(self):
        # Unpacks as (permitted, has_conditional)
        return iter((self.permitted, self.has_conditional))
