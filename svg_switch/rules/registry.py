"""
Supported feature and extension registries.
"""

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from shared.errors import RegistryError


@dataclass(frozen=True)
class Registry:
    """Sorted, immutable catalog of supported identifiers."""
    name: str
    entries: Tuple[str, ...] = ()

    def __post_init__(self):
        entries = tuple(self.entries)
        for previous, current in zip(entries, entries[1:]):
            if not previous < current:
                raise RegistryError(
                    "Registry entries must be strictly ascending",
                    details={"registry": self.name, "previous": previous, "entry": current}
                )
        object.__setattr__(self, "entries", entries)

    @classmethod
    def from_entries(cls, name: str, entries: Iterable[str]) -> "Registry":
        """Build a registry from unordered entries."""
        return cls(name=name, entries=tuple(sorted(set(entries))))

    def contains(self, identifier: str) -> bool:
        """Exact, case-sensitive membership test."""
        index = bisect_left(self.entries, identifier)
        return index < len(self.entries) and self.entries[index] == identifier

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.contains(identifier)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)


# Keep these sorted: lookups are a binary search
FEATURES = Registry(
    name="features",
    entries=(
        "http://www.w3.org/TR/SVG11/feature#BasicFilter",
        "http://www.w3.org/TR/SVG11/feature#BasicGraphicsAttribute",
        "http://www.w3.org/TR/SVG11/feature#BasicPaintAttribute",
        "http://www.w3.org/TR/SVG11/feature#BasicStructure",
        "http://www.w3.org/TR/SVG11/feature#BasicText",
        "http://www.w3.org/TR/SVG11/feature#ConditionalProcessing",
        "http://www.w3.org/TR/SVG11/feature#ContainerAttribute",
        "http://www.w3.org/TR/SVG11/feature#Filter",
        "http://www.w3.org/TR/SVG11/feature#Gradient",
        "http://www.w3.org/TR/SVG11/feature#Image",
        "http://www.w3.org/TR/SVG11/feature#Marker",
        "http://www.w3.org/TR/SVG11/feature#Mask",
        "http://www.w3.org/TR/SVG11/feature#OpacityAttribute",
        "http://www.w3.org/TR/SVG11/feature#Pattern",
        "http://www.w3.org/TR/SVG11/feature#SVG",
        "http://www.w3.org/TR/SVG11/feature#SVG-static",
        "http://www.w3.org/TR/SVG11/feature#Shape",
        "http://www.w3.org/TR/SVG11/feature#Structure",
        "http://www.w3.org/TR/SVG11/feature#Style",
        "http://www.w3.org/TR/SVG11/feature#View",
        "org.w3c.svg.static",  # deprecated SVG 1.0 feature string
    ),
)

# No extensions are implemented
EXTENSIONS = Registry(name="extensions")
