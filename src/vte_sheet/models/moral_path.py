"""Moral Paths a character may follow instead of (or as) Humanity."""

from __future__ import annotations

from dataclasses import dataclass, field

# A Path's hierarchy of sins always has one entry per rating from 1 to 10.
HIERARCHY_LENGTH = 10


@dataclass(frozen=True)
class MoralPath:
    """
    A moral Path.

    Attributes:
        name: Path name ("Humanity", "The Path of Bones"...).
        virtues: The Path's virtue pair.
        bearing: The bearing the Path grants.
        hierarchy_of_sins: Ten sins, least severe first. Entry ``i`` is the
            sin that threatens a rating of ``i + 1``.
    """

    name: str
    virtues: str
    bearing: str
    hierarchy_of_sins: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.hierarchy_of_sins) != HIERARCHY_LENGTH:
            raise ValueError(
                f"{self.name}: hierarchy of sins needs {HIERARCHY_LENGTH} entries, "
                f"got {len(self.hierarchy_of_sins)}"
            )

    def sin_at(self, rating: int) -> str:
        """Return the sin that threatens a character at ``rating`` (1-10)."""
        if not 1 <= rating <= HIERARCHY_LENGTH:
            raise ValueError(f"rating must be between 1 and {HIERARCHY_LENGTH}, got {rating}")
        return self.hierarchy_of_sins[rating - 1]

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "virtues": self.virtues,
            "bearing": self.bearing,
            "hierarchy_of_sins": list(self.hierarchy_of_sins),
        }
