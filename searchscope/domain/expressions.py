"""Pattern expressions: ordered sets of active glob patterns.

A PatternExpression is the include/exclude currency of a search query.
It is never empty when present; absence is represented by None.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class PatternExpression:
    """Ordered set of glob pattern strings.

    Construct through from_patterns() or from_mapping(), which return None
    instead of an empty expression.

    Attributes:
        patterns: Unique glob patterns in insertion order.

    Raises:
        ValueError: If constructed directly with no patterns or with an
            empty pattern string.
    """

    patterns: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate and deduplicate patterns."""
        if not self.patterns:
            raise ValueError("PatternExpression cannot be empty")
        if any(not p for p in self.patterns):
            raise ValueError("PatternExpression patterns cannot be empty strings")
        # dict preserves first-insertion order
        object.__setattr__(self, "patterns", tuple(dict.fromkeys(self.patterns)))

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "PatternExpression | None":
        """Build an expression from patterns, or None when there are none.

        Args:
            patterns: Glob pattern strings; duplicates collapse.

        Returns:
            PatternExpression, or None if patterns is empty.
        """
        collected = tuple(patterns)
        if not collected:
            return None
        return cls(collected)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, bool] | None) -> "PatternExpression | None":
        """Build an expression from a config-style {pattern: enabled} mapping.

        Disabled entries are dropped.

        Args:
            mapping: Mapping of glob pattern to enabled flag.

        Returns:
            PatternExpression of the enabled patterns, or None.
        """
        if not mapping:
            return None
        return cls.from_patterns(key for key, enabled in mapping.items() if enabled)

    @staticmethod
    def merge(
        left: "PatternExpression | None",
        right: "PatternExpression | None",
    ) -> "PatternExpression | None":
        """Union two expressions, either of which may be absent.

        Keys keep the position of their first appearance; values are always
        True so the right-hand side winning a conflict changes nothing.

        Args:
            left: Base expression.
            right: Expression merged on top.

        Returns:
            Merged expression, or None when both sides are absent.
        """
        if left is None:
            return right
        if right is None:
            return left
        return PatternExpression(left.patterns + right.patterns)

    def to_dict(self) -> dict[str, bool]:
        """Return the wire form: every pattern mapped to True."""
        return dict.fromkeys(self.patterns, True)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self.patterns

    def __iter__(self) -> Iterator[str]:
        return iter(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)
