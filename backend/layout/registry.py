"""
Pattern registry: maps PatternVariant values to pattern generator classes.

parse_pattern() is the only place an external pattern name is turned into
a PatternVariant. Anything past it works with the closed enum.
"""

from .base import BasePattern, PatternVariant
from .errors import UnknownPattern
from .herringbone import HerringbonePattern
from .staggered import StaggeredPattern
from .straight import StraightPattern

PATTERN_REGISTRY: dict[PatternVariant, type] = {
    PatternVariant.STRAIGHT: StraightPattern,
    PatternVariant.STAGGERED: StaggeredPattern,
    PatternVariant.HERRINGBONE: HerringbonePattern,
}


def list_patterns() -> list[str]:
    """List all registered pattern names, in declaration order."""
    return [variant.value for variant in PATTERN_REGISTRY]


def parse_pattern(value) -> PatternVariant:
    """
    Accepts a PatternVariant or a name like "Straight" / " herringbone ".
    Raises UnknownPattern for anything else. Never falls back to a default.
    """
    if isinstance(value, PatternVariant):
        return value
    if isinstance(value, str):
        try:
            return PatternVariant(value.strip().lower())
        except ValueError:
            pass
    raise UnknownPattern(value, list_patterns())


def has_pattern(value) -> bool:
    """Check if a name parses to a registered pattern."""
    try:
        parse_pattern(value)
    except UnknownPattern:
        return False
    return True


def get_pattern(value) -> BasePattern:
    """Returns an instance of the generator for a pattern, or raises UnknownPattern."""
    return PATTERN_REGISTRY[parse_pattern(value)]()
