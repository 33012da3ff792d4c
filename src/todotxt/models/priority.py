"""
Priority letter <-> ordinal conversion.

Priorities are stored as ordinals (A=0, B=1, ... Z=25) and rendered back to
their letter on output.
"""

from todotxt.errors import InvalidPriority

MAX_PRIORITY = 25


def priority_to_letter(priority: int) -> str:
    """Return the letter for a priority ordinal (0 -> "A"). Not range checked."""
    return chr(ord("A") + priority)


def priority_from_letter(letter: str) -> int:
    """
    Return the ordinal for a priority letter ("A" -> 0).

    Raises:
        InvalidPriority: if letter is not a single character in A-Z
    """
    if len(letter) != 1:
        raise InvalidPriority("incorrect priority length")
    if not "A" <= letter <= "Z":
        raise InvalidPriority("priority must be between A and Z")
    return ord(letter) - ord("A")
