"""Heuristic gender inference from Indonesian names.

This is an approximation driven by honorifics and common given names, not
ground truth. Female tokens are checked before male ones.
"""

FEMALE = "female"
MALE = "male"
UNKNOWN = "unknown"

FEMALE_PREFIXES = ("hj.",)
FEMALE_TOKENS = ("siti", "dewi", "sri", "ratna", "indira", "ani")
MALE_PREFIXES = ("h.",)
MALE_TOKENS = ("ahmad", "muhammad", "abdul", "said")


def _matches(name: str, prefixes: tuple[str, ...], tokens: tuple[str, ...]) -> bool:
    return name.startswith(prefixes) or any(t in name for t in tokens)


def infer_gender(name: str | None) -> str:
    """Guess female/male/unknown from substrings of the name."""
    if not name:
        return UNKNOWN
    lowered = name.lower()
    if _matches(lowered, FEMALE_PREFIXES, FEMALE_TOKENS):
        return FEMALE
    if _matches(lowered, MALE_PREFIXES, MALE_TOKENS):
        return MALE
    return UNKNOWN
