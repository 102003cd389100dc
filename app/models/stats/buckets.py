"""Fixed bucket definitions shared by SQL aggregation and pure helpers."""

UNKNOWN = "unknown"
NO_FACTION = "No faction"

# (label, lowest age, highest age), both bounds inclusive, None = open.
AGE_BUCKETS = [
    ("under 30", None, 29),
    ("30-40", 30, 40),
    ("41-50", 41, 50),
    ("51-60", 51, 60),
    ("over 60", 61, None),
]

CHAIR = "chair"
VICE_CHAIR = "vice_chair"
ORDINARY = "member"
LEADERSHIP_LABELS = [CHAIR, VICE_CHAIR, ORDINARY]


def age_bucket(age: int | None) -> str:
    """Histogram bucket label for an age; None is unknown."""
    if age is None:
        return UNKNOWN
    for label, low, high in AGE_BUCKETS:
        if (low is None or age >= low) and (high is None or age <= high):
            return label
    return UNKNOWN
