"""Author trust levels derived from approved comment counts."""

DEFAULT_THRESHOLDS: tuple[int, ...] = (0, 10, 20, 50, 100, 200)


def parse_thresholds(raw: str | None) -> list[int]:
    """Parse a comma-separated threshold list.

    Anything other than a strictly increasing list of non-negative integers
    falls back to the default thresholds.
    """
    if not raw:
        return list(DEFAULT_THRESHOLDS)

    parts = [part.strip() for part in raw.split(",")]
    if not parts or not all(part.isdigit() for part in parts):
        return list(DEFAULT_THRESHOLDS)

    thresholds = [int(part) for part in parts]
    if any(later <= earlier for earlier, later in zip(thresholds, thresholds[1:])):
        return list(DEFAULT_THRESHOLDS)

    return thresholds


def get_level(count: int, thresholds: list[int]) -> int:
    """Map an approved comment count onto a level.

    Scans thresholds in ascending order and stops at the first one the
    count is below, returning the previous index. Counts below the first
    threshold are level 0.

    A count at or past the last threshold keeps the top index rather than
    falling back to 0.
    """
    for index, threshold in enumerate(thresholds):
        if count < threshold:
            return max(index - 1, 0)
    return max(len(thresholds) - 1, 0)
