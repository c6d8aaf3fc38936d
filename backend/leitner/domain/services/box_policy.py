"""Box policy helper for callers choosing an answer's target box.

The ledger never applies a policy itself: whoever collects answers decides
the new box. This is the classic Leitner rule most UIs use.
"""


def next_box(current_box: int, correct: bool, max_box: int | None = None) -> int:
    """Compute the target box for an answer.

    Args:
        current_box: Box the card sits in now
        correct: Whether the card was recalled
        max_box: Highest box; correct answers stay there once reached.
            None means no upper bound.

    Returns:
        ``current_box + 1`` (capped at ``max_box``) if correct, else box 0

    Raises:
        ValueError: If current_box is negative or max_box is negative
    """
    if current_box < 0:
        raise ValueError(f"current_box must be >= 0, got {current_box}")
    if max_box is not None and max_box < 0:
        raise ValueError(f"max_box must be >= 0, got {max_box}")

    if not correct:
        return 0
    promoted = current_box + 1
    if max_box is not None:
        # A card already above the cap (e.g. imported) is not demoted
        return max(current_box, min(promoted, max_box))
    return promoted
