"""Completeness checks for reconciled emoji data."""
import logging
from typing import Dict, List

from emoji_compiler.schema import EmojiRecord
from emoji_compiler.utils import ValidationError

logger = logging.getLogger(__name__)

# Cap on how many offending emoji are listed in an error message
MAX_REPORTED = 10


def find_unresolved(by_emoji: Dict[str, EmojiRecord]) -> Dict[str, List[str]]:
    """Map each incomplete emoji to the fields it is missing."""
    unresolved = {}
    for emoji, record in by_emoji.items():
        missing = record.missing_fields()
        if missing:
            unresolved[emoji] = missing
    return unresolved


def validate_resolved(by_emoji: Dict[str, EmojiRecord]) -> None:
    """
    Ensure every record was fully resolved by reconciliation.

    A record left incomplete means the grouped source lists an emoji the
    ordered source never mentions.

    Raises:
        ValidationError: If any record has unresolved fields
    """
    unresolved = find_unresolved(by_emoji)
    if not unresolved:
        logger.info(f"All {len(by_emoji)} emoji records fully resolved")
        return

    for emoji, missing in unresolved.items():
        logger.error(f"Unresolved record {emoji}: missing {missing}")

    reported = list(unresolved)[:MAX_REPORTED]
    more = len(unresolved) - len(reported)
    suffix = f" and {more} more" if more > 0 else ""
    raise ValidationError(
        f"{len(unresolved)} emoji from grouped source were not resolved by ordered source: "
        f"{' '.join(reported)}{suffix}"
    )
