"""Group listing assembly in canonical emoji order."""
import logging
from typing import Dict, List

from emoji_compiler.schema import EmojiRecord, GroupRecord
from emoji_compiler.transforms.slugify import slugify

logger = logging.getLogger(__name__)


def assemble_groups(ordered: List[str], by_emoji: Dict[str, EmojiRecord]) -> List[GroupRecord]:
    """
    Build the per-group listing from the reconciled table.

    Groups are created on first occurrence while walking the canonical order,
    which can differ from the header order of the grouped source.

    Args:
        ordered: Emoji in canonical order
        by_emoji: Reconciled by-emoji table

    Returns:
        Group records in first-occurrence order
    """
    groups: Dict[str, GroupRecord] = {}

    for emoji in ordered:
        record = by_emoji[emoji]
        group = groups.get(record.group)
        if group is None:
            group = GroupRecord(name=record.group, slug=slugify(record.group))
            groups[record.group] = group
        group.emojis.append(record.to_summary(emoji))

    logger.info(f"Assembled {len(groups)} groups from {len(ordered)} ordered emoji")
    return list(groups.values())
