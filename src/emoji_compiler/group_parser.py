"""Grouped source parsing: group headers, fully-qualified emoji and components."""
import logging
from typing import Dict, List, Optional

from emoji_compiler.schema import EmojiRecord
from emoji_compiler.transforms.extractors import (
    COMPONENT,
    FULLY_QUALIFIED,
    extract_group_name,
    extract_grouped_entry,
    is_skin_tone_variation,
)
from emoji_compiler.transforms.slugify import slugify

logger = logging.getLogger(__name__)


class GroupParser:
    """
    Single pass over the grouped source (Unicode emoji-test.txt).

    Builds the by-emoji table with group and emoji version filled in, plus the
    component map. The current group is tracked per parser instance.
    """

    def __init__(self):
        self.current_group: Optional[str] = None
        self.by_emoji: Dict[str, EmojiRecord] = {}
        self.components: Dict[str, str] = {}
        self.groups: List[str] = []

    def feed_line(self, line: str) -> None:
        """
        Process one line of the grouped source.

        Args:
            line: Line without its trailing newline
        """
        group_name = extract_group_name(line)
        if group_name is not None:
            self.current_group = group_name
            if group_name not in self.groups:
                self.groups.append(group_name)
            return

        entry = extract_grouped_entry(line)
        if entry is None:
            return

        if entry['type'] == FULLY_QUALIFIED:
            # Skin tone variants are folded in from the ordered source
            if is_skin_tone_variation(entry['desc']):
                logger.debug(f"Discarding skin tone variant {entry['emoji']} from grouped source")
                return
            self.by_emoji[entry['emoji']] = EmojiRecord(
                group=self.current_group,
                emoji_version=entry['emoji_version'],
            )
        elif entry['type'] == COMPONENT:
            self.components[slugify(entry['desc'])] = entry['emoji']

    def parse(self, text: str) -> 'GroupParser':
        for line in text.splitlines():
            self.feed_line(line)

        logger.info(
            f"Parsed grouped source: {len(self.by_emoji)} emoji in {len(self.groups)} groups, "
            f"{len(self.components)} components"
        )
        return self


def parse_grouped_source(text: str) -> GroupParser:
    """Parse the grouped source text and return the populated parser."""
    return GroupParser().parse(text)
