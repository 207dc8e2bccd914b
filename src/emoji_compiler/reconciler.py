"""Ordered source reconciliation against the grouped by-emoji table."""
import logging
from typing import Dict, List, Optional

from emoji_compiler.schema import EmojiRecord
from emoji_compiler.transforms.extractors import (
    VARIATION_16,
    extract_ordered_entry,
    is_skin_tone_variation,
)
from emoji_compiler.transforms.slugify import slugify
from emoji_compiler.utils import OrphanVariantError, UnresolvedEmojiError

logger = logging.getLogger(__name__)


class OrderReconciler:
    """
    Single pass over the ordered source (Unicode emoji-ordering.txt).

    Fills name, slug, unicode version and skin tone support into the records
    built by the group parser, and collects emoji in canonical order. Skin
    tone variant lines refer back to the most recently resolved base emoji,
    so lines must be fed in file order.
    """

    def __init__(self, by_emoji: Dict[str, EmojiRecord], components: Dict[str, str]):
        self.by_emoji = by_emoji
        self.component_values = set(components.values())
        self.current_emoji: Optional[str] = None
        self.ordered: List[str] = []
        self.skipped_components = 0

    def resolve_key(self, emoji: str) -> Optional[str]:
        """
        Find the by-emoji key for a rendered emoji.

        The ordered source omits VARIATION_16 on some sequences the grouped
        source carries it on, so the bare form is tried first and the
        selector-suffixed form second.
        """
        if emoji in self.by_emoji:
            return emoji
        with_variation = emoji + VARIATION_16
        if with_variation in self.by_emoji:
            return with_variation
        return None

    def feed_line(self, line: str) -> None:
        """
        Process one line of the ordered source.

        Raises:
            OrphanVariantError: If a skin tone variant precedes every base emoji
            UnresolvedEmojiError: If a base emoji is neither in the table nor a component
        """
        if not line:
            return
        entry = extract_ordered_entry(line)
        if entry is None:
            return

        emoji, name, desc, version = entry['emoji'], entry['name'], entry['desc'], entry['version']

        if is_skin_tone_variation(desc):
            if self.current_emoji is None:
                raise OrphanVariantError(emoji)
            record = self.by_emoji[self.current_emoji]
            record.skin_tone_support = True
            record.skin_tone_support_unicode_version = version
            return

        full_name = f"{name} {desc}" if desc else name

        key = self.resolve_key(emoji)
        if key is None:
            if emoji in self.component_values:
                logger.debug(f"Skipping component {emoji} in ordered source")
                self.skipped_components += 1
                return
            raise UnresolvedEmojiError(emoji)

        self.current_emoji = key
        self.ordered.append(key)

        record = self.by_emoji[key]
        record.name = full_name
        record.slug = slugify(full_name)
        record.unicode_version = version
        record.skin_tone_support = False

    def reconcile(self, text: str) -> List[str]:
        """Process the whole ordered source and return emoji in canonical order."""
        for line in text.splitlines():
            self.feed_line(line)

        logger.info(
            f"Reconciled ordered source: {len(self.ordered)} emoji in canonical order, "
            f"{self.skipped_components} component lines skipped"
        )
        return self.ordered


def reconcile_ordered_source(text: str, by_emoji: Dict[str, EmojiRecord],
                             components: Dict[str, str]) -> List[str]:
    """Reconcile the ordered source into the by-emoji table in place."""
    return OrderReconciler(by_emoji, components).reconcile(text)
