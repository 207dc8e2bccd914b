"""Record definitions for compiled emoji data."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Fields every EmojiRecord must carry once reconciliation has finished
REQUIRED_RECORD_FIELDS = [
    'name',
    'slug',
    'group',
    'unicode_version',
    'skin_tone_support',
    'emoji_version',
]


@dataclass
class EmojiRecord:
    """One fully-qualified emoji, keyed by its rendered string."""
    group: Optional[str]
    emoji_version: str
    name: Optional[str] = None
    slug: Optional[str] = None
    unicode_version: Optional[str] = None
    skin_tone_support: Optional[bool] = None
    skin_tone_support_unicode_version: Optional[str] = None

    def missing_fields(self) -> List[str]:
        """Return the required fields that are still unresolved."""
        missing = [name for name in REQUIRED_RECORD_FIELDS if getattr(self, name) is None]
        if self.skin_tone_support and self.skin_tone_support_unicode_version is None:
            missing.append('skin_tone_support_unicode_version')
        return missing

    def to_dict(self) -> Dict[str, Any]:
        """Serialize in the by-emoji key order, omitting unset skin tone version."""
        data = {
            'name': self.name,
            'slug': self.slug,
            'group': self.group,
            'unicode_version': self.unicode_version,
            'skin_tone_support': self.skin_tone_support,
            'emoji_version': self.emoji_version,
        }
        if self.skin_tone_support_unicode_version is not None:
            data['skin_tone_support_unicode_version'] = self.skin_tone_support_unicode_version
        return data

    def to_summary(self, emoji: str) -> Dict[str, Any]:
        """Serialize as a group listing entry (no group field)."""
        data = {
            'name': self.name,
            'slug': self.slug,
            'emoji': emoji,
            'emoji_version': self.emoji_version,
            'unicode_version': self.unicode_version,
            'skin_tone_support': self.skin_tone_support,
        }
        if self.skin_tone_support_unicode_version is not None:
            data['skin_tone_support_unicode_version'] = self.skin_tone_support_unicode_version
        return data


@dataclass
class GroupRecord:
    """One emoji group with its members in canonical order."""
    name: str
    slug: str
    emojis: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'slug': self.slug,
            'emojis': list(self.emojis),
        }


@dataclass
class CompiledEmojiData:
    """The four structures produced by a single compile run."""
    by_emoji: Dict[str, EmojiRecord]
    by_group: List[GroupRecord]
    ordered: List[str]
    components: Dict[str, str]

    def by_emoji_dict(self) -> Dict[str, Dict[str, Any]]:
        return {emoji: record.to_dict() for emoji, record in self.by_emoji.items()}

    def by_group_list(self) -> List[Dict[str, Any]]:
        return [group.to_dict() for group in self.by_group]

    def skin_tone_count(self) -> int:
        """Count emoji that support skin tone variants."""
        return sum(1 for record in self.by_emoji.values() if record.skin_tone_support)
