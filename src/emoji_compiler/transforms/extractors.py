"""Line extraction utilities for the Unicode emoji source files."""
import re
from typing import Dict, Optional

# Appended by the grouped source to some sequences the ordered source leaves bare
VARIATION_16 = '\ufe0f'

# Qualifier tokens used by the grouped source
FULLY_QUALIFIED = 'fully-qualified'
COMPONENT = 'component'

SKIN_TONE_VARIATION_DESC = re.compile(r'\sskin\stone(?:,|\Z)')

# # group: Smileys & Emotion
#          |name-----------|
GROUP_REGEX = re.compile(r'^#\sgroup:\s(?P<name>.+)')

# 1F600         ; fully-qualified     # 😀 E1.0 grinning face
#                 |type---------|       |emoji|ver|desc--------|
EMOJI_REGEX = re.compile(
    r'^[^#]+;\s(?P<type>[-\w]+)\s+#\s(?P<emoji>\S+)\sE(?P<emojiversion>\d+\.\d)\s(?P<desc>.+)',
    re.ASCII
)

# U+1F442 U+1F3FB ; 8.0 # 👂🏻 ear: light skin tone
#                  |ver| |emoji|name|desc----------|
ORDERED_EMOJI_REGEX = re.compile(
    r'.+\s;\s(?P<version>[0-9.]+)\s#\s(?P<emoji>\S+)\s(?P<name>[^:]+)(?::\s)?(?P<desc>.+)?'
)


def extract_group_name(line: str) -> Optional[str]:
    """
    Extract the group name from a grouped source header line.

    Args:
        line: Single line of the grouped source

    Returns:
        Group name, or None if the line is not a group header
    """
    match = GROUP_REGEX.match(line)
    return match.group('name') if match else None


def extract_grouped_entry(line: str) -> Optional[Dict[str, str]]:
    """
    Extract an emoji entry from a grouped source line.

    Args:
        line: Single line of the grouped source

    Returns:
        Dictionary with type, emoji, emoji_version and desc, or None if the
        line is not an entry
    """
    match = EMOJI_REGEX.match(line)
    if not match:
        return None
    return {
        'type': match.group('type'),
        'emoji': match.group('emoji'),
        'emoji_version': match.group('emojiversion'),
        'desc': match.group('desc'),
    }


def extract_ordered_entry(line: str) -> Optional[Dict[str, Optional[str]]]:
    """
    Extract an emoji entry from an ordered source line.

    Args:
        line: Single line of the ordered source

    Returns:
        Dictionary with version, emoji, name and desc (desc may be None), or
        None if the line is not an entry
    """
    match = ORDERED_EMOJI_REGEX.search(line)
    if not match:
        return None
    return {
        'version': match.group('version'),
        'emoji': match.group('emoji'),
        'name': match.group('name'),
        'desc': match.group('desc'),
    }


def is_skin_tone_variation(desc: Optional[str]) -> bool:
    """Check whether a description names a skin tone variant."""
    return bool(desc) and SKIN_TONE_VARIATION_DESC.search(desc) is not None
