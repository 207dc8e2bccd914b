"""Pytest configuration and shared fixtures."""
import pytest

from emoji_samples import (
    GRINNING,
    SMILING,
    SMILING_FQ,
    WAVING,
    WAVING_LIGHT,
    WAVING_MEDIUM_LIGHT,
    LIGHT_TONE,
    RED_HAIR,
    KEYCAP_HASH,
    THUMBS_UP,
)


# ============================================================================
# Common test fixtures
# ============================================================================

@pytest.fixture
def grouped_text():
    """Excerpt of emoji-test.txt covering every line kind the parser handles."""
    return '\n'.join([
        '# emoji-test.txt',
        '# Date: 2023-06-05',
        '',
        '# group: Smileys & Emotion',
        '',
        '# subgroup: face-smiling',
        f'1F600                                                  ; fully-qualified     # {GRINNING} E1.0 grinning face',
        f'263A FE0F                                              ; fully-qualified     # {SMILING_FQ} E0.6 smiling face',
        f'263A                                                   ; unqualified         # {SMILING} E0.6 smiling face',
        '',
        '# group: People & Body',
        '',
        '# subgroup: hand-fingers-open',
        f'1F44B                                                  ; fully-qualified     # {WAVING} E0.6 waving hand',
        f'1F44B 1F3FB                                            ; fully-qualified     # {WAVING_LIGHT} E1.0 waving hand: light skin tone',
        f'1F44B 1F3FC                                            ; fully-qualified     # {WAVING_MEDIUM_LIGHT} E1.0 waving hand: medium-light skin tone',
        f'1F44D                                                  ; fully-qualified     # {THUMBS_UP} E0.6 thumbs up',
        '',
        '# group: Component',
        '',
        '# subgroup: skin-tone',
        f'1F3FB                                                  ; component           # {LIGHT_TONE} E1.0 light skin tone',
        f'1F9B0                                                  ; component           # {RED_HAIR} E11.0 red hair',
        '',
        '# group: Symbols',
        '',
        '# subgroup: keycap',
        f'0023 FE0F 20E3                                         ; fully-qualified     # {KEYCAP_HASH} E0.6 keycap: #',
        '',
        '#EOF',
    ])


@pytest.fixture
def ordered_text():
    """Excerpt of emoji-ordering.txt matching grouped_text."""
    return '\n'.join([
        '# emoji-ordering.txt',
        '',
        f'U+1F600 ; 1.0 # {GRINNING} grinning face',
        f'U+263A ; 1.1 # {SMILING} smiling face',
        f'U+1F44B ; 6.0 # {WAVING} waving hand',
        f'U+1F44B U+1F3FB ; 8.0 # {WAVING_LIGHT} waving hand: light skin tone',
        f'U+1F44B U+1F3FC ; 8.0 # {WAVING_MEDIUM_LIGHT} waving hand: medium-light skin tone',
        f'U+1F44D ; 6.0 # {THUMBS_UP} thumbs up',
        f'U+1F3FB ; 8.0 # {LIGHT_TONE} light skin tone',
        f'U+0023 U+FE0F U+20E3 ; 3.0 # {KEYCAP_HASH} keycap: #',
        '',
    ])


@pytest.fixture
def source_dir(tmp_path, grouped_text, ordered_text):
    """Directory holding both sources under their expected file names."""
    directory = tmp_path / 'sources'
    directory.mkdir()
    (directory / 'emoji-group.txt').write_text(grouped_text, encoding='utf-8')
    (directory / 'emoji-order.txt').write_text(ordered_text, encoding='utf-8')
    return directory
