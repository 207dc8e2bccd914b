"""Emoji data compiler pipeline package."""
from .compile import compile_emoji_data, run_compile
from .fetch import SourceFetcher

__all__ = ['compile_emoji_data', 'run_compile', 'SourceFetcher']
