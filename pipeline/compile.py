"""Compile run: read both Unicode sources, reconcile, emit JSON artifacts."""
import logging
from pathlib import Path
from typing import Union

from emoji_compiler.assembler import assemble_groups
from emoji_compiler.emitter import emit
from emoji_compiler.group_parser import parse_grouped_source
from emoji_compiler.reconciler import reconcile_ordered_source
from emoji_compiler.schema import CompiledEmojiData
from emoji_compiler.transforms.validation import validate_resolved

logger = logging.getLogger(__name__)

GROUPED_SOURCE_FILE = 'emoji-group.txt'
ORDERED_SOURCE_FILE = 'emoji-order.txt'


def compile_emoji_data(grouped_text: str, ordered_text: str) -> CompiledEmojiData:
    """
    Run all compile stages in memory.

    Args:
        grouped_text: Contents of the grouped source (emoji-test.txt)
        ordered_text: Contents of the ordered source (emoji-ordering.txt)

    Returns:
        Compiled data ready to emit

    Raises:
        UnresolvedEmojiError: If the ordered source references an unknown emoji
        ValidationError: If any grouped-source emoji stays unresolved
    """
    parser = parse_grouped_source(grouped_text)
    ordered = reconcile_ordered_source(ordered_text, parser.by_emoji, parser.components)
    validate_resolved(parser.by_emoji)
    by_group = assemble_groups(ordered, parser.by_emoji)

    return CompiledEmojiData(
        by_emoji=parser.by_emoji,
        by_group=by_group,
        ordered=ordered,
        components=parser.components,
    )


def read_source(path: Path) -> str:
    """Read a whole source file into memory."""
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def run_compile(source_dir: Union[str, Path], output_dir: Union[str, Path]) -> CompiledEmojiData:
    """Compile the sources in source_dir and write the artifacts to output_dir."""
    source_dir = Path(source_dir)
    logger.info(f"Compiling emoji data from {source_dir}...")

    grouped_text = read_source(source_dir / GROUPED_SOURCE_FILE)
    ordered_text = read_source(source_dir / ORDERED_SOURCE_FILE)

    data = compile_emoji_data(grouped_text, ordered_text)
    emit(data, output_dir)

    logger.info(
        f"✅ Compiled {len(data.ordered)} emoji in {len(data.by_group)} groups "
        f"({data.skin_tone_count()} with skin tones, {len(data.components)} components)"
    )
    return data
