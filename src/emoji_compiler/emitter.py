"""JSON artifact writer for compiled emoji data."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from emoji_compiler.schema import CompiledEmojiData
from emoji_compiler.utils import EmitError

logger = logging.getLogger(__name__)

BY_EMOJI_FILE = 'data-by-emoji.json'
BY_GROUP_FILE = 'data-by-group.json'
ORDERED_FILE = 'data-ordered-emoji.json'
COMPONENTS_FILE = 'data-emoji-components.json'

JSON_INDENT = 4


def to_json(data: Any) -> str:
    """Encode with insertion key order and fixed indentation."""
    return json.dumps(data, ensure_ascii=False, indent=JSON_INDENT)


def write_json(path: Path, data: Any) -> None:
    """
    Write one JSON artifact.

    Raises:
        EmitError: If the file cannot be written
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(to_json(data))
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        raise EmitError(str(path), e) from e


def build_artifacts(data: CompiledEmojiData) -> Dict[str, Any]:
    """Map artifact file names to their JSON-ready payloads, in write order."""
    return {
        BY_EMOJI_FILE: data.by_emoji_dict(),
        BY_GROUP_FILE: data.by_group_list(),
        ORDERED_FILE: list(data.ordered),
        COMPONENTS_FILE: dict(data.components),
    }


def emit(data: CompiledEmojiData, output_dir: Union[str, Path]) -> List[Path]:
    """
    Write all four artifacts into output_dir.

    The first failed write aborts the remaining ones.

    Returns:
        Paths written, in order
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise EmitError(str(output_dir), e) from e

    written = []
    for file_name, payload in build_artifacts(data).items():
        path = output_dir / file_name
        write_json(path, payload)
        written.append(path)
        logger.info(f"✓ Wrote {path}")
    return written
