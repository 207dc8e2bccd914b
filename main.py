"""Emoji data compiler - entry point."""
import argparse
import sys

from pipeline import SourceFetcher, run_compile
from emoji_compiler.utils import (
    validate_config,
    ConfigError,
    EmitError,
    FetchError,
    UnresolvedEmojiError,
    ValidationError,
    UNICODE_VERSION_PATTERN,
    setup_logging,
    get_logger,
)
from emoji_compiler.version import get_version

logger = get_logger(__name__)


def main():
    """Entry point with mode selection."""
    parser = argparse.ArgumentParser(description='Unicode emoji data compiler')
    parser.add_argument('mode', nargs='?', default='compile', choices=['fetch', 'compile', 'all'],
                       help='fetch (download sources), compile (build JSON), all (both). Default: compile')
    parser.add_argument('--source-dir', help='Directory holding emoji-group.txt and emoji-order.txt')
    parser.add_argument('--output-dir', help='Directory receiving the JSON artifacts')
    parser.add_argument('--unicode-version', help="Unicode emoji release to fetch, e.g. 15.1. Default: latest")
    parser.add_argument('--plain-logs', action='store_true', help='Plain text instead of structured logs')
    parser.add_argument('--version', action='version', version=f'%(prog)s {get_version()}')

    args = parser.parse_args()

    try:
        config = validate_config()
    except ConfigError as e:
        setup_logging(level="INFO", structured=not args.plain_logs)
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    setup_logging(level=config['log_level'], structured=not args.plain_logs)

    # Override with CLI args if provided
    if args.source_dir:
        config['source_dir'] = args.source_dir
    if args.output_dir:
        config['output_dir'] = args.output_dir
    if args.unicode_version:
        if not UNICODE_VERSION_PATTERN.match(args.unicode_version):
            parser.error(f"invalid --unicode-version {args.unicode_version!r} (expected latest or X.Y)")
        config['unicode_version'] = args.unicode_version

    logger.info(f"🚀 Starting emoji data compiler in {args.mode} mode")

    try:
        if args.mode in ('fetch', 'all'):
            fetcher = SourceFetcher(config['unicode_version'], config['fetch_timeout'])
            fetcher.fetch_sources(config['source_dir'])
        if args.mode in ('compile', 'all'):
            run_compile(config['source_dir'], config['output_dir'])
    except FetchError as e:
        logger.error(f"Fetch failed: {e}")
        sys.exit(1)
    except UnresolvedEmojiError as e:
        logger.error(f"Source files out of sync: {e}")
        sys.exit(1)
    except ValidationError as e:
        logger.error(f"Validation failed: {e}")
        sys.exit(1)
    except EmitError as e:
        logger.error(f"Output failed: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Could not read sources: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Compiler failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
