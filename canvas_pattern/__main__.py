"""canvas-pattern — Build canvas image patterns and inspect their fill styles.

Usage: canvas-pattern inspect <image> [options]

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, canvas-pattern looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.

  CANVAS_PATTERN_LOG_LEVEL  logging level (default WARNING)
  CANVAS_PATTERN_STRICT     validate surface layout, same as --strict
"""

import argparse
import logging
import os
import sys

from PIL import Image

from canvas_pattern.core.env import load_settings
from canvas_pattern.core.log import setup_default_logging
from canvas_pattern.core.pattern import CanvasPattern
from canvas_pattern.core.report import format_json, format_text
from canvas_pattern.core.surface import check_surface_layout, load_surface
from canvas_pattern.core.types import PatternError, RepetitionStyle

logger = logging.getLogger('canvas_pattern')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  canvas-pattern inspect tile.png\n'
        '  canvas-pattern inspect tile.png --repetition repeat-x --json\n'
        '  canvas-pattern inspect tile.png -r no-repeat --strict\n'
        '  canvas-pattern help\n'
    )
    parser = argparse.ArgumentParser(
        prog='canvas-pattern',
        description='Build canvas image patterns and inspect their fill styles.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('inspect', help='Create a pattern from an image and print its fill style')
    p.add_argument('image', help='Path to a PNG/JPG/GIF image')
    p.add_argument(
        '-r',
        '--repetition',
        default='repeat',
        help=f'Repetition keyword: {", ".join(s.keyword for s in RepetitionStyle)} (default: repeat)',
    )
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument('-s', '--strict', action='store_true', help='Fail if pixels do not match width*height*4')

    sub.add_parser('help', help='Print full docs')
    return parser


def _inspect(args: argparse.Namespace, strict: bool) -> int:
    if not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        return 1

    try:
        repetition = RepetitionStyle.from_keyword(args.repetition)
        data, size = load_surface(args.image)
        if strict:
            check_surface_layout(data, size)
    except (PatternError, OSError, Image.DecompressionBombError) as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1

    pattern = CanvasPattern.new(data, size, repetition)
    style = pattern.to_fill_or_stroke_style()

    if args.json:
        print(format_json(style, source=args.image))
    else:
        print(format_text(style, source=args.image))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    settings = load_settings(env_file=args.env_file)
    setup_default_logging(settings.log_level)
    if settings.env_path:
        logger.info('loaded %s', settings.env_path)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        print((__doc__ or '').strip())
        return 0

    return _inspect(args, strict=args.strict or settings.strict)


if __name__ == '__main__':
    sys.exit(main())
