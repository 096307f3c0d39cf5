"""palette-kit — Extract a five-colour theme palette from an image.

Usage: palette-kit <command> <image> [options]

Commands:
  palette     swatch table (or --json for the full web response)
  <exporter>  raw export text; exporters are auto-discovered from
              palette_kit/exporters/ (tailwind, css)
  help        full docs for an exporter

Environment variables / .env loading:
  PALETTE_* environment variables configure defaults (see
  palette_kit.core.config). If one is not set, palette-kit looks for a .env
  starting from the current directory and walking up, stopping at the
  nearest .git boundary. Use --env-file to point at a file explicitly.
  Command-line flags override both.
"""

import argparse
import os
import sys

from loguru import logger

from palette_kit import registry
from palette_kit.analyzer import analyze_image
from palette_kit.core.config import AnalyzerConfig
from palette_kit.core.env import load_env
from palette_kit.core.errors import PaletteError
from palette_kit.core.logs import configure_logging
from palette_kit.core.quantize import EMPTY_CLUSTER_MODES, SEEDING_MODES
from palette_kit.core.report import format_json, format_text


def _short_doc(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _add_analysis_args(p: argparse.ArgumentParser) -> None:
    p.add_argument('image', help='Path to a JPEG, PNG or WebP image')
    p.add_argument('-i', '--iterations', type=int, default=None, help='Quantizer rounds (default 20)')
    p.add_argument('--seeding', choices=SEEDING_MODES, default=None, help='Centroid seeding (default: first)')
    p.add_argument(
        '--empty-cluster',
        choices=EMPTY_CLUSTER_MODES,
        default=None,
        help='What an empty cluster becomes (default: reseed)',
    )
    p.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  palette-kit palette hero.png\n'
        '  palette-kit palette hero.png --json\n'
        '  palette-kit tailwind hero.png > theme.colors.js\n'
        '  palette-kit css hero.png --seeding farthest\n'
        '  palette-kit help tailwind\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-kit',
        description='Extract a five-colour theme palette from an image.',
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

    p = sub.add_parser('palette', help='Print the five role swatches')
    _add_analysis_args(p)
    p.add_argument('-j', '--json', action='store_true', help='Output the full result as JSON')

    for name in sorted(registry.all_exporters()):
        _add_analysis_args(sub.add_parser(name, help=_short_doc(name)))

    help_parser = sub.add_parser('help', help='Print full docs for an exporter')
    help_parser.add_argument('topic', nargs='?', help='Exporter name')

    return parser


def _print_help(topic: str | None) -> None:
    exporters = registry.all_exporters()

    if topic is None:
        print('Available exporters:\n')
        for name in sorted(exporters):
            print(f'  {name:<10} {_short_doc(name)}')
        print('\nRun: palette-kit help <exporter> for full docs.')
        return

    if topic not in exporters:
        print(f'Unknown exporter: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(exporters))}', file=sys.stderr)
        sys.exit(1)

    print((registry.module_for(topic).__doc__ or '').strip() or f'(No module docs for {topic!r})')


def _config_from_args(args: argparse.Namespace) -> AnalyzerConfig:
    """Env-derived config with any explicit CLI flags laid over it."""
    cfg = AnalyzerConfig.from_env()
    if args.iterations is not None:
        cfg.max_iterations = args.iterations
    if args.seeding is not None:
        cfg.seeding = args.seeding
    if args.empty_cluster is not None:
        cfg.empty_cluster = args.empty_cluster
    if args.verbose:
        cfg.log_level = 'DEBUG'
    return cfg.validate()


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        cfg = _config_from_args(args)
    except ValueError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    configure_logging(cfg.log_level)
    if env_path:
        logger.info(f'Loaded settings from {env_path}')

    if not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        sys.exit(1)

    try:
        result = analyze_image(args.image, cfg)
    except PaletteError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.command == 'palette':
        print(format_json(result) if args.json else format_text(result, image_path=args.image))
    else:
        print(registry.get(args.command).execute(list(result.swatches)))


if __name__ == '__main__':
    main()
