"""palette-clash — Find programming languages whose brand colours look alike.

Usage: palette-clash <renderer> [--yaml languages.yml] [--threshold N] [LANG ...]

Reads a linguist-style languages.yml, converts every colour to CIELAB and
compares all pairs with CIE94. For each language, lists the languages
whose colour differs by less than the threshold.

Renderers are auto-discovered from palette_clash/renderers/.
Each renderer module's docstring is its documentation.
Run `palette-clash help <renderer>` for full module docs.

Environment variables:
  PALETTE_CLASH_YAML       default for --yaml
  PALETTE_CLASH_THRESHOLD  default for --threshold
"""

import argparse
import logging
import sys

from palette_clash import registry
from palette_clash.core.config import ConfigError, Settings, load_languages
from palette_clash.core.ranking import build_report
from palette_clash.core.types import ClashReport


def _short_doc(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    renderers = registry.all_renderers()

    epilog = (
        'Examples:\n'
        '  palette-clash text --yaml languages.yml\n'
        '  palette-clash text --yaml languages.yml --threshold 5 Python Go\n'
        '  palette-clash html --yaml languages.yml -o clashes.html\n'
        '  palette-clash json --yaml languages.yml --fail-on-clash\n'
        '  palette-clash swatch --yaml languages.yml -o clashes.png\n'
        '  palette-clash help html\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-clash',
        description='Find programming languages whose colours are perceptually close (CIE94).',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    sub = parser.add_subparsers(dest='renderer', help='Output format')

    # Auto-register each renderer as a subcommand using module docstring
    for name, rend in sorted(renderers.items()):
        p = sub.add_parser(name, help=_short_doc(name))
        p.add_argument('languages', nargs='*', metavar='LANG', help='Languages to report (default: all, sorted)')
        p.add_argument(
            '-y',
            '--yaml',
            default=settings.yaml_path,
            help=f'Location of language specification file (default: {settings.yaml_path})',
        )
        p.add_argument(
            '-t',
            '--threshold',
            type=float,
            default=settings.threshold,
            metavar='N',
            help=f'Report differences below N (default: {settings.threshold:g})',
        )
        if rend.default_output:
            p.add_argument('-o', '--output', help=f'Output file (default: {rend.default_output})')
        p.add_argument(
            '-f',
            '--fail-on-clash',
            action='store_true',
            help='Exit 1 if any language has a neighbour below the threshold (CI gating)',
        )
        p.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')

    # `help` subcommand — prints full module docstring for a renderer
    help_parser = sub.add_parser('help', help='Print full docs for a renderer')
    help_parser.add_argument('command', nargs='?', help='Renderer name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a renderer."""
    renderers = registry.all_renderers()

    if command is None:
        print('Available renderers:\n')
        for name in sorted(renderers):
            print(f'  {name:<10} {_short_doc(name)}')
        print('\nRun: palette-clash help <renderer> for full docs.')
        return

    if command not in renderers:
        print(f'Unknown renderer: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(renderers))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    logging.getLogger('PIL').setLevel(logging.WARNING)


def _check_fail_on_clash(report: ClashReport) -> bool:
    """Return True if any selected language has a neighbour below threshold."""
    clashes = report.selected()
    if clashes:
        print(f'\nFAIL: {len(clashes)} language(s) have colours within {report.threshold:g}:', file=sys.stderr)
        for name, entries in clashes:
            closest = entries[0]
            print(f'  {name}: {closest.name} Δ={closest.diff:.4f}', file=sys.stderr)
        return True
    return False


def main(argv: list[str] | None = None) -> None:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    parser = _build_parser(settings)
    args = parser.parse_args(argv)

    if not args.renderer:
        parser.print_help()
        sys.exit(1)

    if args.renderer == 'help':
        _print_help(getattr(args, 'command', None))
        return

    _configure_logging(args.verbose)

    try:
        colours = load_languages(args.yaml)
    except ConfigError as e:
        print(f'{e}\nDid you forget `--yaml <languages.yml>`?', file=sys.stderr)
        sys.exit(1)

    report = build_report(colours, args.threshold, names=args.languages)

    rend = registry.get(args.renderer)
    rend.execute(report, args)

    # CI gate — must happen after output so report is visible even on failure
    if args.fail_on_clash and _check_fail_on_clash(report):
        sys.exit(1)


if __name__ == '__main__':
    main()
