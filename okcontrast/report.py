"""
Print the contrast matrix for the colors given on the command line.

Run as ``python -m okcontrast.report '#111827' 2563EB f8f9fa``. Colors are
identified as ``c1``, ``c2``, and so on in argument order.
"""
import argparse
from collections.abc import Sequence
import logging
import sys
from typing import TextIO

from .config import environment_log_level, environment_target_level
from .hexcolor import format_hex, normalize_hex
from .matrix import build_matrix, failing_pairs, summarize
from .spec import ColorEntry, ContrastResult, TargetLevel


logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="""
            Compute the WCAG 2.x contrast ratio for every ordered pair of the
            given colors, report which pairs pass, and suggest lighter or
            darker replacements for foreground colors that fail.
        """,
    )
    parser.add_argument(
        'colors',
        nargs='+',
        metavar='COLOR',
        help='a hex color with 3 or 6 digits and optional "#"',
    )
    parser.add_argument(
        '--level',
        choices=[level.value for level in TargetLevel],
        type=str.upper,
        help='the target level (default: $OKCONTRAST_TARGET_LEVEL or AA)',
    )
    parser.add_argument(
        '--failing-only',
        action='store_true',
        help='only list pairs that fail the target level',
    )
    return parser


def parse_colors(
    parser: argparse.ArgumentParser,
    colors: Sequence[str],
) -> list[ColorEntry]:
    entries = []
    for index, color in enumerate(colors, start=1):
        value = normalize_hex(color)
        if value is None:
            parser.error(f'"{color}" is not a valid hex color')
        entries.append(ColorEntry(f'c{index}', value))
    return entries


def format_result(result: ContrastResult, colors: dict[str, str]) -> str:
    flags = ' '.join(
        f'{label}:{"pass" if passes else "fail"}'
        for label, passes in (
            ('AA', result.passes_aa),
            ('AAA', result.passes_aaa),
            ('large', result.passes_aa_large),
            ('UI', result.passes_ui_component),
        )
    )
    line = (
        f'{format_hex(colors[result.foreground_id])} on '
        f'{format_hex(colors[result.background_id])}  '
        f'{result.ratio:5.2f}:1  {flags}'
    )
    if result.suggested_fix is not None:
        line += f'  try {format_hex(result.suggested_fix)}'
    return line


def write_report(
    entries: list[ColorEntry],
    level: TargetLevel,
    failing_only: bool = False,
    stream: TextIO = sys.stdout,
) -> None:
    matrix = build_matrix(entries, level)
    colors = {entry.id: entry.hex for entry in entries}

    results = (
        failing_pairs(matrix, level)
        if failing_only
        else [r for r in matrix if not r.is_self_pair]
    )
    for result in results:
        stream.write(format_result(result, colors))
        stream.write('\n')

    summary = summarize(matrix, level)
    stream.write(
        f'\n{summary.passing}/{summary.total} pairs pass {level.value} '
        f'({summary.percentage}%), {summary.failing} fail\n'
    )
    stream.flush()


if __name__ == '__main__':
    logging.basicConfig(level=environment_log_level())

    parser = create_parser()
    options = parser.parse_args()
    level = (
        TargetLevel.of(options.level)
        if options.level is not None
        else environment_target_level()
    )
    entries = parse_colors(parser, options.colors)
    logger.debug('reporting on %d colors for %s', len(entries), level.value)
    write_report(entries, level, failing_only=options.failing_only)
