import math
import unittest

from okcontrast.contrast import contrast_ratio
from okcontrast.conversion import hex_to_oklch
from okcontrast.spec import ColorEntry, TargetLevel
from okcontrast.suggestion import (
    find_nearest_accessible,
    search_lightness,
    suggestions_for_color,
)


def lightness(value: str) -> float:
    oklch = hex_to_oklch(value)
    assert oklch is not None
    return oklch[0]


class TestSuggestion(unittest.TestCase):

    def test_darker_fix_on_white(self) -> None:
        self.assertLess(contrast_ratio('D1D5DB', 'FFFFFF'), 4.5)

        fix = find_nearest_accessible('D1D5DB', 'FFFFFF', 4.5)
        assert fix is not None
        self.assertRegex(fix, r'^[0-9A-F]{6}$')
        self.assertGreaterEqual(contrast_ratio(fix, 'FFFFFF'), 4.5)
        self.assertLess(lightness(fix), lightness('D1D5DB'))

        # The fix stays close to the threshold instead of going all the way
        self.assertLess(contrast_ratio(fix, 'FFFFFF'), 5.0)

    def test_lighter_fix_on_dark(self) -> None:
        # Lighter than the background, but darkening cannot reach the target
        self.assertGreater(lightness('4B5563'), lightness('1F2937'))
        self.assertLess(contrast_ratio('000000', '1F2937'), 4.5)

        fix = find_nearest_accessible('4B5563', '1F2937', 4.5)
        assert fix is not None
        self.assertGreaterEqual(contrast_ratio(fix, '1F2937'), 4.5)
        self.assertGreater(lightness(fix), lightness('4B5563'))

    def test_already_accessible(self) -> None:
        for foreground, background, target, expected in (
            ('111827', 'FFFFFF', 4.5, '111827'),
            ('#abc', '000', 4.5, 'AABBCC'),
            ('000000', 'ffffff', 21, '000000'),
            ('767676', 'FFFFFF', 4.5, '767676'),
        ):
            with self.subTest(foreground=foreground, background=background):
                self.assertEqual(
                    find_nearest_accessible(foreground, background, target),
                    expected,
                )

    def test_fix_validity(self) -> None:
        for foreground, background, target in (
            ('7C3AED', 'FFFFFF', 7.0),
            ('60A5FA', 'FFFFFF', 4.5),
            ('FFCA00', 'FFFFFF', 4.5),
            ('2563EB', '111827', 7.0),
            ('3178EA', '3178EA', 4.5),
            ('FF0000', '00FF00', 4.5),
            ('888888', '777777', 3.0),
        ):
            with self.subTest(foreground=foreground, background=background):
                fix = find_nearest_accessible(foreground, background, target)
                if fix is not None:
                    self.assertGreaterEqual(contrast_ratio(fix, background), target)

    def test_unreachable(self) -> None:
        for background in ('808080', '777777', '3178EA', 'FFCA00'):
            with self.subTest(background=background):
                self.assertIsNone(find_nearest_accessible('D1D5DB', background, 21))

        # AAA against mid-gray is out of reach for black and white alike
        self.assertLess(contrast_ratio('000000', '777777'), 7.0)
        self.assertLess(contrast_ratio('FFFFFF', '777777'), 7.0)
        self.assertIsNone(find_nearest_accessible('808080', '777777', 7.0))

    def test_malformed_colors(self) -> None:
        self.assertIsNone(find_nearest_accessible('zzzzzz', 'FFFFFF', 4.5))
        self.assertIsNone(find_nearest_accessible('D1D5DB', '#12', 4.5))

    def test_determinism(self) -> None:
        first = find_nearest_accessible('60A5FA', 'FFFFFF', 4.5)
        for _ in range(3):
            self.assertEqual(find_nearest_accessible('60A5FA', 'FFFFFF', 4.5), first)

    def test_search_bounds(self) -> None:
        # The range above a lightness of 0.9995 is narrower than the precision
        self.assertIsNone(
            search_lightness((0.9995, 0.0, math.nan), 'FFFFFF', 4.5, False)
        )

        # Lightening a light gray on white never helps
        origin = hex_to_oklch('D1D5DB')
        assert origin is not None
        self.assertIsNone(search_lightness(origin, 'FFFFFF', 4.5, False))
        fix = search_lightness(origin, 'FFFFFF', 4.5, True)
        self.assertEqual(fix, find_nearest_accessible('D1D5DB', 'FFFFFF', 4.5))

    def test_suggestions_for_color(self) -> None:
        suggestions = suggestions_for_color(
            'D1D5DB',
            [
                ColorEntry('white', 'FFFFFF'),
                ('same', '#d1d5db'),
                {'id': 'black', 'hex': '000000'},
            ],
            TargetLevel.AA,
        )
        self.assertEqual(set(suggestions), {'white'})
        self.assertEqual(
            suggestions['white'],
            find_nearest_accessible('D1D5DB', 'FFFFFF', 4.5),
        )

        self.assertEqual(suggestions_for_color('zzz', [('white', 'FFFFFF')], 'AA'), {})
