import math
import unittest

from okcontrast.contrast import contrast_ratio
from okcontrast.matrix import build_matrix, failing_pairs, lookup, summarize
from okcontrast.spec import ColorEntry, ContrastResult, ContrastSummary, TargetLevel


def result(fg: str, bg: str, passes: bool) -> ContrastResult:
    return ContrastResult(
        foreground_id=fg,
        background_id=bg,
        ratio=7.5 if passes else 2.0,
        passes_aa=passes,
        passes_aaa=passes,
        passes_aa_large=passes,
        passes_ui_component=passes,
    )


class TestMatrix(unittest.TestCase):

    def test_black_and_white(self) -> None:
        matrix = build_matrix(
            [{'id': 'a', 'hex': '000000'}, {'id': 'b', 'hex': 'FFFFFF'}],
            TargetLevel.AA,
        )
        self.assertEqual(len(matrix), 4)

        ab = lookup(matrix, 'a', 'b')
        assert ab is not None
        self.assertEqual(ab.ratio, 21.0)
        self.assertTrue(ab.passes_aa)
        self.assertIsNone(ab.suggested_fix)

        aa = lookup(matrix, 'a', 'a')
        assert aa is not None
        self.assertEqual(aa.ratio, 1.0)
        self.assertTrue(aa.is_self_pair)
        self.assertIsNone(aa.suggested_fix)

        self.assertIsNone(lookup(matrix, 'a', 'c'))
        self.assertEqual(
            summarize(matrix, TargetLevel.AA),
            ContrastSummary(total=2, passing=2, failing=0, percentage=100),
        )

    def test_completeness(self) -> None:
        palette = [
            ColorEntry('text', '111827'),
            ColorEntry('primary', '2563EB'),
            ColorEntry('accent', '7C3AED'),
            ColorEntry('border', 'D1D5DB'),
            ColorEntry('surface', 'FFFFFF'),
        ]
        for level in TargetLevel:
            with self.subTest(level=level.value):
                matrix = build_matrix(palette, level)
                self.assertEqual(len(matrix), 25)

                pairs = {(r.foreground_id, r.background_id) for r in matrix}
                self.assertEqual(len(pairs), 25)
                self.assertEqual(sum(r.is_self_pair for r in matrix), 5)

                summary = summarize(matrix, level)
                self.assertEqual(summary.total, 20)
                self.assertEqual(summary.passing + summary.failing, 20)
                self.assertEqual(len(failing_pairs(matrix, level)), summary.failing)

                for r in matrix:
                    if r.is_self_pair or r.passes(level):
                        self.assertIsNone(r.suggested_fix)
                    elif r.suggested_fix is not None:
                        background = next(
                            c.hex for c in palette if c.id == r.background_id
                        )
                        self.assertGreaterEqual(
                            contrast_ratio(r.suggested_fix, background),
                            level.ratio,
                        )

    def test_target_levels(self) -> None:
        palette = [('black', '000000'), ('gray', '777777'), ('white', 'FFFFFF')]

        matrix = build_matrix(palette, 'AA')
        self.assertEqual(
            summarize(matrix, 'AA'),
            ContrastSummary(total=6, passing=4, failing=2, percentage=67),
        )
        self.assertEqual(
            {(r.foreground_id, r.background_id) for r in failing_pairs(matrix, 'AA')},
            {('gray', 'white'), ('white', 'gray')},
        )

        matrix = build_matrix(palette, 'aaa')
        self.assertEqual(
            summarize(matrix, TargetLevel.AAA),
            ContrastSummary(total=6, passing=2, failing=4, percentage=33),
        )
        gray_on_black = lookup(matrix, 'gray', 'black')
        assert gray_on_black is not None
        self.assertTrue(gray_on_black.passes_aa)
        self.assertFalse(gray_on_black.passes_aaa)
        assert gray_on_black.suggested_fix is not None
        self.assertGreaterEqual(contrast_ratio(gray_on_black.suggested_fix, '000000'), 7.0)

        # Neither lighter nor darker black reaches AAA against mid-gray
        black_on_gray = lookup(matrix, 'black', 'gray')
        assert black_on_gray is not None
        self.assertIsNone(black_on_gray.suggested_fix)

    def test_shared_hex_values(self) -> None:
        matrix = build_matrix([('a', '777777'), ('b', '777777')])
        ab = lookup(matrix, 'a', 'b')
        assert ab is not None
        self.assertEqual(ab.ratio, 1.0)
        self.assertFalse(ab.is_self_pair)
        assert ab.suggested_fix is not None
        self.assertGreaterEqual(contrast_ratio(ab.suggested_fix, '777777'), 4.5)

        aa = lookup(matrix, 'a', 'a')
        assert aa is not None
        self.assertIsNone(aa.suggested_fix)

        self.assertEqual(
            summarize(matrix, TargetLevel.AA),
            ContrastSummary(total=2, passing=0, failing=2, percentage=0),
        )

    def test_degenerate_palettes(self) -> None:
        self.assertEqual(build_matrix([]), [])
        self.assertEqual(
            summarize([], TargetLevel.AA),
            ContrastSummary(total=0, passing=0, failing=0, percentage=0),
        )

        matrix = build_matrix([ColorEntry('only', 'ABCDEF')], TargetLevel.AAA)
        self.assertEqual(len(matrix), 1)
        self.assertTrue(matrix[0].is_self_pair)
        self.assertEqual(matrix[0].ratio, 1.0)
        self.assertEqual(
            summarize(matrix, TargetLevel.AAA),
            ContrastSummary(total=0, passing=0, failing=0, percentage=0),
        )

    def test_malformed_color(self) -> None:
        matrix = build_matrix([('bad', 'zzz'), ('white', 'FFFFFF')])
        self.assertEqual(len(matrix), 4)

        bad = lookup(matrix, 'bad', 'white')
        assert bad is not None
        self.assertTrue(math.isnan(bad.ratio))
        self.assertFalse(bad.passes_aa)
        self.assertIsNone(bad.suggested_fix)
        self.assertEqual(summarize(matrix, 'AA').failing, 2)

    def test_percentage_rounds_half_up(self) -> None:
        matrix = [result('a', 'a', True), result('a', 'b', True)]
        matrix.extend(result('a', f'x{n}', False) for n in range(7))
        self.assertEqual(
            summarize(matrix, TargetLevel.AA),
            ContrastSummary(total=8, passing=1, failing=7, percentage=13),
        )

    def test_caller_data_untouched(self) -> None:
        palette = [{'id': 'a', 'hex': 'd1d5db'}, {'id': 'b', 'hex': 'fff'}]
        build_matrix(palette)
        self.assertEqual(palette, [{'id': 'a', 'hex': 'd1d5db'}, {'id': 'b', 'hex': 'fff'}])

        with self.assertRaises(ValueError):
            build_matrix(palette, 'AAAA')
        with self.assertRaises(TypeError):
            build_matrix(['d1d5db'])  # type: ignore
