import unittest

from tetris_progress import Progress, SCORE_TABLE, level_for, drop_interval_for


class TestProgress(unittest.TestCase):

    def test_initial_values(self):
        p = Progress()
        self.assertEqual((p.score, p.level, p.lines, p.drop_interval), (0, 1, 0, 800))
        self.assertFalse(p.game_over)
        self.assertFalse(p.paused)

    def test_points_scale_with_level(self):
        for rows, base in zip(range(1, 5), (40, 100, 300, 1200)):
            p = Progress(score=1000, level=3)
            self.assertEqual(p.award(rows), base * 3)
            self.assertEqual(p.score, 1000 + base * 3)
            self.assertEqual(p.lines, rows)

    def test_zero_rows_is_noop(self):
        p = Progress(score=120, game_over=True)
        self.assertEqual(p.award(0), 0)
        self.assertEqual(p.score, 120)
        self.assertTrue(p.game_over)

    def test_level_and_interval_follow_score(self):
        p = Progress(score=480)
        p.award(1)
        self.assertEqual(p.score, 520)
        self.assertEqual(p.level, 2)
        self.assertEqual(p.drop_interval, 760)

    def test_clear_resets_game_over(self):
        p = Progress(game_over=True)
        p.award(2)
        self.assertFalse(p.game_over)

    def test_reset(self):
        p = Progress(score=4321, level=9, lines=33, drop_interval=480)
        p.reset()
        self.assertEqual((p.score, p.level, p.lines, p.drop_interval), (0, 1, 0, 800))

    def test_score_table(self):
        self.assertEqual(SCORE_TABLE, (0, 40, 100, 300, 1200))


class TestCurves(unittest.TestCase):

    def test_level_for(self):
        self.assertEqual(level_for(0), 1)
        self.assertEqual(level_for(499), 1)
        self.assertEqual(level_for(500), 2)
        self.assertEqual(level_for(9500), 20)
        self.assertEqual(level_for(10 ** 7), 20)

    def test_level_is_monotonic_and_capped(self):
        last = 0
        for score in range(0, 20000, 37):
            level = level_for(score)
            self.assertGreaterEqual(level, last)
            self.assertLessEqual(level, 20)
            last = level

    def test_drop_interval_for(self):
        self.assertEqual(drop_interval_for(1), 800)
        self.assertEqual(drop_interval_for(2), 760)
        self.assertEqual(drop_interval_for(19), 80)
        self.assertEqual(drop_interval_for(20), 80)


if __name__ == '__main__':
    unittest.main()
