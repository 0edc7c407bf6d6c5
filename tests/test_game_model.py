import unittest

from subber.models import Game, GameState, Period


class GameModelTests(unittest.TestCase):
    def setUp(self) -> None:
        self.game = Game()

    def test_not_started_without_periods(self) -> None:
        self.assertEqual(self.game.state(), GameState.NOT_STARTED)
        self.assertIsNone(self.game.current_period())
        self.assertEqual(self.game.period_count, 0)
        self.assertEqual(self.game.elapsed_seconds(1000.0), 0.0)

    def test_open_last_period_is_in_progress(self) -> None:
        self.game.overall_start_ts = 1.0
        self.game.periods.append(Period(start_ts=1.0, start_mono=10.0))
        self.assertEqual(self.game.state(), GameState.IN_PROGRESS)

    def test_closed_last_period_is_paused(self) -> None:
        self.game.overall_start_ts = 1.0
        period = Period(start_ts=1.0, start_mono=10.0)
        period.close(5.0, 14.0)
        self.game.periods.append(period)
        self.assertEqual(self.game.state(), GameState.PAUSED)

    def test_overall_end_is_finished(self) -> None:
        self.game.overall_start_ts = 1.0
        self.game.overall_end_ts = 5.0
        period = Period(start_ts=1.0, start_mono=10.0)
        period.close(5.0, 14.0)
        self.game.periods.append(period)
        self.assertEqual(self.game.state(), GameState.FINISHED)

    def test_open_period_wins_over_overall_end(self) -> None:
        # resumed after end: the running clock decides
        self.game.overall_start_ts = 1.0
        self.game.overall_end_ts = 5.0
        self.game.periods.append(Period(start_ts=6.0, start_mono=20.0))
        self.assertEqual(self.game.state(), GameState.IN_PROGRESS)

    def test_finished_needs_overall_start(self) -> None:
        self.game.overall_end_ts = 5.0
        period = Period(start_ts=1.0, start_mono=10.0)
        period.close(5.0, 14.0)
        self.game.periods.append(period)
        self.assertEqual(self.game.state(), GameState.PAUSED)

    def test_state_is_recomputed(self) -> None:
        self.game.periods.append(Period(start_ts=1.0, start_mono=10.0))
        self.assertEqual(self.game.state(), GameState.IN_PROGRESS)
        self.game.periods[-1].close(2.0, 11.0)
        self.assertEqual(self.game.state(), GameState.PAUSED)
        self.game.periods.clear()
        self.assertEqual(self.game.state(), GameState.NOT_STARTED)

    def test_elapsed_seconds_sums_periods(self) -> None:
        first = Period(start_ts=0.0, start_mono=100.0)
        first.close(60.0, 160.0)
        second = Period(start_ts=70.0, start_mono=170.0)
        self.game.periods.extend([first, second])

        self.assertAlmostEqual(self.game.elapsed_seconds(200.0), 60.0 + 30.0)
        self.assertIs(self.game.current_period(), second)
        self.assertEqual(self.game.period_count, 2)

    def test_copy_is_independent(self) -> None:
        self.game.periods.append(Period(start_ts=1.0, start_mono=10.0))
        clone = self.game.copy()
        clone.periods[-1].close(2.0, 11.0)
        self.assertTrue(self.game.periods[-1].is_open())

    def test_to_dict(self) -> None:
        self.game.overall_start_ts = 1.0
        self.game.periods.append(Period(start_ts=1.0, start_mono=10.0))
        data = self.game.to_dict(now_mono=15.0)
        self.assertEqual(data["state"], "in_progress")
        self.assertEqual(data["periods"], [{"start_ts": 1.0, "end_ts": None}])
        self.assertAlmostEqual(data["elapsed_seconds"], 5.0)
        self.assertNotIn("elapsed_seconds", self.game.to_dict())

    def test_state_values(self) -> None:
        self.assertEqual(str(GameState.PAUSED), "paused")
        self.assertEqual(
            {s.value for s in GameState},
            {"not_started", "in_progress", "paused", "finished"},
        )


if __name__ == "__main__":
    unittest.main()
