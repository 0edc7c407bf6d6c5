"""
Unit tests for the Player model.

Tests stint accounting, resets and serialization.
"""
import unittest

from subber.models.player import Player


class TestPlayerModel(unittest.TestCase):
    """Test cases for Player stint bookkeeping."""

    def setUp(self) -> None:
        self.player = Player(name="kunio", number=86)

    def test_defaults(self) -> None:
        self.assertEqual(self.player.play_count, 0)
        self.assertEqual(self.player.play_duration, 0.0)
        self.assertFalse(self.player.playing)
        self.assertIsNone(self.player.play_started)

    def test_sub_on_then_off_commits_stint(self) -> None:
        self.player.sub_on(100.0)
        self.assertTrue(self.player.playing)
        self.assertEqual(self.player.play_count, 1)
        self.assertEqual(self.player.play_started, 100.0)

        self.player.sub_off(130.5)
        self.assertFalse(self.player.playing)
        self.assertIsNone(self.player.play_started)
        self.assertAlmostEqual(self.player.play_duration, 30.5)
        self.assertEqual(self.player.play_count, 1)

    def test_sub_off_when_not_playing_adds_nothing(self) -> None:
        self.player.play_duration = 12.0
        self.player.sub_off(500.0)
        self.assertEqual(self.player.play_duration, 12.0)
        self.assertFalse(self.player.playing)

    def test_resub_discards_running_stint(self) -> None:
        self.player.sub_on(100.0)
        self.player.sub_on(140.0)
        self.assertEqual(self.player.play_count, 2)
        self.assertEqual(self.player.play_duration, 0.0)
        self.assertEqual(self.player.play_started, 140.0)

    def test_resub_commit_elapsed_keeps_running_stint(self) -> None:
        self.player.sub_on(100.0)
        self.player.sub_on(140.0, commit_elapsed=True)
        self.assertEqual(self.player.play_count, 2)
        self.assertAlmostEqual(self.player.play_duration, 40.0)
        self.assertEqual(self.player.play_started, 140.0)

    def test_live_duration_does_not_mutate(self) -> None:
        self.player.play_duration = 10.0
        self.player.sub_on(100.0)
        self.assertAlmostEqual(self.player.live_duration(105.0), 15.0)
        self.assertAlmostEqual(self.player.live_duration(110.0), 20.0)
        self.assertEqual(self.player.play_duration, 10.0)

    def test_current_stint_never_negative(self) -> None:
        self.player.sub_on(100.0)
        self.assertEqual(self.player.current_stint_seconds(90.0), 0.0)

    def test_reset_zeroes_everything(self) -> None:
        self.player.sub_on(100.0)
        self.player.play_duration = 99.0
        self.player.reset()
        self.assertEqual(self.player.play_count, 0)
        self.assertEqual(self.player.play_duration, 0.0)
        self.assertFalse(self.player.playing)
        self.assertIsNone(self.player.play_started)
        self.assertEqual(self.player.number, 86)

    def test_to_dict(self) -> None:
        self.player.sub_on(100.0)
        data = self.player.to_dict()
        self.assertEqual(data, {
            "name": "kunio",
            "number": 86,
            "play_count": 1,
            "play_duration": 0.0,
            "playing": True,
        })


if __name__ == "__main__":
    unittest.main()
