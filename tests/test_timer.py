import unittest
from unittest.mock import patch

from noaudio.utils.timer import Timer


class TestTimer(unittest.TestCase):
    def test_format_time(self):
        self.assertEqual(Timer.format_time(0), "00:00:00.000")
        self.assertEqual(Timer.format_time(3661.5), "01:01:01.500")
        self.assertEqual(Timer.format_time(59.9996), "00:01:00.000")

    @patch("noaudio.utils.timer.time.monotonic")
    def test_start_stop(self, mock_monotonic):
        mock_monotonic.side_effect = [10.0, 12.5]
        timer = Timer()

        timer.start("clip.mp4")
        duration = timer.stop("clip.mp4")

        self.assertEqual(duration, 2.5)
        self.assertEqual(timer.timings["clip.mp4"]["duration"], 2.5)

    def test_stop_without_start(self):
        timer = Timer()
        with self.assertLogs("noaudio.utils.timer", level="WARNING"):
            self.assertEqual(timer.stop("never"), 0.0)

    @patch("noaudio.utils.timer.time.monotonic")
    def test_summary_includes_unfinished(self, mock_monotonic):
        mock_monotonic.side_effect = [0.0, 1.0, 1.0, 4.0]
        timer = Timer()
        timer.start("a")
        timer.stop("a")
        timer.start("b")

        self.assertEqual(timer.summary(), 4.0)


if __name__ == "__main__":
    unittest.main()
