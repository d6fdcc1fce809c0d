import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from noaudio.media import Media, scan_directory
from noaudio.target import Target


class TestMedia(unittest.TestCase):
    """Test cases for target resolution."""

    def setUp(self):
        """Set up a directory with a mix of videos and other files."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name).resolve()
        for name in ["A.mp4", "B.MOV", "notes.txt", "clip.mkv", ".hidden.mp4"]:
            (self.root / name).touch()
        (self.root / "sub").mkdir()
        (self.root / "sub" / "C.mp4").touch()
        # A directory whose name looks like a video
        (self.root / "D.mp4").mkdir()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _names(self, targets):
        return {t.path.name for t in targets}

    def test_scan_directory_is_flat_and_filtered(self):
        found = list(scan_directory(self.root, {".mp4", ".mov"}))
        self.assertEqual({p.name for p in found}, {"A.mp4", "B.MOV"})

    def test_no_paths_scans_cwd(self):
        # Execute
        targets = Media([], cwd=self.root).get_targets()

        # Assert
        self.assertEqual(self._names(targets), {"A.mp4", "B.MOV"})
        for target in targets:
            self.assertIsInstance(target, Target)
            self.assertEqual(target.path.parent, self.root)

    def test_directory_argument(self):
        targets = Media([str(self.root / "sub")]).get_targets()
        self.assertEqual([t.path for t in targets], [self.root / "sub" / "C.mp4"])

    def test_single_extension_set(self):
        targets = Media([str(self.root)], extensions={".mp4"}).get_targets()
        self.assertEqual(self._names(targets), {"A.mp4"})

    def test_file_arguments_keep_argument_order(self):
        targets = Media([str(self.root / "B.MOV"), str(self.root / "A.mp4")]).get_targets()
        self.assertEqual([t.path.name for t in targets], ["B.MOV", "A.mp4"])

    def test_file_with_other_extension_is_silently_ignored(self):
        with self.assertNoLogs("noaudio.media", level="WARNING"):
            targets = Media([str(self.root / "notes.txt")]).get_targets()
        self.assertEqual(targets, [])

    def test_missing_path_warns_and_continues(self):
        missing = str(self.root / "missing.mp4")

        with self.assertLogs("noaudio.media", level="WARNING") as logs:
            targets = Media([missing, str(self.root / "A.mp4")]).get_targets()

        self.assertEqual(self._names(targets), {"A.mp4"})
        self.assertEqual(len(logs.records), 1)
        self.assertIn(f"Skipping non-existent path: {missing}", logs.output[0])

    def test_unreadable_directory_warns_and_continues(self):
        locked = self.root / "locked"
        locked.mkdir()
        real_scandir = os.scandir

        def scandir(path):
            if Path(path) == locked:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        with patch("noaudio.media.os.scandir", side_effect=scandir):
            with self.assertLogs("noaudio.media", level="WARNING") as logs:
                targets = Media([str(locked), str(self.root)]).get_targets()

        self.assertEqual(self._names(targets), {"A.mp4", "B.MOV"})
        self.assertIn(f"Skipping unreadable directory: {locked}", logs.output[0])

    def test_relative_file_argument_becomes_absolute(self):
        targets = Media([str(self.root / "sub" / ".." / "A.mp4")]).get_targets()
        self.assertEqual(targets[0].path, self.root / "A.mp4")


if __name__ == "__main__":
    unittest.main()
