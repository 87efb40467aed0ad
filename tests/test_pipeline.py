"""Unit tests for scene file pipeline orchestration"""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from shear.exceptions import InvalidInputError
from shear.pipeline import process_file, renormalize_file
from shear.scenes.detection import DetectionResult
from shear.scenes.limits import SceneLimits


class TestProcessFile(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)
        self.input_file = Path("/tmp/test.mkv")
        self.output_file = self.tmp_dir / "scenes.txt"
        self.limits = SceneLimits(fps_num=30, fps_den=1, max_scene_secs=10, max_scene_frames=300)

    def tearDown(self):
        self._tmp.cleanup()

    @patch("shear.pipeline.detect_scene_changes")
    def test_process_file(self, mock_detect):
        """Test detected scenes are split and written"""
        mock_detect.return_value = DetectionResult(scene_starts=[0, 500], frame_count=1000)

        boundaries = process_file(self.input_file, self.output_file, self.limits)

        self.assertEqual(boundaries, [0, 250, 500, 750])
        self.assertEqual(self.output_file.read_text(), "0\n250\n500\n750\n")
        mock_detect.assert_called_once_with(self.input_file, show_progress=False)

    @patch("shear.pipeline.detect_scene_changes")
    def test_given_total_frames_wins(self, mock_detect):
        """Test the caller's frame count is used over the decoded count"""
        mock_detect.return_value = DetectionResult(scene_starts=[0], frame_count=700)

        with self.assertLogs("shear.pipeline", level="WARNING"):
            boundaries = process_file(self.input_file, self.output_file, self.limits, total_frames=720)
        self.assertEqual(boundaries, [0, 240, 480])

    @patch("shear.pipeline.detect_scene_changes")
    def test_scenes_past_end_are_clipped(self, mock_detect):
        """Test scenes beyond the given frame count do not fail normalization"""
        mock_detect.return_value = DetectionResult(scene_starts=[0, 50, 65], frame_count=70)

        boundaries = process_file(self.input_file, self.output_file, self.limits, total_frames=60)
        self.assertEqual(boundaries, [0, 50])

    @patch("shear.pipeline.detect_scene_changes")
    def test_seconds_limit_applies(self, mock_detect):
        """Test the stricter seconds limit bounds the chunks"""
        mock_detect.return_value = DetectionResult(scene_starts=[0], frame_count=480)
        limits = SceneLimits(fps_num=24, fps_den=1, max_scene_secs=5, max_scene_frames=300)

        boundaries = process_file(self.input_file, self.output_file, limits)
        self.assertEqual(boundaries, [0, 120, 240, 360])

    @patch("shear.pipeline.detect_scene_changes")
    def test_empty_video_rejected(self, mock_detect):
        """Test a video with no decoded frames is rejected"""
        mock_detect.return_value = DetectionResult(scene_starts=[0], frame_count=0)

        with self.assertRaises(InvalidInputError):
            process_file(self.input_file, self.output_file, self.limits)
        self.assertFalse(self.output_file.exists())

    @patch("shear.pipeline.detect_scene_changes")
    def test_invalid_limits_fail_before_detection(self, mock_detect):
        """Test bad limits are reported without running detection"""
        limits = SceneLimits(fps_num=30)
        with self.assertRaises(InvalidInputError):
            process_file(self.input_file, self.output_file, limits)
        mock_detect.assert_not_called()

    @patch("shear.pipeline.detect_scene_changes")
    def test_progress_output(self, mock_detect):
        """Test progress mode still writes the same scene file"""
        mock_detect.return_value = DetectionResult(scene_starts=[0, 50], frame_count=60)

        boundaries = process_file(self.input_file, self.output_file, self.limits, show_progress=True)
        self.assertEqual(boundaries, [0, 50])
        mock_detect.assert_called_once_with(self.input_file, show_progress=True)


class TestRenormalizeFile(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_renormalize_splits_long_scenes(self):
        scene_file = self.tmp_dir / "in.txt"
        scene_file.write_text("0\n500\n")
        out = self.tmp_dir / "out.txt"

        self.assertEqual(renormalize_file(scene_file, out, 1000, 300), [0, 250, 500, 750])
        self.assertEqual(out.read_text(), "0\n250\n500\n750\n")

    def test_renormalize_is_idempotent(self):
        scene_file = self.tmp_dir / "scenes.txt"
        scene_file.write_text("0\n250\n500\n750\n")

        renormalize_file(scene_file, scene_file, 1000, 300)
        self.assertEqual(scene_file.read_text(), "0\n250\n500\n750\n")

if __name__ == '__main__':
    unittest.main()
