"""End-to-end tests for the command line entry point."""

import numpy as np

import main as cli
from geometry.scenes import SCENES
from main import SCENE_CAMERAS, build_config, main, parse_args
from renderer.export import load_image
from renderer.progress import TerminalProgress


class TestCommandLine:
    """Tests for argument handling and a full tiny render."""

    def test_defaults(self):
        args = parse_args([])
        assert args.output == "image.ppm"
        assert (args.width, args.height, args.samples, args.threads) == (400, 200, 16, 3)
        config = build_config(args)
        assert config.max_depth == 50

    def test_quality_preset_overrides_samples(self):
        config = build_config(parse_args(["--quality", "interactive", "--samples", "99"]))
        assert config.samples_per_pixel == 4

    def test_renders_image(self, tmp_path):
        output = tmp_path / "tiny.png"
        status = main([str(output), "-W", "6", "-H", "3", "--samples", "2", "--threads", "2",
                       "--scene", "standard", "--depth", "4", "--seed", "1", "--no-progress"])
        assert status == 0
        pixels = load_image(output)
        assert pixels.shape == (3, 6, 3)
        assert pixels.dtype == np.uint8

    def test_invalid_config_fails(self, tmp_path):
        output = tmp_path / "never.png"
        status = main([str(output), "--threads", "0", "--no-progress"])
        assert status == 1
        assert not output.exists()

    def test_every_scene_has_a_camera(self):
        assert set(SCENE_CAMERAS) == set(SCENES)

    def test_progress_bars_only_for_rendering_workers(self, tmp_path, monkeypatch):
        sizes = []

        def recording_progress(workers, disable=False):
            sizes.append(workers)
            return TerminalProgress(workers, disable=True)

        monkeypatch.setattr(cli, "TerminalProgress", recording_progress)
        status = main([str(tmp_path / "few.png"), "-W", "4", "-H", "2", "--samples", "2",
                       "--threads", "4", "--scene", "camera-test", "--seed", "3"])
        assert status == 0
        assert sizes == [2]
