"""Unit tests for rendering and image export."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from chromadrift.core.canvas import Canvas
from chromadrift.core.errors import ExportError, NonFiniteStateError
from chromadrift.core.integrator import Simulation
from chromadrift.render.export import (
    clamp_channels,
    export_image,
    output_path_for_seed,
    render,
    to_pixels,
)


class TestClamp:
    """Tests for channel clamping."""

    def test_documented_values(self):
        pixels = clamp_channels(np.array([-37.5, 400.2, 133.9]))
        assert pixels.tolist() == [0, 255, 133]
        assert pixels.dtype == np.uint8

    def test_bounds_inclusive(self):
        assert clamp_channels(np.array([0.0, 255.0, 254.999])).tolist() == [0, 255, 254]

    def test_non_finite_rejected(self):
        with pytest.raises(NonFiniteStateError):
            clamp_channels(np.array([1.0, np.nan]))


class TestToPixels:
    """Tests for canvas -> pixel grid."""

    def test_neutral_canvas(self):
        pixels = to_pixels(Canvas(5))
        assert pixels.shape == (5, 5, 3)
        assert np.all(pixels == 128)

    def test_cell_position(self):
        canvas = Canvas(4)
        start = canvas.offset(3, 1)
        canvas.buffer[start:start + 3] = [-5.0, 300.0, 10.7]
        pixels = to_pixels(canvas)
        assert pixels[1, 3].tolist() == [0, 255, 10]


class TestExport:
    """Tests for PNG export."""

    def test_output_path_embeds_seed(self, tmp_path):
        assert output_path_for_seed(42, tmp_path) == tmp_path / "img-42.png"
        assert output_path_for_seed(0) == Path("img-0.png")

    def test_writes_rgb_png(self, tmp_path):
        pixels = np.zeros((6, 6, 3), dtype=np.uint8)
        pixels[2, 4] = [10, 20, 30]
        path = export_image(pixels, tmp_path / "out" / "img.png")

        with Image.open(path) as img:
            assert img.mode == "RGB"
            assert img.size == (6, 6)
            loaded = np.asarray(img)
        assert loaded[2, 4].tolist() == [10, 20, 30]

    def test_unwritable_location(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        with pytest.raises(ExportError, match="not_a_dir"):
            export_image(np.zeros((2, 2, 3), dtype=np.uint8), blocker / "img.png")

    def test_export_error_is_os_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(OSError):
            export_image(np.zeros((2, 2, 3), dtype=np.uint8), blocker / "img.png")


class TestRender:
    """Tests for simulation -> file."""

    def test_render_path(self, small_config, tmp_path):
        sim = Simulation(small_config)
        sim.run()
        path = render(sim, tmp_path)
        assert path == tmp_path / f"img-{small_config.seed}.png"
        with Image.open(path) as img:
            assert img.size == (small_config.size, small_config.size)

    def test_identical_runs_identical_bytes(self, small_config, tmp_path):
        paths = []
        for name in ("a", "b"):
            sim = Simulation(small_config)
            sim.run()
            paths.append(render(sim, tmp_path / name))
        assert paths[0].read_bytes() == paths[1].read_bytes()
