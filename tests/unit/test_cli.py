"""Unit tests for the command-line entry point."""

import json

import numpy as np
import pytest
from PIL import Image

from chromadrift.cli import build_parser, config_from_args, load_config, main
from chromadrift.core.errors import ConfigError

SMALL_RUN = [
    "--num-particles", "6",
    "--num-perms", "2",
    "--num-steps", "5",
    "--size", "16",
    "--log-interval", "0",
]


class TestConfigMerging:
    """Tests for --config plus flag overrides."""

    def test_flags_only(self):
        args = build_parser().parse_args(["--size", "64", "--seed", "5"])
        cfg = config_from_args(args)
        assert cfg.size == 64
        assert cfg.seed == 5
        assert cfg.num_particles == 30

    def test_flags_override_file(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"size": 32, "seed": 1, "weight": 0.5}))
        args = build_parser().parse_args(["--config", str(path), "--seed", "9"])
        cfg = config_from_args(args)
        assert cfg.size == 32
        assert cfg.weight == 0.5
        assert cfg.seed == 9

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{size: ")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            load_config(path)


class TestMain:
    """Tests for main()."""

    def test_writes_image(self, tmp_path, capsys):
        code = main(SMALL_RUN + ["--seed", "4", "--output-dir", str(tmp_path)])
        assert code == 0
        path = tmp_path / "img-4.png"
        assert str(path) in capsys.readouterr().out
        with Image.open(path) as img:
            assert np.asarray(img).shape == (16, 16, 3)

    def test_summary_plot(self, tmp_path):
        code = main(SMALL_RUN + ["--record-interval", "1", "--summary-plot",
                                 "--output-dir", str(tmp_path)])
        assert code == 0
        assert (tmp_path / "summary-0.png").exists()

    def test_invalid_config_exit_code(self, tmp_path):
        assert main(["--size", "0", "--output-dir", str(tmp_path)]) == 1

    def test_fractional_size_in_config_file(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"size": 16.5, "num_particles": 4, "num_steps": 2,
                                    "log_interval": 0}))
        assert main(["--config", str(path), "--output-dir", str(tmp_path)]) == 1
        assert not (tmp_path / "img-0.png").exists()

    def test_fractional_particle_count_in_config_file(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"num_particles": 3.0, "size": 8}))
        assert main(["--config", str(path), "--output-dir", str(tmp_path)]) == 1

    def test_export_failure_exit_code(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        assert main(SMALL_RUN + ["--output-dir", str(blocker / "out")]) == 2

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        main(SMALL_RUN + ["--output-dir", str(tmp_path), "--log-file", str(log_file)])
        assert "Saved" in log_file.read_text()
