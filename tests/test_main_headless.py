from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from healthy_products.__main__ import main
from healthy_products.errors import HealthyProductsError
from healthy_products.game.items import ItemPlacementGenerator

SRC = Path(__file__).resolve().parents[1] / "src"


def test_headless_entrypoint_exits_successfully():
    env = os.environ.copy()
    env["HP_HEADLESS"] = "1"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    cmd = [sys.executable, "-m", "healthy_products", "--seed", "3", "--keys", "1", "A"]
    proc = subprocess.run(cmd, capture_output=True, text=True, env=env, timeout=60)

    assert proc.returncode == 0, proc.stderr
    assert "Healthy Products Game (headless)" in proc.stdout
    assert "Mode: playing" in proc.stdout
    assert "Level: 1 |" in proc.stdout


def test_headless_pause_overlay(capsys):
    code = main(["--headless", "--seed", "5", "--keys", "2", "P"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Game Paused" in out
    assert out.strip().splitlines()[-1] == "Level: 2 | Score: 0 | Items left: 10 | Mode: paused"


def test_headless_menu_without_keys(capsys):
    assert main(["--headless"]) == 0
    out = capsys.readouterr().out
    assert "Press 1 for Level 1" in out
    assert out.strip().splitlines()[-1] == "Level: - | Score: - | Items left: 0 | Mode: main_menu"


def test_configuration_error_exit_code(tmp_path):
    assert main(["--headless", "--settings", str(tmp_path / "missing.yaml")]) == 2


def test_crowded_level_with_tiny_attempt_cap_starts(tmp_path, capsys):
    cfg = tmp_path / "crowded.yaml"
    cfg.write_text("rules:\n  items_per_level: 150\n  max_attempts_per_item: 2\n", encoding="utf-8")

    code = main(["--headless", "--settings", str(cfg), "--seed", "1", "--keys", "1"])

    assert code == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == (
        "Level: 1 | Score: 0 | Items left: 150 | Mode: playing"
    )


def test_game_error_during_key_script_exits_with_code_one(monkeypatch, capsys):
    def broken_generate(self, rng, count, grid):
        raise HealthyProductsError("level generation failed")

    monkeypatch.setattr(ItemPlacementGenerator, "generate", broken_generate)

    assert main(["--headless", "--seed", "1", "--keys", "1"]) == 1
    assert "Mode:" not in capsys.readouterr().out


def test_non_numeric_seed_in_settings_exits_with_code_two(tmp_path):
    cfg = tmp_path / "bad_seed.yaml"
    cfg.write_text("seed: abc\n", encoding="utf-8")

    assert main(["--headless", "--settings", str(cfg)]) == 2
