"""
Script Wrapper Tests
"""

import runpy
import subprocess
import sys
from pathlib import Path

import pytest

from deployment import cli

ROOT = Path(__file__).resolve().parent.parent


@pytest.mark.parametrize(
    "module, entry_point",
    [
        ("scripts.deploy_contracts", "deploy_main"),
        ("scripts.deploy_identity", "deploy_identity_main"),
        ("scripts.show_addresses", "show_addresses_main"),
        ("scripts.faucet", "faucet_main"),
    ],
)
def test_script_exits_with_entry_point_status(monkeypatch, module, entry_point):
    monkeypatch.setattr(cli, entry_point, lambda: 7)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module(module, run_name="__main__")

    assert exc_info.value.code == 7


def test_deploy_wrapper_runs_script_as_module(monkeypatch, capsys):
    calls = []

    def fake_run(command, cwd):
        calls.append((command, cwd))
        return subprocess.CompletedProcess(command, 3)

    monkeypatch.setattr(subprocess, "run", fake_run)
    monkeypatch.setattr(sys, "argv", ["deploy.py", "--network", "localhost"])

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_path(str(ROOT / "deploy.py"), run_name="__main__")

    assert exc_info.value.code == 3
    assert calls == [
        ([sys.executable, "-m", "scripts.deploy_contracts", "--network", "localhost"], ROOT)
    ]
    assert "Marketplace Contract Deployment" in capsys.readouterr().out
