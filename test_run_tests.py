"""Pytest entry point for the standalone suite in run_tests.py."""
import subprocess
import sys
from pathlib import Path


def test_run_tests_script():
    script = Path(__file__).parent / "run_tests.py"
    proc = subprocess.run([sys.executable, str(script)], capture_output=True, text=True)
    assert proc.returncode == 0, proc.stdout + proc.stderr
