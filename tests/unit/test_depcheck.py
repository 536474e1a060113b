from __future__ import annotations

import subprocess
import sys
from pathlib import Path

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "tools" / "depcheck.py"


def _run(path: Path) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, str(SCRIPT_PATH), "--path", str(path)],
        capture_output=True,
        text=True,
        check=False,
    )


def test_depcheck_fails_on_third_party_import(tmp_path: Path) -> None:
    domain_dir = tmp_path / "domain"
    domain_dir.mkdir(parents=True, exist_ok=True)

    violating_file = domain_dir / "model.py"
    violating_file.write_text("from pydantic import BaseModel\n", encoding="utf-8")

    result = _run(domain_dir)

    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0
    assert "pydantic" in combined_output
    assert str(violating_file) in combined_output


def test_depcheck_fails_on_application_layer_import(tmp_path: Path) -> None:
    violating_file = tmp_path / "model.py"
    violating_file.write_text(
        "from till.application.use_cases.context import TraceContext\n", encoding="utf-8"
    )

    result = _run(violating_file)

    assert result.returncode != 0
    assert "till.application.use_cases.context" in result.stdout


def test_depcheck_allows_stdlib_and_domain_imports(tmp_path: Path) -> None:
    clean_file = tmp_path / "model.py"
    clean_file.write_text(
        "from __future__ import annotations\n"
        "from enum import Enum\n"
        "from till.domain.register.inventory import Inventory\n",
        encoding="utf-8",
    )

    result = _run(clean_file)

    assert result.returncode == 0
    assert "depcheck passed" in result.stdout


def test_shipped_domain_passes_depcheck() -> None:
    result = _run(Path(__file__).resolve().parents[2] / "src" / "till" / "domain")

    assert result.returncode == 0, result.stdout
