#!/usr/bin/env python3
import datetime
import json
import subprocess
import sys
from pathlib import Path
from typing import TypedDict

# --- Types ---


class GateResult(TypedDict):
    status: str  # "pass" | "fail"
    exit_code: int
    stdout: str
    stderr: str
    command: list[str]


class GatesReport(TypedDict):
    timestamp_utc: str
    overall_status: str  # "pass" | "fail"
    gates: dict[str, GateResult]


# --- Config ---

ARTIFACTS_DIR = Path("artifacts")

COMMANDS = {
    "lint": [sys.executable, "-m", "ruff", "check", "primkit", "tests"],
    "types": [sys.executable, "-m", "mypy", "primkit"],
    "structure": [sys.executable, "-m", "primkit.manifest.check"],
    "tests": [sys.executable, "-m", "pytest", "-q", "--maxfail=1"],
}

# --- Execution ---


def run_command(name: str, cmd: list[str]) -> GateResult:
    print(f"[{name}] Running: {' '.join(cmd)} ...", end="", flush=True)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        print(" ERROR")
        return {"status": "fail", "exit_code": -1, "stdout": "", "stderr": str(e), "command": cmd}

    status = "pass" if result.returncode == 0 else "fail"
    print(f" {status.upper()}")
    return {
        "status": status,
        "exit_code": result.returncode,
        "stdout": result.stdout,
        "stderr": result.stderr,
        "command": cmd,
    }


def main() -> None:
    print("=== primkit: Quality Gates Runner ===")

    results = {name: run_command(name, cmd) for name, cmd in COMMANDS.items()}
    overall_pass = all(r["status"] == "pass" for r in results.values())

    report: GatesReport = {
        "timestamp_utc": datetime.datetime.now(datetime.UTC).isoformat(),
        "overall_status": "pass" if overall_pass else "fail",
        "gates": results,
    }

    ARTIFACTS_DIR.mkdir(exist_ok=True)
    report_path = ARTIFACTS_DIR / "quality_gates_run.json"
    with open(report_path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\nReport written to: {report_path}")

    if overall_pass:
        print("\nSUCCESS: All quality gates passed.")
        sys.exit(0)

    print("\nFAILURE: One or more quality gates failed.")
    for name, res in results.items():
        if res["status"] == "fail":
            print(f"\n--- {name} FAILED (exit code {res['exit_code']}) ---")
            if res["stdout"].strip():
                print(res["stdout"])
            if res["stderr"].strip():
                print(res["stderr"])
    sys.exit(1)


if __name__ == "__main__":
    main()
