import hashlib
import importlib
import inspect
import json
from datetime import datetime
from pathlib import Path
from typing import Any

IGNORE_DIRS = {"__pycache__", ".DS_Store", ".git"}
COMPONENTS_ROOT = Path(__file__).resolve().parent.parent / "components"
COMPONENTS_PACKAGE = "primkit.components"


def get_file_hash(path: Path) -> str:
    """Compute basic SHA256 hash."""
    sha256 = hashlib.sha256()
    with open(path, "rb") as f:
        while chunk := f.read(8192):
            sha256.update(chunk)
    return sha256.hexdigest()


def list_components(root: Path = COMPONENTS_ROOT) -> list[str]:
    if not root.exists():
        return []
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and entry.name not in IGNORE_DIRS
    )


def exported_functions(component: str) -> list[str]:
    """Public functions a component exports through __all__."""
    module = importlib.import_module(f"{COMPONENTS_PACKAGE}.{component}")
    return sorted(
        name
        for name in getattr(module, "__all__", [])
        if inspect.isfunction(getattr(module, name, None))
    )


def generate_manifest(root: Path = COMPONENTS_ROOT) -> dict[str, Any]:
    manifest: dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
        "components": {}
    }

    for name in list_components(root):
        entry = root / name
        files = []
        for file_path in sorted(entry.rglob("*.py")):
            if any(part in IGNORE_DIRS for part in file_path.parts):
                continue
            files.append({
                "path": str(file_path.relative_to(root)),
                "size": file_path.stat().st_size,
                "hash": get_file_hash(file_path)
            })
        manifest["components"][name] = {
            "functions": exported_functions(name),
            "files": files,
        }

    return manifest

if __name__ == "__main__":
    print(json.dumps(generate_manifest(), indent=2))
