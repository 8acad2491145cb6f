import importlib
import sys
from pathlib import Path

from primkit.manifest.generate import COMPONENTS_PACKAGE, COMPONENTS_ROOT, IGNORE_DIRS

REQUIRED_FILES = ("__init__.py", "_impl.py")


def check_structure(root_path: Path = COMPONENTS_ROOT) -> list[str]:
    errors = []

    if not root_path.exists():
        return [f"components directory not found at {root_path}"]

    for entry in sorted(root_path.iterdir()):
        if entry.name in IGNORE_DIRS:
            continue

        if entry.is_file():
            errors.append(
                f"Illegal file in components/: '{entry.name}'. Should be in a component package."
            )
            continue

        # 1. Required files
        missing = [f for f in REQUIRED_FILES if not (entry / f).exists()]
        if missing:
            errors.append(f"Component '{entry.name}' is missing {', '.join(missing)}")
            continue

        # 2. Public surface
        module = importlib.import_module(f"{COMPONENTS_PACKAGE}.{entry.name}")
        exported = getattr(module, "__all__", None)
        if exported is None:
            errors.append(f"Component '{entry.name}' does not define __all__")
            continue

        for name in exported:
            if not hasattr(module, name):
                errors.append(f"Component '{entry.name}' exports missing name '{name}'")

    return errors

if __name__ == "__main__":
    violations = check_structure()
    if violations:
        print("Structure Violations Found:")
        for v in violations:
            print(f"  - {v}")
        sys.exit(1)
    else:
        print("Component Structure Check: PASS")
        sys.exit(0)
