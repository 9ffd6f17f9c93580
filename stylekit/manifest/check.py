import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent.parent

ALLOWED_ROOTS = {
    "app_shell",
    "components",
    "domain",
    "manifest",
    "rules",
}

ALLOWED_FILES = {"__init__.py", "__main__.py"}

IGNORE = {"__pycache__", ".DS_Store"}

COMPONENT_FILES = ("__init__.py", "component.py")


def check_structure(root_path: Path = PACKAGE_ROOT) -> list[str]:
    errors = []

    if not root_path.exists():
        return [f"package directory not found: {root_path}"]

    # 1. Check Top-Level Entries
    for entry in sorted(root_path.iterdir()):
        if entry.name in IGNORE:
            continue

        if entry.is_dir():
            if entry.name not in ALLOWED_ROOTS:
                errors.append(
                    f"Illegal dir in {root_path.name}/: '{entry.name}'. "
                    f"Allowed: {sorted(ALLOWED_ROOTS)}"
                )
            elif not (entry / "__init__.py").exists():
                errors.append(f"Missing __init__.py in package: '{entry.name}'")
        elif entry.name not in ALLOWED_FILES:
            errors.append(
                f"Illegal file in {root_path.name}/ root: '{entry.name}'. "
                "Should be in a subpackage."
            )

    # 2. Check Component Layout
    components = root_path / "components"
    if components.is_dir():
        for component in sorted(components.iterdir()):
            if not component.is_dir() or component.name in IGNORE:
                continue
            for required in COMPONENT_FILES:
                if not (component / required).exists():
                    errors.append(f"Component '{component.name}' is missing {required}")

    return errors


def main() -> int:
    violations = check_structure()
    if violations:
        print("Architectural Violations Found:")
        for v in violations:
            print(f"  - {v}")
        return 1
    print("Architecture Integrity Check: PASS")
    return 0


if __name__ == "__main__":
    sys.exit(main())
