#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from slcsp_app.config.loader import ConfigLoader
from slcsp_app.config.validation import ConfigValidator, ValidationError


def validate_active_config(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged defaults + YAML configuration."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def check_sources(config_dir: Optional[Path] = None) -> List[str]:
    """List configured input sources that do not exist."""
    config = ConfigLoader.create(config_dir).load()
    missing = []
    for name in ("plans_path", "zips_path", "targets_path"):
        path = Path(getattr(config.sources, name))
        if not path.is_file():
            missing.append(f"{name}: {path}")
    return missing


def main():
    """Main validation function."""
    loader = ConfigLoader.create()
    print(f"Validating SLCSP configuration in {loader.config_dir} ...")

    try:
        errors = validate_active_config()
    except Exception as e:
        print(f"Error reading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        sys.exit(1)

    print("Configuration is valid")

    missing = check_sources()
    if missing:
        print("Missing input sources:")
        for entry in missing:
            print(f"  - {entry}")
        sys.exit(1)

    print("All input sources found")
    sys.exit(0)


if __name__ == "__main__":
    main()
