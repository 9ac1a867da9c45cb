#!/usr/bin/env python3
"""Configuration and convention file validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from conventor.config.loader import ConfigLoader
from conventor.config.validation import ConfigValidator, ValidationError
from conventor.data.loader import load_document
from conventor.data.document import build_from_generic_document
from conventor.errors import IngestionError


def validate_compiler_config(overrides=None) -> list[ValidationError]:
    """Validate the merged compiler configuration."""
    loader = ConfigLoader.create()
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def validate_convention_file(path: Path) -> list[str]:
    """Ingest a convention file and report shape errors."""
    try:
        build_from_generic_document(load_document(path) or {})
    except IngestionError as e:
        return [str(e)]
    return []


def main():
    """Main validation function."""
    print("🔍 Validating Conventor configuration...")

    all_valid = True

    errors = validate_compiler_config()
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Compiler configuration is valid")

    # Test per-call overrides
    print("\n📋 Testing per-call overrides...")
    test_overrides = {
        "expansion": {"major_suits": ["S"]},
        "render": {"suit_symbols": True},
    }
    errors = validate_compiler_config(test_overrides)
    if errors:
        print("❌ Override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    # Convention files named on the command line
    for name in sys.argv[1:]:
        print(f"\n📄 Validating {name}...")
        problems = validate_convention_file(Path(name))
        if problems:
            for problem in problems:
                print(f"❌ {problem}")
            all_valid = False
        else:
            print(f"✅ {name} is a well-formed convention document")

    if all_valid:
        print("\n🎉 All validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
