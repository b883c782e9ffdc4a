#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rollpro_app.config.loader import ConfigLoader
from rollpro_app.config.validation import ConfigValidator, ValidationError


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> list[ValidationError]:
    """Validate configuration for a specific symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating RollPro configuration...")

    loader = ConfigLoader.create()
    symbols_file = loader.config_dir / "symbols.yaml"

    # Every configured symbol plus one that must fall back to defaults
    symbols = ["UNKNOWN-SYMBOL"]
    if symbols_file.exists():
        with open(symbols_file) as f:
            symbols = list((yaml.safe_load(f) or {}).get("symbols", {})) + symbols

    all_valid = True

    for symbol in symbols:
        print(f"\n📊 Validating {symbol}...")
        errors = validate_symbol_config(loader, symbol)

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {symbol} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
