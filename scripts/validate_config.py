#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stockgrid.config.loader import ConfigLoader
from stockgrid.config.validation import ConfigValidator, ValidationError
from stockgrid.errors import InvalidCountError
from stockgrid.layout.planner import plan_layout


def validate_merged_config(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged defaults + config file."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating StockGrid configuration...")

    all_valid = True
    loader = ConfigLoader.create(config_dir)
    print(f"📁 Config directory: {loader.config_dir}")

    try:
        errors = validate_merged_config(config_dir)

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ Parameter validation passed")

    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        all_valid = False

    if all_valid:
        print("\n📊 Checking symbol count against supported layouts...")
        symbols = loader.merge_config()["grid"]["stock_symbols"]
        try:
            plan = plan_layout(len(symbols))
            print(f"✅ {len(symbols)} symbols -> {plan.rows}x{plan.cols} grid")
        except InvalidCountError as e:
            print(f"❌ {e}")
            all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
