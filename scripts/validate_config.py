#!/usr/bin/env python3
"""Configuration validation script."""

import os
import sys
from pathlib import Path
from typing import List, Optional

from finplan_app.config.defaults import FetcherParams
from finplan_app.config.loader import ConfigLoader
from finplan_app.config.validation import ConfigValidator, ValidationError


def validate_planner_config(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged planner configuration."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating FinPlan configuration...")

    all_valid = True

    try:
        errors = validate_planner_config(config_dir)

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ planner configuration is valid")

    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        all_valid = False

    api_key_env = FetcherParams().api_key_env
    if os.environ.get(api_key_env):
        print(f"✅ {api_key_env} is set")
    else:
        print(f"⚠️  {api_key_env} is not set; price fetches will fail with a configuration error")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
