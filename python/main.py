#!/usr/bin/env python3
"""S3 Site Sync - エントリーポイント"""
import sys

from s3_site_sync import SiteSync


def main():
    """メイン関数"""
    config_path = sys.argv[1] if len(sys.argv) > 1 else "config.json"
    try:
        successful, failed = SiteSync(config_path).run()
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)

    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    main()
