#!/usr/bin/env python3
"""Convenience runner for the route export tool.

Usage:
    python run.py directions.json --spacing 100 --output route-export.zip
"""
import logging
from route_export.main import main

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())
