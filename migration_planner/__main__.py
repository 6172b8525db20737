#!/usr/bin/env python3
"""
Entry point for running migration_planner as a module.
"""

import sys

from migration_planner.cli import main

if __name__ == '__main__':
    sys.exit(main())
