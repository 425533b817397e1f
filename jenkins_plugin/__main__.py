#!/usr/bin/env python3
"""
Entry point for running as module: python -m jenkins_plugin
"""

import sys

from jenkins_plugin.app import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
