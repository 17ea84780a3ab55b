"""
CLI entry point
Allows running as: python -m poseframe.cli
"""

from .main import main

if __name__ == '__main__':
    import sys
    sys.exit(main())
