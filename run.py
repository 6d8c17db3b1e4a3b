"""
Entry Point Script (Bootstrap)
==============================
Starts the application from a source checkout without installing it.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so that 'from slitdiffraction...' resolves to the
   sources in 'src/'.

Usage:
    $ python run.py [--debug] [--log-file app_debug.log]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from slitdiffraction.main import main

if __name__ == "__main__":
    main()
