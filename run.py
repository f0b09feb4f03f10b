"""
Entry Point Script (Bootstrap)
==============================
Convenience runner for development, located outside the 'src' package.

It puts 'src' on 'sys.path' so 'skillmap' imports resolve without an install.

Usage:
    $ python run.py [path/to/skill_map.json]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from skillmap.main import main

if __name__ == "__main__":
    main()
