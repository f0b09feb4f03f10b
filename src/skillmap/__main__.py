"""Run with: python -m skillmap [document.json]"""
from skillmap.main import main

if __name__ == "__main__":
    main()
