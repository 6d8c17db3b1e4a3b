"""
Run with: python -m slitdiffraction
"""
from slitdiffraction.main import main

if __name__ == "__main__":
    main()
