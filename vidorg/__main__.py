"""Permet l'execution via ``python -m vidorg``."""

from vidorg.main import main

if __name__ == "__main__":
    main()
