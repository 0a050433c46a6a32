"""Module entrypoint for ``python -m lscol``.

All argument parsing and output happen in ``lscol.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
