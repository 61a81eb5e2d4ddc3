"""Module entrypoint for ``python -m lsgrid``.

All argument parsing happens in ``lsgrid.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
