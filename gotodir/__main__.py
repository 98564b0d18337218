"""``python -m gotodir``: same as the ``gotodir`` script, e.g. ``cd "$(python -m gotodir)"``."""

from .cli import main


if __name__ == "__main__":
    main()
