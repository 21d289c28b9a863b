"""Console-script entry point for ``fileshift``.

The CLI lives behind the ``cli`` extra; without click installed this
reports how to get it instead of failing with a traceback.
"""

import sys

_NEEDS_CLICK = (
    "fileshift: the command-line interface needs click.\n"
    "Install the 'cli' extra:  pip install 'fileshift[cli]'\n"
)


def main(argv=None):
    try:
        from .cli import main as cli_main
    except ImportError:
        sys.stderr.write(_NEEDS_CLICK)
        return 1
    return cli_main(args=argv, prog_name="fileshift")
