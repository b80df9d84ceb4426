"""fic — command-line front end for fractal image compression.

Parses the command line into a validated configuration and hands it to
a pluggable compression engine.
"""

from fic.version import __version__

__all__: list[str] = ["__version__"]
