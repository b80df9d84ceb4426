"""Static catalogs of everything the command line understands.

The parser recognises tokens through these enums and the usage reporter
renders them; nothing else reads them and nothing mutates them.
Declaration order is recognition order and display order.
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class Option(Enum):
    """Command-line options.

    Each member is ``(tokens, description, takes_argument, default)``.
    The member name is the canonical key used in the configuration
    store; the first token is the primary one shown in messages.
    """

    HELP = (("-h", "--help"), "display this help message", False, None)
    VERSION = (("-V", "--version"), "display the program version", False, None)
    INPUT = (("-i", "--input"), "the image file to process", True, None)
    OUTPUT = (("-o", "--output"), "where to write the result", True, "output.fic")
    METRIC = (
        ("-m", "--metric"),
        "the metric to use when comparing images",
        True,
        "AE",
    )
    FUZZ = (
        ("-f", "--fuzz"),
        "colors within this distance are considered equal",
        True,
        "5",
    )
    QUALITY = (
        ("-q", "--quality"),
        "the quality of the compression, in [0, 1]",
        True,
        "0.9",
    )
    SCALE = (
        ("-s", "--scale"),
        "the width and height scale factors for the domain image",
        True,
        "0.5x0.5",
    )
    TILE = (
        ("-t", "--tile"),
        "the width and height in pixels to tile the image",
        True,
        "8x8",
    )
    VERBOSE = (("-v", "--verbose"), "display progress messages", False, "false")
    DEBUG = (
        ("-d", "--debug"),
        "display debug messages, implies verbose",
        False,
        "false",
    )
    LOG = (("--log",), "also write log messages to this file", True, None)

    def __init__(
        self,
        tokens: tuple[str, ...],
        description: str,
        takes_argument: bool,
        default: str | None,
    ) -> None:
        self.tokens: tuple[str, ...] = tokens
        self.description: str = description
        self.takes_argument: bool = takes_argument
        self.default: str | None = default

    @property
    def key(self) -> str:
        """Canonical configuration-store key."""
        return self.name

    @property
    def token(self) -> str:
        """Primary command-line token."""
        return self.tokens[0]

    @classmethod
    def from_token(cls, token: str) -> Option | None:
        for option in cls:
            if token in option.tokens:
                return option
        return None

    @classmethod
    def from_key(cls, key: str) -> Option | None:
        return cls.__members__.get(key)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class Command(Enum):
    """Top-level actions.  Exactly one is active per invocation."""

    COMPRESS = ("compress", "compress the input image")
    DECOMPRESS = ("decompress", "decompress the input file")

    def __init__(self, token: str, description: str) -> None:
        self.token: str = token
        self.description: str = description

    @property
    def key(self) -> str:
        return self.name

    @classmethod
    def from_token(cls, token: str) -> Command | None:
        for command in cls:
            if command.token == token:
                return command
        return None

    @classmethod
    def from_key(cls, key: str) -> Command | None:
        return cls.__members__.get(key)


COMMAND_KEY: str = "COMMAND"
"""Reserved store key holding the selected command; never an Option key."""


# ---------------------------------------------------------------------------
# Comparison metrics
# ---------------------------------------------------------------------------

class Metric(Enum):
    """Image comparison metrics an engine may use when matching blocks."""

    AE = "absolute error count"
    FUZZ = "mean color distance"
    MAE = "mean absolute error"
    MEPP = "mean error per pixel"
    MSE = "mean error squared"
    NCC = "normalized cross correlation"
    PAE = "peak absolute error"
    PSNR = "peak signal to noise ratio"
    RMSE = "root mean squared error"

    @classmethod
    def from_name(cls, name: str) -> Metric | None:
        """Exact, case-sensitive lookup by member name."""
        return cls.__members__.get(name)
