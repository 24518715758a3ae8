"""caljan — auto-declines invitations that land in do-not-schedule blocks."""

__version__ = "0.1.0"
