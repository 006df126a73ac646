"""repogate - repository access decisions."""

__version__ = "0.1.0"
