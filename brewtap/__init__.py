"""brewtap: publish the Codex Homebrew formula for a tagged release."""

__version__ = "0.1.0"
