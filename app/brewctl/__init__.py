"""brewctl - Homebrew bootstrap, upgrade and declarative installs for macOS."""

__version__ = "0.1.0"
