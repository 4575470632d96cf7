"""FancyTemplates command-line interface."""

from fancytemplates import __version__

__all__ = ['__version__']
