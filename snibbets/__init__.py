"""
Snibbets - search a folder of Markdown snippet files

Finds snippet files by name (falling back to content), splits them into
titled code blocks and prints the one you want, either through numbered
menus or as JSON for a launcher.
"""

__version__ = "1.0.0"
__license__ = "MIT"
