"""Send the video links of a Markdown document to mpv as a playlist."""

__version__ = "0.1.0"
