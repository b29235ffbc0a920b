"""prdiff - pull request diff summaries and file-type labels for CI."""

__version__ = "0.1.0"
