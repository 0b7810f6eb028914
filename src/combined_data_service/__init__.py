"""
Combined Data Service - joins comments, posts and users into a single feed.

This package fetches three related collections from upstream HTTP endpoints,
joins them by their id references and serves the result as JSON.
"""

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"
