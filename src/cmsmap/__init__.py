"""cmsmap — map headless CMS API payloads into typed content objects.

The content model declares content types and their fields; a content
repository resolves a content type, builds cache keys for content
requests and maps raw API data into pages.
"""

__version__ = "0.1.0"
