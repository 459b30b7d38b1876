"""Data acquisition layer.

This module provides functionality for downloading, staging and extracting
course material archives.

Public API:
    Download operations:
        - fetch_archive: Download one archive into memory

    Staging operations:
        - stage_archive: Write an archive to the temp directory
        - discard_staged: Remove a staged archive

    Extract operations:
        - extract_zip: Extraction that refuses to overwrite existing paths
"""

from dmget.operations.download import fetch_archive
from dmget.operations.extract import extract_zip
from dmget.operations.staging import discard_staged, stage_archive

__all__ = [
    # Download operations
    "fetch_archive",
    # Staging operations
    "stage_archive",
    "discard_staged",
    # Extract operations
    "extract_zip",
]
