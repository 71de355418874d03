"""Metadata extraction package: declarative pattern tables plus the extractor that applies them."""
from .metadata_extractor import MetadataExtractor, extract_metadata

__all__ = [
    'MetadataExtractor',
    'extract_metadata',
]
