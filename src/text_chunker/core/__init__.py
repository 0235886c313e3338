"""Core chunking components of text-chunker."""
