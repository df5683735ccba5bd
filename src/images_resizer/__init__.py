"""Batch JPEG resizer with concurrent load and resize stages."""
