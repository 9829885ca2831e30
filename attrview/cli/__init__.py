"""Command line interface for attrview."""
