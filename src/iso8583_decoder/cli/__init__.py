"""Command line interface for iso8583_decoder."""
