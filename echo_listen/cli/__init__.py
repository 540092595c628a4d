"""Command-line interface for EchoListen."""
