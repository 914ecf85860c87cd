"""Gateways to everything outside the process: subprocesses, terminal, clipboard, files."""
