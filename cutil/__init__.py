"""Small utilities for strings, argument parsing, logging, threading, files and random bytes."""

__version__ = "0.1.0"