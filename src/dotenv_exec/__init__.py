"""Run a program with variables loaded from a dotenv file."""

__version__ = "0.1.0"
