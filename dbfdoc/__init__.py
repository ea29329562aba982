"""Read, create and edit dBASE (.dbf) tables, order files and CSV output."""

__version__ = "0.1.0"