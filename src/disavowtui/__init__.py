"""DisavowTUI - turn messy backlink exports into clean disavow files."""

__version__ = "0.1.0"
