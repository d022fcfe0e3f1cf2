"""
models/institution.py
---------------------
Domain model for universities in the reference directory.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Institution:
    """A school in the directory. Read-only: CMC never writes these."""
    name: str
    state: str

    def __str__(self) -> str:
        return f"{self.name} | {self.state}"
