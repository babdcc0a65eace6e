"""Endereco: embedded address value object mapped as a SQLAlchemy composite.

Invariants:
    - Stored as plain columns on the owning table (no separate table, no id)
    - Replaced as a whole: never mutated in place (composites track reassignment)
"""

from dataclasses import dataclass


@dataclass
class Endereco:
    logradouro: str
    bairro: str
    cep: str
    cidade: str
    uf: str
    complemento: str | None = None
    numero: str | None = None
