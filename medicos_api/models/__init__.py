"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before any
      create_all() or alembic autogenerate runs
"""

from medicos_api.models.endereco import Endereco  # noqa: F401
from medicos_api.models.medico import Medico  # noqa: F401
