"""
Colonnes d'horodatage communes.

Le schéma de production mélange deux conventions selon les tables :
createdAt/updatedAt (la majorité) et created_at/updated_at (configurations,
memberships). Les noms sont conservés tels quels, y compris dans le JSON.
"""

from sqlalchemy import Column, DateTime, func


class CamelCaseTimestamps:
    createdAt = Column(DateTime(timezone=True), nullable=False, default=func.now())
    updatedAt = Column(DateTime(timezone=True), nullable=False, default=func.now(), onupdate=func.now())


class SnakeCaseTimestamps:
    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=func.now(), onupdate=func.now())
