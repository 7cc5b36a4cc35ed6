"""
Table Repository - Data access for restaurant tables.
"""

from sqlalchemy.orm import Session, selectinload

from reservation_api.models import Table
from .base import BaseRepository


class TableRepository(BaseRepository[Table]):
    @property
    def model(self) -> type[Table]:
        return Table

    def _detail_options(self):
        return (selectinload(Table.reservation_tables),)


def get_table_repository(db: Session) -> TableRepository:
    return TableRepository(db)
