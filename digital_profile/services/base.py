"""
Shared read/write behaviour for the profile datasets.

Every dataset is a flat table of categorical keys and integer counts. The
service here implements the common procedures (list with equality filters,
admin create/update/delete) and the raw-SQL fallback to the legacy
prefixed tables. Area services subclass it and add their summaries.
"""
import functools
import logging
import uuid
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import Integer, Numeric, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from digital_profile.auth import CurrentUser, ensure_superadmin
from digital_profile.config import settings
from digital_profile.database import table_exists
from digital_profile.exceptions import ConflictError, InternalServerError, NotFoundError

logger = logging.getLogger(__name__)

READ_ONLY_FIELDS = ("id", "created_at", "updated_at")


def procedure(message: str = "Failed to retrieve data"):
    """
    Wrap a service method as a procedure boundary.

    Database errors are logged, the session is rolled back and an
    InternalServerError carrying ``message`` is raised instead. Unique
    constraint violations surface as ConflictError.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except IntegrityError as exc:
                logger.error("Integrity error in %s.%s: %s", type(self).__name__, func.__name__, exc)
                self.db.rollback()
                raise ConflictError("Data conflicts with an existing record") from exc
            except SQLAlchemyError as exc:
                logger.error("Error in %s.%s: %s", type(self).__name__, func.__name__, exc)
                self.db.rollback()
                raise InternalServerError(message) from exc
        return wrapper
    return decorator


class ProfileDatasetService:
    """Generic procedures over one profile table."""

    model = None
    label = "data"
    unique_fields: Sequence[str] = ()
    conflict_message = "Data already exists"
    not_found_message = "Data not found"
    # Columns recomputed by prepare() when the caller does not send them
    derived_fields: Sequence[str] = ()
    # Unprefixed legacy table name; None disables the fallback
    legacy_table: Optional[str] = None
    legacy_order_by: Optional[str] = None

    def __init__(self, db: Session):
        self.db = db

    def order_by(self) -> list:
        return []

    def serialize(self, record) -> Dict[str, Any]:
        return {column.name: getattr(record, column.name) for column in self.model.__table__.columns}

    def decorate(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Add display-only fields to a serialized row."""
        return item

    def prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Fill derived columns before a row is written."""
        return data

    def _query(self, filters: Dict[str, Any]):
        query = self.db.query(self.model)
        for field, value in filters.items():
            query = query.filter(getattr(self.model, field) == value)
        return query

    @procedure()
    def get_all(self, **filters) -> List[Dict[str, Any]]:
        """Rows matching the non-null equality filters, in dataset order."""
        filters = {field: value for field, value in filters.items() if value is not None}

        rows = []
        try:
            records = self._query(filters).order_by(*self.order_by()).all()
            rows = [self.serialize(record) for record in records]
        except SQLAlchemyError as exc:
            self.db.rollback()
            if not self.legacy_table or not table_exists(self.db, self.legacy_table_name):
                raise
            logger.warning("Failed to query %s, trying legacy table: %s", self.model.__tablename__, exc)

        if not rows and self.legacy_table:
            rows = self.fetch_legacy(filters)

        return [self.decorate(row) for row in rows]

    @procedure()
    def get_first(self, **filters) -> Optional[Dict[str, Any]]:
        rows = self.get_all(**filters)
        return rows[0] if rows else None

    # Legacy tables

    @property
    def legacy_table_name(self) -> str:
        return f"{settings.LEGACY_TABLE_PREFIX}{self.legacy_table}"

    def fetch_legacy(self, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Read the raw legacy table, coerce numbers and filter in code."""
        table_name = self.legacy_table_name
        if not table_exists(self.db, table_name):
            return []

        logger.info("Reading %s from legacy table %s", self.label, table_name)
        preparer = self.db.get_bind().dialect.identifier_preparer
        statement = f"SELECT * FROM {preparer.quote(table_name)}"
        if self.legacy_order_by:
            statement += f" ORDER BY {self.legacy_order_by}"

        result = self.db.execute(text(statement)).mappings().all()
        rows = [self.coerce_legacy_row(dict(row)) for row in result]

        for field, value in filters.items():
            rows = [row for row in rows if row.get(field) == value]
        return rows

    def coerce_legacy_row(self, row: Dict[str, Any]) -> Dict[str, Any]:
        coerced = {}
        for column in self.model.__table__.columns:
            value = row.get(column.name)
            if column.primary_key:
                value = str(value) if value is not None else None
            elif isinstance(column.type, Integer):
                value = int(value or 0)
            elif isinstance(column.type, Numeric):
                value = float(value or 0)
            coerced[column.name] = value
        return coerced

    # Mutations

    def get_record(self, record_id):
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def _check_unique(self, data: Dict[str, Any]):
        if not self.unique_fields:
            return
        existing = self._query({field: data.get(field) for field in self.unique_fields}).first()
        if existing is not None:
            raise ConflictError(self.conflict_message.format(**data))

    @procedure("Failed to create entry")
    def create(self, payload: Dict[str, Any], user: Optional[CurrentUser]) -> Dict[str, Any]:
        ensure_superadmin(user, "create", self.label)
        self._check_unique(payload)

        data = self.prepare(dict(payload))
        record_id = data.pop("id", None) or str(uuid.uuid4())
        self.db.add(self.model(id=record_id, **data))
        self.db.commit()

        logger.info("Created %s %s", self.label, record_id)
        return {"success": True, "id": record_id}

    @procedure("Failed to update entry")
    def update(self, record_id: str, payload: Dict[str, Any], user: Optional[CurrentUser]) -> Dict[str, Any]:
        ensure_superadmin(user, "update", self.label)

        record = self.get_record(record_id)
        if record is None:
            raise NotFoundError(self.not_found_message)

        current = {
            field: value for field, value in self.serialize(record).items()
            if field not in self.derived_fields
        }
        data = self.prepare({**current, **payload})
        for field, value in data.items():
            if field not in READ_ONLY_FIELDS:
                setattr(record, field, value)
        self.db.commit()

        logger.info("Updated %s %s", self.label, record_id)
        return {"success": True, "id": record_id}

    @procedure("Failed to delete entry")
    def delete(self, record_id: str, user: Optional[CurrentUser]) -> Dict[str, Any]:
        ensure_superadmin(user, "delete", self.label)

        deleted = self.db.query(self.model).filter(self.model.id == record_id).delete(synchronize_session=False)
        self.db.commit()

        if deleted:
            logger.info("Deleted %s %s", self.label, record_id)
        return {"success": True}
