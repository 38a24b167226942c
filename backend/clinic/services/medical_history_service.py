"""
Medical history data access.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from clinic.database import MedicalHistory as MedicalHistoryDB
from clinic.exceptions import NotFoundError
from clinic.models.medical_history import MedicalHistoryCreate
from clinic.services.storage import commit

logger = logging.getLogger(__name__)


class MedicalHistoryService:
    """Service for medical history (anamnesis) entries."""

    @staticmethod
    def list_entries(
        db: Session,
        patient_id: Optional[int] = None,
        history_type: Optional[str] = None,
        include_patient: bool = True,
    ) -> List[MedicalHistoryDB]:
        """List history entries; filters given together are combined with AND."""
        query = db.query(MedicalHistoryDB)
        if include_patient:
            query = query.options(selectinload(MedicalHistoryDB.patient))

        if patient_id is not None:
            query = query.filter(MedicalHistoryDB.patient_id == patient_id)
        if history_type is not None:
            query = query.filter(MedicalHistoryDB.history_type == history_type)

        return query.order_by(MedicalHistoryDB.id).all()

    @staticmethod
    def get_entry(db: Session, entry_id: int) -> MedicalHistoryDB:
        entry = db.query(MedicalHistoryDB).options(
            selectinload(MedicalHistoryDB.patient)
        ).filter(MedicalHistoryDB.id == entry_id).first()

        if not entry:
            raise NotFoundError("Medical history record")
        return entry

    @staticmethod
    def create_entry(db: Session, entry_data: MedicalHistoryCreate) -> MedicalHistoryDB:
        db_entry = MedicalHistoryDB(**entry_data.model_dump())
        db.add(db_entry)
        commit(db)
        db.refresh(db_entry)

        logger.info(f"Medical history entry created: {db_entry.id} (patient {db_entry.patient_id})")
        return db_entry

    @staticmethod
    def delete_entry(db: Session, entry_id: int) -> int:
        deleted = db.query(MedicalHistoryDB).filter(
            MedicalHistoryDB.id == entry_id
        ).delete(synchronize_session=False)
        commit(db)

        logger.info(f"Medical history entry deleted: {entry_id} ({deleted} row(s))")
        return deleted
