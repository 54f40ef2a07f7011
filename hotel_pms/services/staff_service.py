"""
Staff service
"""
from typing import List, Optional
import logging
from hotel_pms.config import settings
from hotel_pms.database import MemoryStore
from hotel_pms.exceptions import DuplicateKeyError
from hotel_pms.models.ontology import Staff
from hotel_pms.models.schemas import StaffCreate, StaffUpdate

logger = logging.getLogger(__name__)


class StaffService:
    """Staff service"""

    def __init__(self, store: MemoryStore, enforce_unique: Optional[bool] = None):
        self.store = store
        self.enforce_unique = settings.ENFORCE_UNIQUE_KEYS if enforce_unique is None else enforce_unique

    def get_staff(self) -> List[Staff]:
        return self.store.staff.list()

    def get_active_staff(self) -> List[Staff]:
        return self.store.staff.filter(lambda s: s.is_active)

    def get_staff_member(self, staff_id: str) -> Optional[Staff]:
        return self.store.staff.get(staff_id)

    def get_staff_by_employee_id(self, employee_id: str) -> Optional[Staff]:
        return self.store.staff.find_first(lambda s: s.employee_id == employee_id)

    def create_staff_member(self, data: StaffCreate) -> Staff:
        if self.enforce_unique and self.get_staff_by_employee_id(data.employee_id):
            raise DuplicateKeyError(f"Employee id '{data.employee_id}' already exists")

        member = self.store.staff.create(data.model_dump())
        logger.info(f"Staff member {member.employee_id} created ({member.id})")
        return member

    def update_staff_member(self, staff_id: str, data: StaffUpdate) -> Staff:
        changes = data.changes()
        if self.enforce_unique and "employee_id" in changes:
            existing = self.get_staff_by_employee_id(changes["employee_id"])
            if existing and existing.id != staff_id:
                raise DuplicateKeyError(f"Employee id '{changes['employee_id']}' already exists")
        return self.store.staff.update(staff_id, changes)
