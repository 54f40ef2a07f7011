"""
Hotel setting service
Settings are addressed by key. Writing a key that does not exist creates it.
"""
from typing import List, Optional, Callable
from datetime import datetime
import logging
from pydantic import JsonValue
from hotel_pms.database import MemoryStore
from hotel_pms.models.ontology import Setting
from hotel_pms.models.events import EventType, SettingUpdatedData
from hotel_pms.services.event_bus import event_bus, Event, EventPublisher

logger = logging.getLogger(__name__)


class SettingService:
    """Hotel setting service"""

    def __init__(self, store: MemoryStore, event_publisher: Optional[EventPublisher] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._publish_event = event_publisher or event_bus.publish
        self._clock = clock

    def get_settings(self) -> List[Setting]:
        return self.store.settings.list()

    def get_setting(self, key: str) -> Optional[Setting]:
        return self.store.settings.find_first(lambda s: s.key == key)

    def upsert_setting(self, key: str, value: JsonValue) -> Setting:
        """Replace the value of key (wholesale) or create the key"""
        existing = self.get_setting(key)
        now = self._clock()
        if existing:
            setting = self.store.settings.update(
                existing.id, {"value": value, "updated_at": now}
            )
        else:
            setting = self.store.settings.create(
                {"key": key, "value": value, "updated_at": now}
            )
        logger.info(f"Setting '{key}' {'updated' if existing else 'created'}")

        self._publish_event(Event(
            event_type=EventType.SETTING_UPDATED,
            timestamp=now,
            data=SettingUpdatedData(key=key, created=existing is None).to_dict(),
            source="setting_service"
        ))
        return setting
