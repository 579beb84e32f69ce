# storefront/api/deps.py
from fastapi import Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.services.catalog import Catalog, build_catalog
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.utils.settings import CHECKOUT_LOCK_ENABLED


def get_catalog(db: Session = Depends(get_db)) -> Catalog:
    return build_catalog(db)


def get_lock_service() -> LockService | None:
    if not CHECKOUT_LOCK_ENABLED:
        return None
    return LockService()


def get_notifier() -> NotificationService:
    return NotificationService()
