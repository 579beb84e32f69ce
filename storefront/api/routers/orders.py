# storefront/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_catalog, get_lock_service, get_notifier
from storefront.data.database import get_db
from storefront.domain.errors import (
    CartChangedError,
    CheckoutInProgressError,
    EmptyCartError,
    NotFoundError,
    StorageError,
)
from storefront.domain.schemas import OrderOut
from storefront.services.catalog import Catalog
from storefront.services.checkout_service import CheckoutService
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.services.order_service import OrderService
from storefront.services.profile_service import ProfileService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=201)
def checkout(
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
    catalog: Catalog = Depends(get_catalog),
    lock_service: LockService | None = Depends(get_lock_service),
    notifier: NotificationService = Depends(get_notifier),
):
    """
    Converts the user's cart into an order, shipping to the address on
    the user's profile. Sends the confirmation asynchronously.
    """
    try:
        shipping_info = ProfileService(db).get_shipping_info(user_id)
        order = CheckoutService(db, catalog, lock_service=lock_service).checkout(
            user_id, shipping_info
        )
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (CheckoutInProgressError, CartChangedError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    notifier.send_order_confirmation(user_id, order.id)
    return order


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
):
    svc = OrderService(db)
    try:
        return svc.get_order(order_id, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
