#storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_catalog
from storefront.data.database import get_db
from storefront.domain.errors import InvalidArgumentError, NotFoundError, StorageError
from storefront.domain.schemas import QuantityIn, ShoppingCart
from storefront.services.cart_service import CartService
from storefront.services.catalog import Catalog

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session, catalog: Catalog):
    return CartService(db=db, catalog=catalog)


@router.get("", response_model=ShoppingCart)
def get_cart(
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
    catalog: Catalog = Depends(get_catalog),
):
    svc = get_service(db, catalog)
    try:
        return svc.get_cart(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/products/{product_id}", response_model=ShoppingCart)
def add_product(
    product_id: int,
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
    catalog: Catalog = Depends(get_catalog),
):
    svc = get_service(db, catalog)
    try:
        return svc.add_product(user_id, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/products/{product_id}", response_model=ShoppingCart)
def set_quantity(
    product_id: int,
    payload: QuantityIn,
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
    catalog: Catalog = Depends(get_catalog),
):
    svc = get_service(db, catalog)
    try:
        return svc.set_quantity(user_id, product_id, payload.quantity)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("", status_code=204)
def clear_cart(
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
    catalog: Catalog = Depends(get_catalog),
):
    svc = get_service(db, catalog)
    try:
        svc.clear_cart(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=204)
