from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from storefront.data.database import get_db
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import ProfileIn, ProfileOut
from storefront.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])

@router.get("", response_model=ProfileOut)
def get_profile(user_id: int = Query(..., gt=0), db: Session = Depends(get_db)):
    service = ProfileService(db)
    try:
        return service.get_profile(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("", response_model=ProfileOut)
def save_profile(payload: ProfileIn, user_id: int = Query(..., gt=0), db: Session = Depends(get_db)):
    service = ProfileService(db)
    return service.save_profile(user_id, payload)
