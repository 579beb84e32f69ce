from sqlalchemy.orm import Session
from storefront.data.models.profile import ProfileModel
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import ProfileIn, ProfileOut, ShippingInfo
from storefront.repos.profile_repo import ProfileRepo


class ProfileService:
    def __init__(self, db: Session):
        self.repo = ProfileRepo(db)

    def get_profile(self, user_id: int) -> ProfileOut:
        profile = self.repo.get_profile(user_id)
        if not profile:
            raise NotFoundError("Profile not found")
        return ProfileOut.model_validate(profile)

    def save_profile(self, user_id: int, payload: ProfileIn) -> ProfileOut:
        profile = ProfileModel(user_id=user_id, **payload.model_dump())
        saved = self.repo.save_profile(profile)
        return ProfileOut.model_validate(saved)

    def get_shipping_info(self, user_id: int) -> ShippingInfo:
        profile = self.get_profile(user_id)
        if not all((profile.address, profile.city, profile.state, profile.zip)):
            raise NotFoundError("Profile has no complete shipping address")
        return ShippingInfo(
            address=profile.address,
            city=profile.city,
            state=profile.state,
            zip=profile.zip,
        )
