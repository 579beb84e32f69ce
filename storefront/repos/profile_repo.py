from sqlalchemy.orm import Session
from storefront.data.models.profile import ProfileModel


class ProfileRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: int) -> ProfileModel | None:
        return self.db.get(ProfileModel, user_id)

    def save_profile(self, profile: ProfileModel) -> ProfileModel:
        profile = self.db.merge(profile)
        self.db.commit()
        self.db.refresh(profile)
        return profile
