from app.models.base import Base
from app.models.site import SiteSettings

__all__ = ["Base", "SiteSettings"]
