from app.models.base import Base  # noqa: F401

from app.models.provider import Provider  # noqa: F401
from app.models.resource import ResourceCategory, ResourceItem  # noqa: F401
from app.models.listing import Listing  # noqa: F401
from app.models.application import Application  # noqa: F401
