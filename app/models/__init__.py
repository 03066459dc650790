# Import every model so Base.metadata is complete (Alembic, create_all)
from app.models.auth import User  # noqa: F401
from app.models.catalog import Brand, Product, SubProduct  # noqa: F401
from app.models.content import Page, Blog, GalleryItem, PortfolioItem, Customer  # noqa: F401
from app.models.site import ContactInfo, AboutStats, Inquiry, PageVisit  # noqa: F401
