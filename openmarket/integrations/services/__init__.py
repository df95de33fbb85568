from .product_service import ProductService
from .thumbnail_loader import ThumbnailLoader

__all__ = ["ProductService", "ThumbnailLoader"]
