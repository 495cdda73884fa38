"""Built-in records shown when the live feed is unusable."""

from .models import Product

MOCK_PRODUCTS = (
    Product(category="furniture", name="經典實木單椅", price="NT$ 12,800", image_url="chair.png"),
    Product(category="furniture", name="復古黃銅桌燈", price="NT$ 5,600", image_url="lamp.png"),
    Product(category="chair", name="設計師扶手椅", price="NT$ 15,000", image_url="chair.png"),
    Product(category="vintage", name="古董花瓶", price="NT$ 3,200", image_url="IMG_9271.JPG"),
)
