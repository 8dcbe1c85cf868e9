# cartly/data/demo_catalog.py
# katalog demo - uzywany gdy sklep jest pusty albo API nie odpowiada
from typing import List

from pydantic import TypeAdapter

from cartly.domain.schemas import Product

_RAW_PRODUCTS = [
    {
        "id": "gid://shopify/Product/1",
        "title": "Premium Wireless Headphones",
        "handle": "premium-wireless-headphones",
        "description": "Experience crystal-clear audio with our premium wireless headphones featuring active noise cancellation.",
        "descriptionHtml": "<p>Experience crystal-clear audio with our premium wireless headphones featuring active noise cancellation.</p>",
        "tags": ["electronics", "headphones", "wireless"],
        "vendor": "AudioTech",
        "productType": "Electronics",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
        "images": [
            {
                "id": "img1",
                "url": "https://images.pexels.com/photos/3394650/pexels-photo-3394650.jpeg?auto=compress&cs=tinysrgb&w=800",
                "altText": "Premium Wireless Headphones",
            }
        ],
        "variants": [
            {
                "id": "gid://shopify/ProductVariant/1",
                "title": "Black",
                "price": {"amount": "24999.99", "currencyCode": "INR"},
                "compareAtPrice": {"amount": "32999.99", "currencyCode": "INR"},
                "availableForSale": True,
                "selectedOptions": [{"name": "Color", "value": "Black"}],
                "image": {
                    "id": "img1",
                    "url": "https://images.pexels.com/photos/3394650/pexels-photo-3394650.jpeg?auto=compress&cs=tinysrgb&w=800",
                    "altText": "Premium Wireless Headphones - Black",
                },
            }
        ],
    },
    {
        "id": "gid://shopify/Product/2",
        "title": "Smart Fitness Watch",
        "handle": "smart-fitness-watch",
        "description": "Track your fitness goals with this advanced smartwatch featuring heart rate monitoring and GPS.",
        "descriptionHtml": "<p>Track your fitness goals with this advanced smartwatch featuring heart rate monitoring and GPS.</p>",
        "tags": ["fitness", "smartwatch", "wearable"],
        "vendor": "FitTech",
        "productType": "Wearables",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
        "images": [
            {
                "id": "img2",
                "url": "https://images.pexels.com/photos/393047/pexels-photo-393047.jpeg?auto=compress&cs=tinysrgb&w=800",
                "altText": "Smart Fitness Watch",
            }
        ],
        "variants": [
            {
                "id": "gid://shopify/ProductVariant/2",
                "title": "Silver / 42mm",
                "price": {"amount": "16599.99", "currencyCode": "INR"},
                "availableForSale": True,
                "selectedOptions": [
                    {"name": "Color", "value": "Silver"},
                    {"name": "Size", "value": "42mm"},
                ],
                "image": {
                    "id": "img2",
                    "url": "https://images.pexels.com/photos/393047/pexels-photo-393047.jpeg?auto=compress&cs=tinysrgb&w=800",
                    "altText": "Smart Fitness Watch - Silver",
                },
            }
        ],
    },
    {
        "id": "gid://shopify/Product/3",
        "title": "Minimalist Desk Lamp",
        "handle": "minimalist-desk-lamp",
        "description": "Illuminate your workspace with this sleek, adjustable LED desk lamp with touch controls.",
        "descriptionHtml": "<p>Illuminate your workspace with this sleek, adjustable LED desk lamp with touch controls.</p>",
        "tags": ["home", "lighting", "office"],
        "vendor": "ModernHome",
        "productType": "Home & Garden",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
        "images": [
            {
                "id": "img3",
                "url": "https://images.pexels.com/photos/1112598/pexels-photo-1112598.jpeg?auto=compress&cs=tinysrgb&w=800",
                "altText": "Minimalist Desk Lamp",
            }
        ],
        "variants": [
            {
                "id": "gid://shopify/ProductVariant/3",
                "title": "White",
                "price": {"amount": "7499.99", "currencyCode": "INR"},
                "availableForSale": True,
                "selectedOptions": [{"name": "Color", "value": "White"}],
                "image": {
                    "id": "img3",
                    "url": "https://images.pexels.com/photos/1112598/pexels-photo-1112598.jpeg?auto=compress&cs=tinysrgb&w=800",
                    "altText": "Minimalist Desk Lamp - White",
                },
            }
        ],
    },
]

DEMO_PRODUCTS: tuple[Product, ...] = tuple(TypeAdapter(List[Product]).validate_python(_RAW_PRODUCTS))
