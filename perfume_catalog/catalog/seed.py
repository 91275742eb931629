"""
Default catalog contents.

Used when no snapshot exists on startup and by the reset operation.
"""

from typing import List

from .models import Perfume


DEFAULT_PERFUMES = [
    {
        "id": "1",
        "name": "Baccarat Rouge 540",
        "brand": "Maison Francis Kurkdjian",
        "description": "A luminous fragrance with notes of jasmine, saffron, and amberwood. An olfactory masterpiece that captures the essence of crystal.",
        "price": 450000,
        "originalPrice": 675000,
        "image": "https://images.unsplash.com/photo-1592945403244-b3fbafd7f539?ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D&auto=format&fit=crop&w=2064&q=80",
        "badge": "Limited Edition",
    },
    {
        "id": "2",
        "name": "No. 5 Parfum",
        "brand": "Chanel",
        "description": "The timeless classic with notes of aldehydes, ylang-ylang, and May rose. The epitome of elegance and sophistication.",
        "price": 285000,
        "originalPrice": 420000,
        "image": "https://images.unsplash.com/photo-1590736969955-71ac4460e351?ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D&auto=format&fit=crop&w=2064&q=80",
        "badge": "Heritage",
    },
    {
        "id": "3",
        "name": "Aventus",
        "brand": "Creed",
        "description": "A bold, fruity fragrance with pineapple, birch, and musk. The scent of success, ambition, and power.",
        "price": 525000,
        "originalPrice": 742500,
        "image": "https://images.unsplash.com/photo-1613029226232-93c62f6a967a?ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D&auto=format&fit=crop&w=2070&q=80",
        "badge": "Exclusive",
    },
]


def default_perfumes() -> List[Perfume]:
    """Return fresh Perfume instances for the seed set."""
    return [Perfume.model_validate(item) for item in DEFAULT_PERFUMES]
