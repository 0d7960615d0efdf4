# src/models/product.py

"""Product data model shared by the search and cart engines."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Product:
    """A single immutable catalog entry."""

    id: str
    name: str
    price: float
    description: str = ""
    category: str = ""
    image: str = ""
    rating: float = 0.0
    review_count: int = 0
    in_stock: bool = True
    tags: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a Product from a catalog JSON record (camelCase keys)."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            price=float(data["price"]),
            description=data.get("description", ""),
            category=data.get("category", ""),
            image=data.get("image", ""),
            rating=float(data.get("rating", 0.0)),
            review_count=int(data.get("reviewCount", 0)),
            in_stock=bool(data.get("inStock", True)),
            tags=tuple(data.get("tags", ())),
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise back to the catalog JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "image": self.image,
            "rating": self.rating,
            "reviewCount": self.review_count,
            "inStock": self.in_stock,
            "tags": list(self.tags),
        }
