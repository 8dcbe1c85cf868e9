# cartly/domain/filters.py
from typing import AbstractSet, Iterable, List

from cartly.domain.schemas import Product


def matches(product: Product, search_query: str, selected_tags: AbstractSet[str]) -> bool:
    query = search_query.lower()
    matches_search = (
        not query
        or query in product.title.lower()
        or query in product.description.lower()
        or any(query in tag.lower() for tag in product.tags)
    )
    matches_tags = not selected_tags or any(tag in selected_tags for tag in product.tags)
    return matches_search and matches_tags


def filter_products(
    products: Iterable[Product],
    search_query: str = "",
    selected_tags: AbstractSet[str] = frozenset(),
) -> List[Product]:
    """Widoczny podzbior katalogu, w kolejnosci katalogu."""
    return [p for p in products if matches(p, search_query, selected_tags)]


def available_tags(products: Iterable[Product]) -> List[str]:
    return sorted({tag for p in products for tag in p.tags})


def toggle_tag(selected: AbstractSet[str], tag: str) -> frozenset[str]:
    if tag in selected:
        return frozenset(selected) - {tag}
    return frozenset(selected) | {tag}
