# cartly/api/routers/catalog.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from cartly.api.deps import get_session
from cartly.domain.schemas import Product, SearchIn, TagsIn
from cartly.session import Session

router = APIRouter(tags=["catalog"])


@router.get("/products", response_model=List[Product])
def list_products(session: Session = Depends(get_session)):
    """Produkty po filtrach (wyszukiwanie + tagi), w kolejnosci katalogu."""
    return session.catalog.visible_products()


@router.post("/products/reload", response_model=List[Product])
def reload_products(session: Session = Depends(get_session)):
    return list(session.catalog.load_products())


@router.get("/products/tags", response_model=List[str])
def list_tags(session: Session = Depends(get_session)):
    return session.catalog.tags()


@router.get("/products/{product_id:path}", response_model=Product)
def get_product(product_id: str, session: Session = Depends(get_session)):
    product = session.catalog.view_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/filters/search")
def set_search(payload: SearchIn, session: Session = Depends(get_session)):
    session.catalog.set_search_query(payload.query)
    return {"search_query": session.state.search_query}


@router.put("/filters/tags")
def set_tags(payload: TagsIn, session: Session = Depends(get_session)):
    session.catalog.set_selected_tags(payload.tags)
    return {"selected_tags": sorted(session.state.selected_tags)}


@router.post("/filters/tags/{tag}/toggle")
def toggle_tag(tag: str, session: Session = Depends(get_session)):
    session.catalog.toggle_tag(tag)
    return {"selected_tags": sorted(session.state.selected_tags)}


@router.delete("/filters")
def clear_filters(session: Session = Depends(get_session)):
    session.catalog.clear_filters()
    return {"search_query": "", "selected_tags": []}
