# cartly/services/storefront_client.py
from typing import Any, Dict, List, Sequence

import requests
from pydantic import TypeAdapter, ValidationError

from cartly.domain.schemas import CartLineInput, CartLineUpdate, CartMutationResult, Product
from cartly.utils.logging import get_logger
from cartly.utils.retry import http_retry
from cartly.utils.settings import (
    PRODUCTS_PAGE_SIZE,
    STOREFRONT_ACCESS_TOKEN,
    STOREFRONT_API_URL,
    STOREFRONT_TIMEOUT,
)

logger = get_logger(__name__)

_products_adapter = TypeAdapter(List[Product])


class StorefrontError(RuntimeError):
    """Blad zwrocony przez API (lista errors) albo odpowiedz nie do odczytania."""


PRODUCT_FIELDS = """
  id
  title
  handle
  description
  descriptionHtml
  tags
  vendor
  productType
  createdAt
  updatedAt
  images(first: 10) {
    edges { node { id url altText } }
  }
  variants(first: 10) {
    edges {
      node {
        id
        title
        price { amount currencyCode }
        compareAtPrice { amount currencyCode }
        availableForSale
        selectedOptions { name value }
        image { id url altText }
      }
    }
  }
"""

PRODUCTS_QUERY = f"""
query getProducts($first: Int!, $query: String) {{
  products(first: $first, query: $query) {{
    edges {{ node {{ {PRODUCT_FIELDS} }} }}
  }}
}}
"""

PRODUCT_QUERY = f"""
query getProduct($handle: String!) {{
  product(handle: $handle) {{ {PRODUCT_FIELDS} }}
}}
"""

CART_FIELDS = """
  cart { id checkoutUrl totalQuantity }
  userErrors { field message }
"""

CART_CREATE_MUTATION = f"""
mutation cartCreate($input: CartInput!) {{
  cartCreate(input: $input) {{ {CART_FIELDS} }}
}}
"""

CART_LINES_ADD_MUTATION = f"""
mutation cartLinesAdd($cartId: ID!, $lines: [CartLineInput!]!) {{
  cartLinesAdd(cartId: $cartId, lines: $lines) {{ {CART_FIELDS} }}
}}
"""

CART_LINES_UPDATE_MUTATION = f"""
mutation cartLinesUpdate($cartId: ID!, $lines: [CartLineUpdateInput!]!) {{
  cartLinesUpdate(cartId: $cartId, lines: $lines) {{ {CART_FIELDS} }}
}}
"""

CART_LINES_REMOVE_MUTATION = f"""
mutation cartLinesRemove($cartId: ID!, $lineIds: [ID!]!) {{
  cartLinesRemove(cartId: $cartId, lineIds: $lineIds) {{ {CART_FIELDS} }}
}}
"""


class StorefrontClient:
    """
    Klient GraphQL Storefront API - jeden endpoint POST (query + variables).
    Bledy transportu (requests) sa ponawiane przez tenacity i propagowane dalej.
    """

    def __init__(
        self,
        api_url: str | None = None,
        access_token: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.api_url = api_url or STOREFRONT_API_URL
        self.access_token = access_token if access_token is not None else STOREFRONT_ACCESS_TOKEN
        self.timeout = timeout or STOREFRONT_TIMEOUT
        self.session = session or requests.Session()

    @http_retry()
    def execute(self, query: str, variables: Dict[str, Any] | None = None) -> Dict[str, Any]:
        logger.info(f"StorefrontClient POST {self.api_url}")

        resp = self.session.post(
            self.api_url,
            json={"query": query, "variables": variables or {}},
            headers={
                "Content-Type": "application/json",
                "X-Shopify-Storefront-Access-Token": self.access_token,
            },
            timeout=self.timeout,
        )
        resp.raise_for_status()
        result = resp.json()
        if not isinstance(result, dict):
            raise StorefrontError(f"Unexpected Storefront response: {type(result).__name__}")

        errors = result.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) and errors else {}
            message = first.get("message") if isinstance(first, dict) else None
            raise StorefrontError(message or "Unknown Storefront API error")

        data = result.get("data") or {}
        if not isinstance(data, dict):
            raise StorefrontError(f"Unexpected Storefront data: {type(data).__name__}")
        return data

    #query
    def get_products(self, first: int = PRODUCTS_PAGE_SIZE, query: str | None = None) -> List[Product]:
        data = self.execute(PRODUCTS_QUERY, {"first": first, "query": query})
        products = data.get("products") or {}
        try:
            edges = products.get("edges") or []
            return _products_adapter.validate_python([edge["node"] for edge in edges])
        except (ValidationError, KeyError, TypeError, AttributeError) as e:
            raise StorefrontError(f"Malformed products payload: {e}") from e

    def get_product(self, handle: str) -> Product | None:
        data = self.execute(PRODUCT_QUERY, {"handle": handle})
        node = data.get("product")
        if node is None:
            return None
        try:
            return Product.model_validate(node)
        except ValidationError as e:
            raise StorefrontError(f"Malformed product payload: {e}") from e

    #mutations
    def create_cart(self, lines: Sequence[CartLineInput]) -> CartMutationResult:
        variables = {"input": {"lines": [line.model_dump(by_alias=True) for line in lines]}}
        data = self.execute(CART_CREATE_MUTATION, variables)
        return self._cart_result(data, "cartCreate")

    def add_cart_lines(self, cart_id: str, lines: Sequence[CartLineInput]) -> CartMutationResult:
        variables = {"cartId": cart_id, "lines": [line.model_dump(by_alias=True) for line in lines]}
        data = self.execute(CART_LINES_ADD_MUTATION, variables)
        return self._cart_result(data, "cartLinesAdd")

    def update_cart_lines(self, cart_id: str, lines: Sequence[CartLineUpdate]) -> CartMutationResult:
        variables = {"cartId": cart_id, "lines": [line.model_dump(by_alias=True) for line in lines]}
        data = self.execute(CART_LINES_UPDATE_MUTATION, variables)
        return self._cart_result(data, "cartLinesUpdate")

    def remove_cart_lines(self, cart_id: str, line_ids: Sequence[str]) -> CartMutationResult:
        data = self.execute(CART_LINES_REMOVE_MUTATION, {"cartId": cart_id, "lineIds": list(line_ids)})
        return self._cart_result(data, "cartLinesRemove")

    @staticmethod
    def _cart_result(data: Dict[str, Any], field: str) -> CartMutationResult:
        try:
            return CartMutationResult.model_validate(data.get(field) or {})
        except ValidationError as e:
            raise StorefrontError(f"Malformed {field} payload: {e}") from e
