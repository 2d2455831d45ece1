#!/usr/bin/env python3
"""One-off: walk a list connection through the pagination controller and print raw Admin API responses.
Usage: SHOP=your-shop.myshopify.com SHOPIFY_ADMIN_ACCESS_TOKEN=shpat_... python scripts/debug_admin_api.py [products|articles|pages] [search]"""
import asyncio
import json
import os
import sys

from storefront_admin.config import settings
from storefront_admin.schemas.pagination import ListQuery
from storefront_admin.services import admin_graphql
from storefront_admin.services.catalog import ARTICLES, PAGES, PRODUCTS, build_list_variables
from storefront_admin.services.http_client import close_http_client, init_http_client
from storefront_admin.services.pagination import (
    NavigationAction,
    NavigationState,
    compute_navigation_delta,
    normalize_result_page,
)

SHOP = os.environ.get("SHOP", "")
RESOURCES = {"products": PRODUCTS, "articles": ARTICLES, "pages": PAGES}
MAX_PAGES = 3


async def main():
    if not SHOP:
        print("Set SHOP (e.g. your-shop.myshopify.com) in environment")
        return
    if not settings.shopify_admin_access_token:
        print("Set SHOPIFY_ADMIN_ACCESS_TOKEN in environment")
        return
    resource = RESOURCES.get(sys.argv[1] if len(sys.argv) > 1 else "products", PRODUCTS)
    query = ListQuery(search_term=sys.argv[2] if len(sys.argv) > 2 else "")

    init_http_client(timeout=30.0)
    try:
        for _ in range(MAX_PAGES):
            variables = build_list_variables(query, settings.list_page_size)
            print(f"=== {resource.connection} page={query.page} variables={json.dumps(variables)} ===")
            envelope = await admin_graphql.execute(SHOP, resource.document, variables)
            if envelope.get("errors"):
                print("Errors:", json.dumps(envelope["errors"], indent=2)[:1000])
            page = normalize_result_page(envelope, resource.connection)
            print("pageInfo:", page.page_info.model_dump())
            for node in page.nodes:
                if isinstance(node, dict):
                    print(" -", node.get("id"), node.get("title"))
                else:
                    print(" - (malformed)", node)
            print()
            delta = compute_navigation_delta(
                NavigationAction.PAGINATE_NEXT,
                NavigationState(search_value=query.search_term, current_page=query.page, page_info=page.page_info),
            )
            if delta.is_noop:
                break
            query = ListQuery.from_query_params(delta.apply(query.to_query_params()))
    finally:
        await close_http_client()


if __name__ == "__main__":
    asyncio.run(main())
