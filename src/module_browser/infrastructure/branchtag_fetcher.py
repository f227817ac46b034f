"""Branch/tag listing over HTTP."""

from __future__ import annotations

import logging

import httpx

from module_browser.domain.entities import ModuleReference
from module_browser.domain.providers import create_branchtag_urls, transform_branchtags

logger = logging.getLogger(__name__)


async def fetch_module_branchtags(
    client: httpx.AsyncClient,
    ref: ModuleReference,
    headers: dict[str, str] | None = None,
) -> list[str]:
    """Fetch every branch and tag of *ref*, in listing-URL order.

    Requests are issued one after another.  Names present both as a branch
    and a tag are listed twice.  HTTP and decoding failures propagate.
    """
    refs: list[str] = []
    for url in create_branchtag_urls(ref):
        resp = await client.get(url, headers=headers)
        resp.raise_for_status()
        refs.extend(transform_branchtags(resp.json(), ref.type))
    logger.debug("Found %d branches/tags for %s/%s", len(refs), ref.org, ref.repo)
    return refs
