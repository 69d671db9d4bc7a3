"""FastAPI + linkbuilder example with Redis link caching."""

import logging
import os
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict

from linkbuilder import BuilderRegistry, Link, LinkConfig, Policy
from linkbuilder.adapters.fastapi import add_hateoas, annotate_links_schema
from linkbuilder.infrastructure.backends.redis_cache import RedisLinkCache

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)
logger = logging.getLogger(__name__)


class Order(BaseModel):
    model_config = ConfigDict(json_schema_extra=annotate_links_schema)

    id: str
    status: str
    links: list[Link] = []


ORDERS: dict[str, Order] = {
    "1": Order(id="1", status="open"),
    "2": Order(id="2", status="shipped"),
}


class OrderLinks:
    """Links for an order, depending on its status."""

    def build_links(self, order: Order, context: Any) -> list[Link]:
        links = [
            Link(context.url_for("get_order", order_id=order.id), "self", "GET"),
            Link(context.url_for("list_orders"), "collection", "GET"),
        ]
        if order.status == "open":
            links.append(
                Link(context.url_for("cancel_order", order_id=order.id), "cancel", "POST")
            )
        return links


link_cache = RedisLinkCache(redis_url=REDIS_URL, key_prefix="linkbuilder:example")

registry = BuilderRegistry(
    cache=link_cache,
    config=LinkConfig(default_policy=Policy.ON_DEMAND, key_prefix="v1"),
)
registry.register(Order, OrderLinks())


@asynccontextmanager
async def lifespan(app: FastAPI):
    hateoas.startup([Order])
    logger.info("Link cache at %s", REDIS_URL)
    yield
    await link_cache.close()


app = FastAPI(
    title="linkbuilder Example API",
    description="Orders API with HATEOAS links",
    version="1.0.0",
    lifespan=lifespan,
)

hateoas = add_hateoas(app, registry)
hateoas.group("orders", policy=Policy.ON_DEMAND, enable_caching=True)


@app.get("/orders")
async def list_orders() -> list[str]:
    return sorted(ORDERS)


@app.get("/orders/{order_id}")
@hateoas.hypermedia(group="orders")
async def get_order(order_id: str) -> Order:
    if order_id not in ORDERS:
        raise HTTPException(status_code=404, detail="Order not found")
    return ORDERS[order_id].model_copy()


@app.post("/orders/{order_id}/cancel")
@hateoas.hypermedia(group="orders", policy=Policy.ALWAYS)
async def cancel_order(order_id: str) -> Order:
    if order_id not in ORDERS:
        raise HTTPException(status_code=404, detail="Order not found")
    ORDERS[order_id] = ORDERS[order_id].model_copy(update={"status": "cancelled"})
    await registry.invalidate(Order, order_id)
    return ORDERS[order_id].model_copy()


@app.get("/links/stats")
async def link_stats():
    return {"stats": registry.stats}


@app.post("/links/clear")
async def clear_links():
    await link_cache.clear()
    return {"status": "cleared"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
