import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from pydantic import ValidationError

from api.schema import ItemText, Reorder
from database.base import StorageError
from models.clipitem import ClipItem
from services.app import ClipboardApp

logger = logging.getLogger(__name__)


def create_app(clip_app: Optional[ClipboardApp] = None) -> FastAPI:
    clip_app = clip_app or ClipboardApp()
    clip_app.start()
    store = clip_app.store

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        clip_app.close()

    app = FastAPI(title="My Clipboard", lifespan=lifespan)
    app.state.clip_app = clip_app

    def serialize(item: ClipItem) -> Dict[str, Any]:
        return {"id": item.id, "text": item.text, "copied": store.is_copied(item.id)}

    def write_failed(e: StorageError) -> Dict[str, Any]:
        logger.error(f"Storage write failed: {e}")
        return {"error": f"saved in memory only: {e}"}

    @app.get("/")
    def root():
        return "running"

    @app.get("/items")
    def list_items():
        return {"ok": True, "items": [serialize(item) for item in store.items]}

    @app.post("/items")
    async def create_item(request: Request):
        try:
            payload = await request.json()
            body = ItemText.model_validate(payload)
        except ValidationError as e:
            return {"error": str(e)}
        except ValueError as e:
            return {"error": f"invalid JSON body: {e}"}

        try:
            item = store.create(body.text)
        except StorageError as e:
            return write_failed(e)
        if item is None:
            return {"error": "text is empty"}
        return {"ok": True, "item": serialize(item)}

    @app.put("/items/{item_id}")
    async def update_item(item_id: str, request: Request):
        try:
            payload = await request.json()
            body = ItemText.model_validate(payload)
        except ValidationError as e:
            return {"error": str(e)}
        except ValueError as e:
            return {"error": f"invalid JSON body: {e}"}

        try:
            updated = store.update(item_id, body.text)
        except StorageError as e:
            return write_failed(e)
        if not updated:
            return {"error": "unknown item or empty text"}
        return {"ok": True, "item": serialize(store.get(item_id))}

    @app.delete("/items/{item_id}")
    def delete_item(item_id: str):
        try:
            deleted = store.delete(item_id)
        except StorageError as e:
            return write_failed(e)
        if not deleted:
            return {"error": "unknown item"}
        return {"ok": True}

    @app.post("/items/reorder")
    async def reorder_items(request: Request):
        try:
            payload = await request.json()
            body = Reorder.model_validate(payload)
        except ValidationError as e:
            return {"error": str(e)}
        except ValueError as e:
            return {"error": f"invalid JSON body: {e}"}

        try:
            moved = store.reorder(body.from_index, body.to_index)
        except StorageError as e:
            return write_failed(e)
        if not moved:
            return {"error": "nothing to move"}
        return {"ok": True, "items": [serialize(item) for item in store.items]}

    @app.post("/items/{item_id}/copy")
    def copy_item(item_id: str):
        if store.get(item_id) is None:
            return {"error": "unknown item"}
        return {"ok": True, "clipboard": store.copy(item_id)}

    return app


def serve(clip_app: Optional[ClipboardApp] = None, host: str = "127.0.0.1", port: int = 3001) -> None:
    uvicorn.run(create_app(clip_app), host=host, port=port)
