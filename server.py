# server.py
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

import httpx
import websockets
from fastapi import FastAPI, Request, Response, WebSocket, WebSocketDisconnect
from fastapi.responses import PlainTextResponse

import config

logger = logging.getLogger(__name__)

UPSTREAM_HTTP = f"http://{config.STREAMLIT_HOST}:{config.STREAMLIT_PORT}"
UPSTREAM_WS = f"ws://{config.STREAMLIT_HOST}:{config.STREAMLIT_PORT}"

# what the Streamlit frontend sends: page/asset GETs, file uploads (PUT) and removals (DELETE)
STREAMLIT_METHODS = ["GET", "HEAD", "PUT", "DELETE", "OPTIONS"]
STREAM_PATH = "/_stcore/stream"

HOP_BY_HOP = {"host", "connection", "keep-alive", "proxy-authenticate", "proxy-authorization", "te",
              "trailers", "transfer-encoding", "upgrade", "content-length", "content-encoding"}


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    config.configure_logging()
    logger.info("Proxying to Streamlit at %s", UPSTREAM_HTTP)
    yield


app = FastAPI(title=f"{config.APP_TITLE} PPE Site Proxy", lifespan=lifespan)


@app.get("/healthz")
async def healthz():
    return PlainTextResponse("ok", status_code=200)


def _filter_headers(h: Dict[str, str]) -> Dict[str, str]:
    return {k: v for k, v in h.items() if k.lower() not in HOP_BY_HOP}


def _target(base: str, path: str, query: str) -> str:
    return f"{base}/{path.lstrip('/')}" + (f"?{query}" if query else "")


# ---------------------- HTTP ----------------------
@app.api_route("/{path:path}", methods=STREAMLIT_METHODS)
async def proxy_http(request: Request, path: str):
    target = _target(UPSTREAM_HTTP, path, request.url.query)
    try:
        async with httpx.AsyncClient(follow_redirects=True, timeout=None) as client:
            reply = await client.request(
                request.method, target,
                headers=_filter_headers(dict(request.headers)),
                content=await request.body(),
            )
    except httpx.TransportError as exc:
        logger.warning("Upstream request %s %s failed: %s", request.method, target, exc)
        return PlainTextResponse("upstream unavailable", status_code=502)
    return Response(
        content=reply.content,
        status_code=reply.status_code,
        headers=_filter_headers(dict(reply.headers)),
        media_type=reply.headers.get("content-type"),
    )


# ---------------------- WEBSOCKET ----------------------
async def _browser_to_streamlit(websocket: WebSocket, upstream) -> None:
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                return
            text = message.get("text")
            await upstream.send(text if text is not None else message["bytes"])
    except WebSocketDisconnect:
        pass
    finally:
        await upstream.close()


async def _streamlit_to_browser(websocket: WebSocket, upstream) -> None:
    try:
        async for frame in upstream:
            if isinstance(frame, str):
                await websocket.send_text(frame)
            else:
                await websocket.send_bytes(frame)
    except websockets.ConnectionClosed:
        logger.debug("Streamlit closed the session stream")
    finally:
        await _close(websocket)


@app.websocket(STREAM_PATH)
async def proxy_stream(websocket: WebSocket):
    await websocket.accept()
    target = _target(UPSTREAM_WS, STREAM_PATH, websocket.url.query)
    try:
        async with websockets.connect(target, max_size=None) as upstream:
            await asyncio.gather(
                _browser_to_streamlit(websocket, upstream),
                _streamlit_to_browser(websocket, upstream),
            )
    except (OSError, websockets.WebSocketException) as exc:
        logger.warning("Session stream to %s failed: %s", target, exc)
        await _close(websocket)


async def _close(websocket: WebSocket):
    try:
        await websocket.close()
    except RuntimeError:
        # already closed by the client
        pass
