import json
import logging
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware

from wechat_mcp.config import config
from wechat_mcp.core.dispatcher import dispatch
from wechat_mcp.core.envelope import is_legacy
from wechat_mcp.core.mcp_types import INTERNAL_ERROR, PARSE_ERROR
from wechat_mcp.tools.registry import registry

# Configure logging
logging.basicConfig(level=config.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="WeChat MCP Server")

# CORS Middleware
origins = config.allowed_origins or ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _origin_allowed(origin):
    if not config.allowed_origins:
        return True
    if not origin:
        return True
    return origin in config.allowed_origins

@app.on_event("startup")
async def startup_event():
    logger.info(json.dumps({"event": "config_loaded", "config": config.model_dump()}, ensure_ascii=False))
    logger.info(f"Registered tools: {', '.join(registry.names())}")

@app.get("/", response_class=PlainTextResponse)
async def root():
    return "WeChat MCP Server is running."

@app.post("/mcp")
async def mcp_post(request: Request):
    """HTTP POST endpoint for both MCP envelopes"""
    origin = request.headers.get("origin")
    if not _origin_allowed(origin):
        return Response(status_code=403)

    try:
        body = await request.body()
        message = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error("Failed to parse MCP request body")
        return JSONResponse(content={
            "jsonrpc": "2.0",
            "error": {"code": PARSE_ERROR, "message": "Parse error"},
            "id": None
        })

    try:
        result = dispatch(message)
    except Exception as e:
        logger.error(f"Internal error: {e}")
        if is_legacy(message):
            return JSONResponse(status_code=500, content={
                "mcp_version": config.mcp.version,
                "status": "error",
                "error": {"code": "internal_error", "message": str(e)}
            })
        request_id = message.get("id") if isinstance(message, dict) else None
        return JSONResponse(content={
            "jsonrpc": "2.0",
            "error": {"code": INTERNAL_ERROR, "message": "Internal error", "data": str(e)},
            "id": request_id
        })

    return JSONResponse(status_code=result.status_code, content=result.content)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    client = request.client.host if request.client else "unknown"
    logger.info(f"Access: {request.method} {request.url} from {client}")
    response = await call_next(request)
    return response

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.server.host, port=config.server.port)
