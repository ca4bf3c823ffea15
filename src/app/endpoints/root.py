"""Handler for the / endpoint."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["root"])

index_page = """
<html>
    <head>
        <title>Voice avatar proxy</title>
    </head>
    <body style='font-family: sans-serif;text-align:center;'>
        <h1>Voice avatar proxy</h1>
        <div>POST /v1/generate &mdash; reply generated by the language model</div>
        <div>POST /v1/talk &mdash; talking avatar video</div>
        <div><a href="docs">Swagger UI</a></div>
        <div><a href="redoc">ReDoc</a></div>
    </body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def root_endpoint_handler(request: Request) -> HTMLResponse:
    """Handle request to the / endpoint."""
    # Nothing interesting in the request
    _ = request

    logger.info("Response to / endpoint")
    return HTMLResponse(index_page)
