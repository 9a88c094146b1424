"""FastAPI server for running the jobs proxy locally."""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request, Response

from .handler import handle
from .models import ProxyRequest

app = FastAPI(
    title="Jobs Proxy",
    description="Proxy for job listings stored in SheetDB",
    version="0.1.0",
)


@app.api_route(
    "/api/jobs",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
)
async def jobs(request: Request) -> Response:
    """Forward /api/jobs to the proxy handler."""
    body = await request.body()
    result = await handle(ProxyRequest(method=request.method, body=body or None))
    return Response(
        content=result.render(),
        status_code=result.status_code,
        headers=result.headers,
        media_type=result.content_type,
    )


def main():
    """Entry point for the API server."""
    import uvicorn

    uvicorn.run(
        "jobs_proxy.api:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
