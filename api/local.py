"""
FastAPI app for local testing with uvicorn

    uvicorn api.local:app --reload
"""
from fastapi import FastAPI, Request
from fastapi.responses import Response

from api.main import handler

app = FastAPI(title="Bedrock Data API", version="1.0.0")


@app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])
async def catch_all(request: Request, path: str):
    """Catch-all route that delegates to the Lambda handler"""
    raw_body = await request.body()

    event = {
        "httpMethod": request.method,
        "path": f"/{path}",
        "headers": dict(request.headers),
        "queryStringParameters": dict(request.query_params),
        "body": raw_body.decode("utf-8") if raw_body else None,
    }

    response = handler(event, None)

    return Response(
        content=response["body"],
        status_code=response["statusCode"],
        headers=response.get("headers", {}),
    )
