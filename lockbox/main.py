from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.types import Receive, Scope, Send

from lockbox.config import settings
from lockbox.core.responses import register_error_handlers
from lockbox.routes import auth, user, vaults, items, folders, search


class PreflightCORSMiddleware(CORSMiddleware):
    """CORS middleware answering every OPTIONS request with an empty 204."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "OPTIONS":
            headers = Headers(scope=scope)
            # not a preflight, so CORSMiddleware would hand it to the router
            if "access-control-request-method" not in headers:
                response = Response(status_code=204, headers=self.simple_headers)
                await response(scope, receive, send)
                return
        await super().__call__(scope, receive, send)

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        return Response(status_code=204, headers=headers)


app = FastAPI(title=settings.PROJECT_NAME, version=settings.PROJECT_VERSION)

app.include_router(auth.router)
app.include_router(user.router)
app.include_router(vaults.router)
app.include_router(items.router)
app.include_router(folders.router)
app.include_router(search.router)

# error middleware first: the CORS middleware added after it wraps it
register_error_handlers(app)

app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=86400,
)


@app.get("/")
async def root():
    return {"message": "Lockbox API is running"}
