from datetime import datetime, timedelta, timezone

from resmachine import CacheControl, Response
from resmachine.asgi import send_response


async def app(scope, receive, send):
    assert scope["type"] == "http"

    response = Response()
    response.trace.append("b13")
    response.body = "Hello, World!"
    response.headers["Content-Type"] = "text/plain"
    response.set_cookie("session", "abc123", path="/", http_only=True, secure=True)
    response.set_cookie("theme", "dark", expires=datetime.now(timezone.utc) + timedelta(days=30))
    response.set_cache_control(CacheControl(private=True, max_age=60))

    await send_response(response, send)


# Run with: uvicorn examples.asgi_app:app
