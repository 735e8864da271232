"""AWS Lambda handler via Mangum.

Wraps the FastAPI app for API Gateway (v2 HTTP API) events.
The app and Mangum adapter are created at module level so they persist
across warm Lambda invocations.

Environment variables (required):
    SESSION_KEY

Environment variables (recommended for Lambda):
    SESSION_STORE=dynamodb
    DYNAMODB_TABLE=session_tokens
    SESSION_TRANSPORT=path|cookie
    EXPIRATION_TTL=300
"""

from mangum import Mangum

from session_tokens.config import get_settings
from session_tokens.main import build_store, create_app

s = get_settings()

# The store backend is chosen by SESSION_STORE
app = create_app(store=build_store(s), settings=s)

handler = Mangum(app, lifespan="auto")
