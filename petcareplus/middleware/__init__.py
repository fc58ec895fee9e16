"""
PetCarePlus Backend: Middleware Package
=========================================

Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → [Session]
            → [Principal] → [Unhandled Error] → Route Handler

    - Request ID: correlation ID in a ContextVar and the X-Request-ID header
    - Access Log: method, path, status, duration, principal
    - GZip: Starlette GZipMiddleware for responses over 500 bytes
    - CORS: Starlette CORSMiddleware, credentials allowed for the cookie
    - Session: Starlette SessionMiddleware, signed cookie
    - Principal: session user → request.state.principal for the guards
    - Unhandled Error: uncaught route exceptions → 500 {"error": ...}
"""
