# Middleware package init
"""
Acadex Backend — Middleware Package
=====================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Rate Limit] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs and error bodies, 429s included
    2. Logging: method, path, status, duration with the request ID
    3. Rate Limit: reject abusive clients before any routing work
"""
