"""
Cinelist API package.

Provides the FastAPI application (api.app) for the authentication and
movie catalog service.
"""
