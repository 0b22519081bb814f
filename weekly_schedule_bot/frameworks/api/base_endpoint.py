"""Base blueprint for API endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fastapi import APIRouter


class ServiceAPIEndpointBluePrint(ABC):
    """Blueprint for API endpoints.

    Every endpoint builds its own router; the registry collects endpoints
    and the entry point mounts their routers on the FastAPI app.
    """

    @abstractmethod
    def create_rest_api_route(self) -> APIRouter:
        """Create and return a configured APIRouter with route handlers.

        Returns:
            APIRouter with all endpoint routes properly configured
        """
        pass
