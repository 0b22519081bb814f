"""Registry for API endpoints."""

from __future__ import annotations

from typing import List

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint


class SubServiceEndpoints:
    """Collects the endpoint services to be mounted on the FastAPI app."""

    def __init__(self):
        self.endpoints: List[ServiceAPIEndpointBluePrint] = []

    def register(self, endpoint: ServiceAPIEndpointBluePrint) -> None:
        """Register an endpoint with the registry.

        Args:
            endpoint: The endpoint to register
        """
        LOGGER.info(f"Registering endpoint: {endpoint.__class__.__name__}")
        self.endpoints.append(endpoint)
