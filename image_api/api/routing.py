"""
Purpose:
- Route class that hands every HTTP method to the endpoint.
- Starlette would answer a method outside `methods` with its own 405 before
  any dependency runs; endpoints using this class decide for themselves.
"""

from fastapi.routing import APIRoute
from starlette.routing import Match

class AnyMethodRoute(APIRoute):
    def matches(self, scope):
        match, child_scope = super().matches(scope)
        # PARTIAL means "path matched, method did not"
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope, receive, send):
        await self.app(scope, receive, send)
