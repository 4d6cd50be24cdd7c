"""FastAPI application and routes.

This module provides the JSON API for the trip equipment selector.

## API Structure

- /health - Liveness check
- /api/catalog - Normalized equipment catalog
- /api/presets - Destination presets
- /api/selection - Select equipment from explicit criteria
- /api/selection/from-place - Select equipment from an address and a month
"""

from trail_pack.api.app import create_app

__all__ = ["create_app"]
