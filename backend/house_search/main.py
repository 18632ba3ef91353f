import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from house_search.core.config import settings
from house_search.core.errors import register_error_handlers
from house_search.core.logger import logs
from house_search.routes.houses_route import router as houses_router
from house_search.routes.location_route import router as location_router
from house_search.routes.directions_route import router as route_router

app = FastAPI(title="House Search Map API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Location-Source"],
)

register_error_handlers(app)

# Served both at the root and under the versioned prefix
api_prefix = settings.API_PREFIX.rstrip("/")
for prefix in ([""] + ([api_prefix] if api_prefix else [])):
    app.include_router(location_router, prefix=prefix)
    app.include_router(houses_router, prefix=prefix)
    app.include_router(route_router, prefix=prefix)

logs.log(logging.INFO, f"House Search API ready (prefix: '{settings.API_PREFIX}')")

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to House Search Map API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "ip_location": "/ipLocation",
            "houses": "/houses?lat=&lng=&radius=",
            "route": "/route",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "House Search Map API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("house_search.main:app", host="0.0.0.0", port=8000, reload=True)
