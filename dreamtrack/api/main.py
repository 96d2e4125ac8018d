# dreamtrack/api/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dreamtrack import __version__
from dreamtrack.api.routes import sleep_routes

app = FastAPI(
    title="DreamTrack API",
    description="API for scoring sleep entries and generating insights and recommendations",
    version=__version__
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # For development - restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(sleep_routes.router)


@app.get("/")
async def root():
    return {
        "message": "Welcome to the DreamTrack API",
        "version": __version__,
        "documentation": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    from dreamtrack.config.config_manager import ConfigManager

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    config = ConfigManager()
    uvicorn.run(app, host=config.get('api.host', '0.0.0.0'), port=config.get('api.port', 8000))
