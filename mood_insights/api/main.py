# mood_insights/api/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mood_insights import __version__
from mood_insights.api.routes import insights_routes
from mood_insights.config.config_manager import ConfigManager

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

config = ConfigManager()

app = FastAPI(
    title="Mood Insights API",
    description="Mood prediction, pattern recognition and anomaly detection over logged wellness data",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get('api.cors_origins', ["*"]),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(insights_routes.router)


@app.get("/")
async def root():
    return {
        "message": "Welcome to the Mood Insights API",
        "version": __version__,
        "endpoints": sorted(route.path for route in insights_routes.router.routes),
        "documentation": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.get('api.host', '127.0.0.1'), port=config.get('api.port', 8000))
