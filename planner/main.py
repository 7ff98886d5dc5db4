import logging
from fastapi import FastAPI

from planner.config import LOG_LEVEL
from planner.routes import schedule

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Create FastAPI app
app = FastAPI(
    title="Planner API",
    description="Places one-time, fixed and recurring tasks onto a calendar window around busy time",
    version="1.0.0"
)

# Include routers
app.include_router(schedule.router, prefix="/schedule", tags=["schedule"])

@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": "Welcome to Planner API",
        "version": "1.0.0",
        "endpoints": {
            "schedule": "POST /schedule/ - Place tasks in a time window and report conflicts",
            "health": "GET /health - Health check"
        },
        "swagger_ui": "/docs - Interactive API documentation",
        "redoc": "/redoc - Alternative API documentation"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# This allows running the app directly with: python -m planner.main
if __name__ == "__main__":
    import uvicorn
    print("🚀 Starting Planner API...")
    print("📖 API Documentation: http://localhost:8000/docs")
    # Use import string format for reload to work
    uvicorn.run("planner.main:app", host="0.0.0.0", port=8000, reload=True)
