"""
Maternal Wellness API
=====================
Entry point for running the application with `python main.py` or
`uvicorn main:app`. The FastAPI application is defined in app/main.py.
"""

from app.main import app

if __name__ == "__main__":
    import uvicorn

    from app.core.config.settings import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
