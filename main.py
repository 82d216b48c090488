"""
Main entry point for the recruitment tracker API.

Runs the FastAPI app with uvicorn using API_HOST / API_PORT from settings.
The Streamlit pages are started separately with `streamlit run ui/app.py`.
"""

import uvicorn

from config.settings import settings


def main():
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
