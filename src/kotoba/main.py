import uvicorn

from .app import create_app
from .config import settings

app = create_app()


def run():
    uvicorn.run("kotoba.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
