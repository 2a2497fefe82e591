"""WSGI entrypoint: ``flask --app main run`` or ``gunicorn main:app`` from ``backend/``."""
from __future__ import annotations

import os

from users_api import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8080")))
