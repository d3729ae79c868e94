"""Run the plan API with uvicorn.

Run with:  python3 serve.py
"""

from __future__ import annotations

import os

import uvicorn

API_PORT = int(os.getenv("PORT", "8000"))


def main() -> None:
    uvicorn.run("api.main:app", host=os.getenv("HOST", "0.0.0.0"), port=API_PORT, log_config=None)


if __name__ == "__main__":
    main()
