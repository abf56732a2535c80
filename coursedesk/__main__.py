"""Run the dashboard API with uvicorn: ``python -m coursedesk``."""

from __future__ import annotations

import uvicorn

from .core import HOST, PORT, RELOAD


def main() -> None:
    uvicorn.run("coursedesk.app:app", host=HOST, port=PORT, reload=RELOAD)


if __name__ == "__main__":
    main()
