"""Run the travel admin API with uvicorn."""

import uvicorn

from .config import API_HOST, API_PORT


def main() -> None:
    uvicorn.run("travel_admin.api.app:app", host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()
