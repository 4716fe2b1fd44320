"""Run the API server: python -m api (PORT from env, default 3001)."""

import uvicorn

from phonebook.infrastructure import listen_port, load_env


def main() -> None:
    load_env()
    uvicorn.run("api.main:app", host="0.0.0.0", port=listen_port())


if __name__ == "__main__":
    main()
