import uvicorn

from ticketing.core import config


def main() -> None:
    uvicorn.run("ticketing.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
