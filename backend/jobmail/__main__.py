import uvicorn

from jobmail.config import settings


def main() -> None:
    uvicorn.run("jobmail.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    main()
