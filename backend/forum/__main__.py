# forum/__main__.py
import uvicorn

from forum.config import settings


def main() -> None:
    uvicorn.run("forum.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
