import os

import uvicorn


def main():
    host = os.getenv("CHEFBOOK_HOST", "127.0.0.1")
    port = int(os.getenv("CHEFBOOK_PORT", "8000"))
    uvicorn.run("chefbook.app:app", host=host, port=port)


if __name__ == "__main__":
    main()
