from __future__ import annotations
import uvicorn

from zahlen_trainer.config import settings

def main() -> None:
    uvicorn.run("zahlen_trainer.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    main()
