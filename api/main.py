from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from boards import router as boards_router
from cards import router as cards_router
from core import db, log, settings
from lists import router as lists_router
from users import router as users_router

log.configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to handlers through db.get_pool.
    app.state.pool = await db.create_pool()
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


app = FastAPI(lifespan=lifespan)

app.include_router(users_router.router, tags=["users"])
app.include_router(boards_router.router, tags=["boards"])
app.include_router(lists_router.router, tags=["lists"])
app.include_router(cards_router.router, tags=["cards"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port())
