from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .routers import quotes

app = FastAPI(
    title=f"{settings.STUDIO_NAME} Artwork Price Estimator",
    description="Brew a price. Serve it confidently.",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Last good exchange rate; replaced by routers.quotes when it goes stale
app.state.exchange_rate = None

# API routes
app.include_router(quotes.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "artpresso"}
