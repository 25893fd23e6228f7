from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from loguru import logger

from src.analyzer.config import settings
from src.analyzer.errors import SymbolValidationError
from src.analyzer.service import AnalysisService

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

app = FastAPI(
    title="Stock Sentiment Analyzer API",
    version="1.0",
    description="Company snapshot, news sentiment and 30-day chart data per ticker",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# Outermost layer: every OPTIONS request, preflights included, gets an empty 200.
@app.middleware("http")
async def answer_preflight(request: Request, call_next):
    if request.method != "OPTIONS":
        return await call_next(request)

    return Response(
        status_code=200,
        headers={
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
            "Access-Control-Allow-Headers": request.headers.get(
                "access-control-request-headers", "Content-Type"
            ),
        },
    )


def get_service() -> AnalysisService:
    return AnalysisService.from_settings(settings)


def _method_guard(request: Request) -> Optional[Response]:
    if request.method != "GET":
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})
    return None


def _bad_request(e: SymbolValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(e)})


@app.get("/")
async def health_check():
    return {"status": "ok", "mode": "mock" if settings.uses_mock_data else "live"}


@app.api_route("/api/analyze", methods=ALL_METHODS)
def analyze(
    request: Request,
    symbol: Optional[str] = None,
    service: AnalysisService = Depends(get_service),
):
    guard = _method_guard(request)
    if guard is not None:
        return guard

    try:
        result = service.analyze(symbol)
        return JSONResponse(content=result.to_dict())
    except SymbolValidationError as e:
        return _bad_request(e)
    except Exception as e:
        logger.exception(f"Analysis error for {symbol}: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to analyze stock",
                "symbol": symbol,
                "message": str(e),
            },
        )


@app.api_route("/api/chart", methods=ALL_METHODS)
def chart(
    request: Request,
    symbol: Optional[str] = None,
    service: AnalysisService = Depends(get_service),
):
    guard = _method_guard(request)
    if guard is not None:
        return guard

    try:
        series = service.price_series(symbol)
        return JSONResponse(content=[p.to_dict() for p in series])
    except SymbolValidationError as e:
        return _bad_request(e)
    except Exception as e:
        logger.exception(f"Chart error for {symbol}: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to load chart data",
                "symbol": symbol,
                "message": str(e),
            },
        )
