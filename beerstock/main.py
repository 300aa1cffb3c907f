# beerstock/main.py

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from beerstock import API_PREFIX
from beerstock.core.config import settings
from beerstock.core.database import create_db_and_tables, engine, get_session
from beerstock.domains.beer.exceptions import BeerStockError
from beerstock.domains.beer.routers import router as beer_router

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거를 설정합니다.
    이미 핸들러가 있으면 (테스트 재실행 등) 다시 설정하지 않습니다.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 시작 시 테이블을 준비하고, 종료 시 연결 풀을 정리합니다.
    """
    logger.info("%s 시작 중... (env=%s)", settings.APP_NAME, settings.APP_ENV)
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()

    yield

    logger.info("%s 종료 중...", settings.APP_NAME)
    await engine.dispose()
    logger.info("데이터베이스 연결 풀 종료 완료.")


setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -- 전역 예외 처리기 --
# 모든 오류 응답은 최소한 {"error": <라벨>, "message": <상세>} 형태를 갖습니다.
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in errors
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({
            "error": "Validation Error",
            "message": message or "Invalid request.",
            "details": errors,
        }),
    )


@app.exception_handler(BeerStockError)
async def beer_stock_exception_handler(request: Request, exc: BeerStockError):
    # 서비스는 Err 결과를 반환하지만, Err.unwrap()으로 발생한 오류도 동일하게 변환합니다.
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# 라우팅 단계의 404/405(Starlette HTTPException)까지 포함합니다.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": _reason_phrase(exc.status_code), "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error", "message": "An unexpected error occurred."},
    )


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


# -- 도메인 라우터 포함 --
app.include_router(beer_router, prefix=f"{API_PREFIX}/beers")


@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """API의 시작점을 알리고 문서 링크를 제공합니다."""
    return {"message": "Welcome to Beer Stock API. Visit /docs for interactive API documentation."}


@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다."""
    try:
        result = await session.execute(text("SELECT 1"))
        if result.scalar() == 1:
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed: No result from test query"
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("beerstock.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG_MODE)
