import time

from fastapi import FastAPI, Request

from targetkernel.engine.router import router as planner_router
from targetkernel.errors import register_exception_handlers
from targetkernel.logger import get_logger

logger = get_logger("targetkernel.main")

app = FastAPI(title="TargetKernel", version="0.1.0")
register_exception_handlers(app)
app.include_router(planner_router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "planner": {
            "bmr": "/planner/bmr",
            "maintenance": "/planner/maintenance",
            "plans": "/planner/plans",
            "pace": "/planner/pace",
            "nutrients": "/planner/nutrients",
            "custom_clamp": "/planner/custom/clamp",
            "goal_weight_validate": "/planner/goal-weight/validate",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
