from typing import Callable, Iterable

from fastapi import APIRouter


def create_systems_router(container_env: dict, executor_names: Iterable[str] = (), available_parallelism: Callable[[], int] = None):
    """Create systems router exposing health, environment config and crawler capabilities."""
    router = APIRouter(prefix="/systems", tags=["System"])
    executor_names = sorted(executor_names)

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/config")
    def get_config():
        """Return current environment configuration values."""
        return {
            "environment": {
                key: str(value) if value is not None else None
                for key, value in container_env.items()
            }
        }

    @router.get("/capabilities")
    def capabilities():
        """Executors accepted by `implementationOverride` and the host's parallelism cap."""
        return {
            "implementations": executor_names,
            "maxParallelism": available_parallelism() if available_parallelism else None,
        }

    return router
