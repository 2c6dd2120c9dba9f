import platform
import time
from typing import Any, Dict

from caddie_server.config import get_settings
from caddie_server.metrics import BUILD_VERSION, GIT_SHA


async def health() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "status": "ok",
        "version": BUILD_VERSION,
        "git": GIT_SHA,
        "ts": time.time(),
        "env": {
            "app_env": settings.app_env,
            "caddie_provider": settings.caddie_provider,
            "model": settings.openai_model,
            "heygen_enabled": settings.heygen_enabled,
        },
        "runtime": {
            "python": platform.python_version(),
        },
    }
