"""路由共用的依赖"""

from fastapi import Request

from ..core.backend import SchedulingBackend


def get_backend(request: Request) -> SchedulingBackend:
    settings = request.app.state.settings
    return SchedulingBackend(
        request.app.state.session_factory,
        log_api_calls=settings.LOG_API_CALLS,
        verbose=settings.VERBOSE,
    )


def get_drafts(request: Request):
    return request.app.state.drafts
