"""Application factory for the settings API.

`create_app(settings)` composes a `Host` (loading every namespace) and
returns a FastAPI app exposing it. Nothing is created at import time so
tests can build isolated apps:

    from modconfig_lib.main import create_app
    from modconfig_lib.settings import HostSettings
    app = create_app(HostSettings(config_dir="Config"))
"""
from typing import Optional

from fastapi import FastAPI

from modconfig_lib.host import Host, create_host
from modconfig_lib.settings import HostSettings


def create_app(settings: Optional[HostSettings] = None, host: Optional[Host] = None) -> FastAPI:
    """Create the API app, building a new Host unless one is passed in."""
    if host is None:
        host = create_host(settings)

    app = FastAPI(title="Mod Configuration")
    app.state.container = host.container
    app.state.host = host

    from modconfig_lib.api.config_api import router as config_router
    app.include_router(config_router, prefix='/api')

    @app.get('/api/health')
    async def health():
        return {'status': 'ok', 'namespaces': len(host.store.namespaces())}

    return app
