"""HTTP API used by the settings UI to inspect and edit mod configuration.

Values set here go through the same store as values set by mods, so the
owning mod's change listeners fire for edits made in the UI.
"""
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
import logging

from modconfig_lib.config import NamespacedStore, ValueKind
from modconfig_lib.config.records import encode_table
from modconfig_lib.services import KEYBINDINGS, PERSISTENCE, STORE
from modconfig_lib.services.resolver import resolve_service

router = APIRouter()
logger = logging.getLogger(__name__)


class ValuePayload(BaseModel):
    type: ValueKind
    value: str


def _record(key: str, store: NamespacedStore, namespace: str) -> dict:
    value = store.get_value(namespace, key)
    if value is None:
        raise HTTPException(status_code=404, detail={'error': 'not_found', 'message': f'No key {key!r} in {namespace!r}'})
    return {'key': key, 'value': {'type': value.kind.value, 'value': value.text}}


@router.get('/config')
async def api_list_namespaces(request: Request):
    store = resolve_service(request, STORE)
    return {'namespaces': store.namespaces()}


@router.get('/config/{namespace}')
async def api_get_namespace(request: Request, namespace: str):
    store = resolve_service(request, STORE)
    if not store.has_namespace(namespace):
        raise HTTPException(status_code=404, detail={'error': 'not_found', 'message': f'No namespace {namespace!r}'})
    return encode_table(store.snapshot(namespace))


@router.get('/config/{namespace}/{key}')
async def api_get_value(request: Request, namespace: str, key: str):
    store = resolve_service(request, STORE)
    return _record(key, store, namespace)


@router.put('/config/{namespace}/{key}')
async def api_set_value(request: Request, namespace: str, key: str, payload: ValuePayload):
    store = resolve_service(request, STORE)
    try:
        native = payload.type.parse(payload.value)
    except ValueError:
        raise HTTPException(status_code=400, detail={'error': 'invalid_value', 'message': f'{payload.value!r} is not a valid {payload.type.value}'})
    logger.debug("Setting %s:%s (%s) from API", namespace, key, payload.type.value)
    store.set_typed(namespace, key, payload.type, native)
    return _record(key, store, namespace)


@router.delete('/config/{namespace}/{key}')
async def api_remove_value(request: Request, namespace: str, key: str):
    store = resolve_service(request, STORE)
    if not store.remove_key(namespace, key):
        raise HTTPException(status_code=404, detail={'error': 'not_found', 'message': f'No key {key!r} in {namespace!r}'})
    return {'ok': True}


@router.post('/config/{namespace}/save')
async def api_save_namespace(request: Request, namespace: str):
    persistence = resolve_service(request, PERSISTENCE)
    try:
        persistence.save_namespace(namespace)
    except ValueError as e:
        raise HTTPException(status_code=400, detail={'error': 'invalid_namespace', 'message': str(e)})
    return {'ok': True, 'namespace': namespace}


@router.get('/keybindings')
async def api_keybindings(request: Request):
    keybindings = resolve_service(request, KEYBINDINGS)
    return {
        mod: {name: {'modifier': key.modifier, 'trigger': key.trigger} for name, key in bindings.items()}
        for mod, bindings in keybindings.all_keybindings().items()
    }
