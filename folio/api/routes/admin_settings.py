"""Admin key/value settings."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from folio.core.dependencies import get_record_store, require_admin
from folio.database.record_store import RecordStore
from folio.schemas import SettingResponse, SettingUpsertRequest

router = APIRouter(prefix="/admin", tags=["admin-settings"], dependencies=[Depends(require_admin)])


@router.get("/settings")
def list_settings(store: RecordStore = Depends(get_record_store)) -> dict[str, str]:
    return {setting.key: setting.value for setting in store.list_settings()}


@router.post("/settings", response_model=SettingResponse)
def upsert_setting(
    payload: SettingUpsertRequest,
    store: RecordStore = Depends(get_record_store),
) -> SettingResponse:
    return SettingResponse.model_validate(store.set_setting(payload.key, payload.value))
