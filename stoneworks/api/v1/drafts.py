"""表单草稿API路由"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_drafts

router = APIRouter()


@router.get("/drafts/{key}")
def read_draft(key: str, drafts=Depends(get_drafts)):
    draft = drafts.load(key)
    if draft is None:
        raise HTTPException(status_code=404, detail="草稿不存在")
    return draft


@router.put("/drafts/{key}")
def save_draft(key: str, data: Dict[str, Any], drafts=Depends(get_drafts)):
    drafts.save(key, data)
    return data


@router.delete("/drafts/{key}")
def clear_draft(key: str, drafts=Depends(get_drafts)):
    drafts.clear(key)
    return {"message": "草稿已清除"}
