"""表单草稿存储

未提交的表单内容按键保存，提交成功后清除。
"""

import base64
import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class DraftRepository:
    """草稿存储接口"""

    def save(self, key: str, data: dict) -> None:
        raise NotImplementedError

    def load(self, key: str) -> Optional[dict]:
        raise NotImplementedError

    def clear(self, key: str) -> None:
        raise NotImplementedError


class InMemoryDraftRepository(DraftRepository):
    def __init__(self):
        self._drafts = {}

    def save(self, key: str, data: dict) -> None:
        self._drafts[key] = json.loads(json.dumps(data, default=str))

    def load(self, key: str) -> Optional[dict]:
        return self._drafts.get(key)

    def clear(self, key: str) -> None:
        self._drafts.pop(key, None)


class JsonFileDraftRepository(DraftRepository):
    """每个草稿一个 JSON 文件，保存在 directory 下"""

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, key: str) -> str:
        # URL 安全的 base64 编码，不同的键一定对应不同的文件
        encoded = base64.urlsafe_b64encode(key.encode("utf-8")).decode("ascii")
        return os.path.join(self.directory, f"{encoded}.json")

    def save(self, key: str, data: dict) -> None:
        os.makedirs(self.directory, exist_ok=True)
        with open(self._path(key), "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, default=str)

    def load(self, key: str) -> Optional[dict]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError:
            # 损坏的草稿直接忽略
            logger.warning("[Drafts] ignoring unreadable draft %s", path)
            return None

    def clear(self, key: str) -> None:
        path = self._path(key)
        if os.path.exists(path):
            os.remove(path)
