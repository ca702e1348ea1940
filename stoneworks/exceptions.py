"""业务异常定义"""


class ValidationFailed(ValueError):
    """输入校验失败，在任何远程写入之前抛出"""


class NotFound(LookupError):
    """请求的记录不存在"""

    def __init__(self, entity: str, key):
        super().__init__(f"{entity} {key} not found")
        self.entity = entity
        self.key = key
