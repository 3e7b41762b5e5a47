# termline/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (payload, CLI options, config).
    Should NOT print traceback.
    """


class DecodeError(UserInputError):
    """
    Payload 解码失败：
    - field   : 出错字段（点分路径，如 "events.0.at" / "tick_every"）
    - message : 原因
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
