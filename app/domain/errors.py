class FortuneTellerError(Exception):
    """Base class for errors raised while handling an upload."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UploadRejectedError(FortuneTellerError):
    """The client sent something we refuse to read; maps to HTTP 400."""


class NoFileUploadedError(UploadRejectedError):
    def __init__(self) -> None:
        super().__init__("没有上传文件")


class UnsupportedMediaTypeError(UploadRejectedError):
    def __init__(self, content_type: str | None = None) -> None:
        super().__init__("只允许上传图片文件！")
        self.content_type = content_type


class FileTooLargeError(UploadRejectedError):
    def __init__(self, limit_mb: int) -> None:
        super().__init__(f"文件大小不能超过{limit_mb}MB")
        self.limit_mb = limit_mb


class FortuneProcessingError(FortuneTellerError):
    """Unexpected failure after the upload was accepted; maps to HTTP 500."""

    def __init__(self, message: str = "文件处理失败") -> None:
        super().__init__(message)
