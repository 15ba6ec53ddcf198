"""HTTP client for the fortune teller upload API."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from app.config.settings import ClientSettings

logger = logging.getLogger(__name__)


class FortuneClientError(Exception):
    """Raised with a message that can be shown to the user as-is."""


class FortuneClient:
    """Uploads a photo and returns the fortune the server picked."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        max_file_size_mb: Optional[int] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_url: Base URL of the API, e.g. ``http://localhost:3001/api``.
            max_file_size_mb: Client-side size limit checked before uploading.
            timeout: Request timeout in seconds.
            session: Optional ``requests.Session`` to reuse.

        Unset arguments fall back to ``ClientSettings``.
        """
        defaults = ClientSettings()
        self.api_url = (api_url or defaults.API_URL).rstrip("/")
        self.max_file_size_mb = max_file_size_mb or defaults.MAX_FILE_SIZE
        self.timeout = timeout or defaults.UPLOAD_TIMEOUT
        self._session = session or requests.Session()

    @property
    def upload_url(self) -> str:
        return f"{self.api_url}/upload"

    def check_photo(self, path: Path) -> str:
        """Validate a local photo and return its guessed content type.

        Raises:
            FortuneClientError: If the file is missing, not an image, or too large.
        """
        path = Path(path)
        if not path.is_file():
            raise FortuneClientError("请先选择照片")

        content_type, _ = mimetypes.guess_type(path.name)
        if not content_type or not content_type.startswith("image/"):
            raise FortuneClientError("请选择图片文件")

        if path.stat().st_size > self.max_file_size_mb * 1024 * 1024:
            raise FortuneClientError(f"文件大小不能超过{self.max_file_size_mb}MB")

        return content_type

    def upload(self, path: Path) -> Dict[str, Any]:
        """Upload a photo and return the ``result`` mapping.

        Raises:
            FortuneClientError: On any validation, transport, or server error.
        """
        path = Path(path)
        content_type = self.check_photo(path)

        logger.debug(
            "Uploading %s (%d bytes, %s) to %s",
            path,
            path.stat().st_size,
            content_type,
            self.upload_url,
        )

        try:
            with path.open("rb") as fh:
                response = self._session.post(
                    self.upload_url,
                    files={"photo": (path.name, fh, content_type)},
                    timeout=self.timeout,
                )
        except requests.Timeout as exc:
            raise FortuneClientError("上传超时，请重试") from exc
        except requests.ConnectionError as exc:
            raise FortuneClientError("无法连接到服务器，请检查网络连接") from exc
        except requests.RequestException as exc:
            raise FortuneClientError("上传失败，请稍后重试") from exc

        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: requests.Response) -> Dict[str, Any]:
        if response.status_code == 404:
            raise FortuneClientError("上传接口不存在，请检查API配置")
        if response.status_code == 403:
            raise FortuneClientError("没有权限访问该接口")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code == 200 and body.get("result"):
            return body["result"]

        logger.debug("Upload failed with %d: %s", response.status_code, body)
        if body.get("error"):
            raise FortuneClientError(body["error"])
        if response.status_code >= 500:
            raise FortuneClientError(f"上传失败 ({response.status_code})")
        raise FortuneClientError("分析失败")
