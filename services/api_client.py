# -*- coding: utf-8 -*-
"""
Template Studio API Client
==========================

Talks to the admin template endpoints of the page-builder backend:
template file uploads, categories and template creation.
"""

import json
from dataclasses import dataclass
from typing import Optional, Dict, List, Any

import requests
import urllib3

from utils.logger import get_logger
from services.exceptions import ApiException, NetworkException

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    API connection settings.

    Values left as None are loaded from Config (which reads .env):
        API_BASE_URL=http://localhost:3000/api
        API_TOKEN=...
    """
    base_url: str = None
    token: str = None
    timeout: int = None
    submit_timeout: int = None
    upload_timeout: int = None
    verify_ssl: bool = True

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.token is None:
            self.token = Config.API_TOKEN
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.submit_timeout is None:
            self.submit_timeout = Config.SUBMIT_TIMEOUT
        if self.upload_timeout is None:
            self.upload_timeout = Config.UPLOAD_TIMEOUT

        if not self.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class TemplateApiClient:
    """
    Client for the admin template API.

    All responses use the backend envelope {"success", "data", "message"}.
    Non-2xx responses raise ApiException carrying the JSON body;
    connection failures and timeouts raise NetworkException.

    Usage:
        client = TemplateApiClient(ApiConfig(base_url="http://localhost:3000/api"))
        template_id = client.create_template(payload)
    """

    def __init__(self, config: ApiConfig):
        self.config = config
        self.base_url = config.base_url.rstrip('/')

    def _headers(self) -> Dict[str, str]:
        """Headers with Authorization."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        timeout: Optional[int] = None
    ) -> Any:
        """
        Execute an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/admin/templates/wizard")
            json_data: JSON payload
            params: Query parameters
            timeout: Overrides the configured timeout (seconds)

        Returns:
            Response JSON data (None for an empty body)
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.debug(f"[API REQ] Params: {params}")
        if json_data:
            try:
                logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")
            except (TypeError, ValueError):
                logger.debug(f"[API REQ] Body: {json_data}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=timeout or self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = None
            if response.text:
                try:
                    result = response.json()
                except ValueError:
                    logger.error(f"Invalid JSON response: {endpoint}")
                    raise ApiException(
                        message=f"Invalid JSON response from {endpoint}",
                        status_code=response.status_code
                    )

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except (ValueError, AttributeError):
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            message = ""
            if isinstance(response_data, dict):
                message = response_data.get("message") or ""
            raise ApiException(
                message=message or str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {}
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timed out: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                is_timeout=True
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )

    @staticmethod
    def _unwrap(result: Any) -> Any:
        """Return the `data` member of the response envelope."""
        if isinstance(result, dict) and "data" in result:
            return result["data"]
        return result

    # ==================== Template uploads ====================

    def initiate_upload(self, file_name: str, file_type: str, file_size: int) -> Dict[str, Any]:
        """
        Start a template file upload session.

        Returns:
            {"uploadId": ..., "presignedUrl": ...}
        """
        result = self._request(
            "POST",
            "/admin/templates/upload/initiate",
            json_data={"fileName": file_name, "fileType": file_type, "fileSize": file_size}
        )
        data = self._unwrap(result) or {}
        if not data.get("uploadId") or not data.get("presignedUrl"):
            raise ApiException("Upload initiation response is missing uploadId/presignedUrl",
                               response_data=result if isinstance(result, dict) else {})
        return data

    def upload_to_storage(self, presigned_url: str, content: bytes, content_type: str):
        """PUT the raw file bytes to the presigned storage URL."""
        logger.info(f"[API REQ] PUT <presigned> ({len(content)} bytes)")
        try:
            response = requests.request(
                method="PUT",
                url=presigned_url,
                data=content,
                headers={"Content-Type": content_type},
                timeout=self.config.upload_timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            logger.error(f"[API ERR] {status_code} PUT <presigned>")
            raise ApiException("Failed to upload file to storage", status_code=status_code)
        except requests.exceptions.Timeout as e:
            raise NetworkException(message=str(e), original_error=e, is_timeout=True)
        except requests.exceptions.RequestException as e:
            raise NetworkException(message=str(e), original_error=e)

    def complete_upload(self, upload_id: str, file_name: str) -> Dict[str, Any]:
        """
        Finish an upload session.

        Returns:
            Upload data including "publicUrl"
        """
        result = self._request(
            "POST",
            "/admin/templates/upload/complete",
            json_data={"uploadId": upload_id, "fileName": file_name}
        )
        data = self._unwrap(result) or {}
        if not data.get("publicUrl"):
            raise ApiException("Upload completion response is missing publicUrl",
                               response_data=result if isinstance(result, dict) else {})
        return data

    # ==================== Categories ====================

    def get_categories(self) -> List[Dict[str, Any]]:
        """List template categories: [{"id", "name", ...}]."""
        result = self._request("GET", "/admin/categories")
        data = self._unwrap(result)
        return data if isinstance(data, list) else []

    def create_category(self, name: str, description: Optional[str] = None) -> Dict[str, Any]:
        """
        Create a template category.

        Returns:
            The created category {"id", "name", ...}
        """
        payload = {
            "name": name,
            "description": description or f"Category for {name} templates"
        }
        result = self._request("POST", "/admin/categories", json_data=payload)
        data = self._unwrap(result)
        if not isinstance(data, dict) or not data.get("id"):
            raise ApiException("Category creation response did not include an id",
                               response_data=result if isinstance(result, dict) else {})
        logger.info(f"Category created: {data['id']}")
        return data

    # ==================== Templates ====================

    def create_template(self, template_data: Dict[str, Any]) -> str:
        """
        Create a template from the wizard payload.

        Args:
            template_data: Flattened wizard payload
                {name, description, categoryId, previewImageUrl, components[], ...}

        Returns:
            The new template's identifier
        """
        result = self._request(
            "POST",
            "/admin/templates/wizard",
            json_data=template_data,
            timeout=self.config.submit_timeout
        )
        template_id = self._extract_id(result)
        if not template_id:
            raise ApiException("Template creation response did not include an id",
                               response_data=result if isinstance(result, dict) else {})
        logger.info(f"Template created: {template_id}")
        return template_id

    @staticmethod
    def _extract_id(result: Any) -> Optional[str]:
        if not isinstance(result, dict):
            return None
        data = result.get("data")
        if isinstance(data, dict) and data.get("id"):
            return str(data["id"])
        if result.get("id"):
            return str(result["id"])
        return None


_api_client_instance: Optional[TemplateApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> TemplateApiClient:
    """
    Shared TemplateApiClient instance.

    Args:
        config: API settings (only used on first call)
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = TemplateApiClient(config)

    return _api_client_instance

