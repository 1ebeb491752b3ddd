"""HTTP transport for the ElevenLabs API.

This module issues every request the client makes. It attaches the API key,
serializes JSON and multipart bodies, classifies non-2xx responses into the
:mod:`eleven_client.errors` taxonomy and retries rate-limited and server
errors with linear backoff (or the server's ``retry-after`` hint). Lifecycle
events are emitted through the configuration's handlers.
"""

import json
from typing import Any, Callable, Dict, Optional

import requests

from eleven_client import errors
from eleven_client.config import Configuration
from eleven_client.events import EventType
from eleven_client.utils.performance_profiler import Stopwatch, record_request
from eleven_client.utils.retry_utils import backoff_delay, should_retry, wait_before_retry

JSON = "json"
BINARY = "binary"

STREAM_CHUNK_SIZE = 4096


class HTTPClient:
    """Retrying HTTP client bound to one :class:`Configuration`.

    The underlying ``requests.Session`` is shared by all requests; it is
    safe to share the client across call chains as long as the registered
    event handlers are.
    """

    def __init__(self, config: Configuration, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session if session is not None else requests.Session()

    def get(self, path: str, params: Optional[Dict[str, Any]] = None):
        """Make a GET request and return the parsed JSON body."""
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Optional[Dict[str, Any]] = None,
             params: Optional[Dict[str, Any]] = None, response_type: str = JSON):
        """Make a POST request.

        Args:
            path: API path, appended to the base URL
            body: JSON body
            params: Query parameters
            response_type: ``"json"`` for a parsed body, ``"binary"`` for raw bytes

        Returns:
            dict, list or bytes
        """
        return self.request("POST", path, body=body, params=params, response_type=response_type)

    def delete(self, path: str):
        """Make a DELETE request and return the parsed JSON body."""
        return self.request("DELETE", path)

    def post_multipart(self, path: str, params: Dict[str, Any]):
        """Make a multipart POST request (for file uploads).

        A ``files`` entry is expanded to ``files[0]``, ``files[1]`` ...;
        every other key is sent as a string form field.
        """
        return self.request("POST", path, body=params, multipart=True)

    def post_stream(self, path: str, body: Optional[Dict[str, Any]] = None,
                    on_chunk: Optional[Callable[[bytes], Any]] = None,
                    params: Optional[Dict[str, Any]] = None) -> None:
        """Make a streaming POST request, pushing each chunk to ``on_chunk``."""
        if on_chunk is None:
            raise errors.ValidationError("on_chunk callable is required for streaming")
        self.request("POST", path, body=body, params=params, on_chunk=on_chunk)

    def request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None,
                params: Optional[Dict[str, Any]] = None, response_type: str = JSON,
                multipart: bool = False, on_chunk: Optional[Callable[[bytes], Any]] = None):
        """Issue a request, retrying retryable failures.

        Raises:
            ConfigurationError: If no API key is configured; nothing is sent
            ElevenError: The classified failure once retries are exhausted
        """
        self.config.validate()

        attempt = 1
        while True:
            try:
                return self._attempt(method, path, body, params, response_type, multipart, on_chunk)
            except errors.RateLimitError as error:
                self.config.trigger(EventType.RATE_LIMIT, retry_after=error.retry_after, error=error)
                self._prepare_retry(error, attempt)
            except errors.ServerError as error:
                self._prepare_retry(error, attempt)
            attempt += 1

    def _prepare_retry(self, error: errors.ElevenError, attempt: int) -> None:
        """Sleep before the next attempt, or re-raise ``error`` if none is allowed."""
        config = self.config
        if not should_retry(attempt, config.max_retries, error.http_status, config.retry_statuses):
            raise error

        retry_after = error.retry_after if isinstance(error, errors.RateLimitError) else None
        delay = backoff_delay(attempt, config.retry_delay, retry_after)

        config.trigger(EventType.RETRY, error=error, attempt=attempt,
                       max_attempts=config.max_retries, delay=delay)
        wait_before_retry(delay, attempt, config.max_retries, error, logger=config.log)

    def _attempt(self, method, path, body, params, response_type, multipart, on_chunk):
        """Run one HTTP attempt.

        Retryable errors (429, 5xx) propagate untouched to :meth:`request`;
        every other failure emits an error event first, and anything outside
        the taxonomy is wrapped (``requests`` failures by kind, the rest as
        APIError).
        """
        sanitized = sanitize_body_for_logging(body)
        self.config.trigger(EventType.REQUEST, method=method, path=path, body=sanitized)
        self.config.log.debug(f"{method} {path}")

        watch = Stopwatch()
        try:
            if on_chunk is not None:
                self._stream(method, path, body, params, on_chunk)
                return None

            response = self._send(method, path, body, params, multipart, stream=False)
            duration = watch.elapsed_ms()
            record_request(stats_key(method, path), duration)
            self.config.trigger(EventType.RESPONSE, method=method, path=path,
                                response=response, duration=duration)

            if response_type == BINARY and _is_success(response):
                return response.content

            return handle_response(response)
        except (errors.RateLimitError, errors.ServerError):
            raise
        except errors.ElevenError as error:
            self._report_error(error, method, path, sanitized)
            raise
        except Exception as error:
            wrapped = wrap_error(error)
            self._report_error(wrapped, method, path, sanitized)
            raise wrapped from error

    def _stream(self, method, path, body, params, on_chunk):
        """Stream a 2xx response body into ``on_chunk``.

        Status errors are raised before any byte reaches the sink, so they
        retry like any other request. A failure after delivery has started
        is raised as a connection error and never retried.
        """
        response = self._send(method, path, body, params, multipart=False, stream=True)
        try:
            if not _is_success(response):
                raise_for_error_response(response)

            delivered = 0
            try:
                for chunk in response.iter_content(chunk_size=STREAM_CHUNK_SIZE):
                    if chunk:
                        on_chunk(chunk)
                        delivered += len(chunk)
            except requests.RequestException as error:
                if delivered:
                    raise errors.ConnectionError(
                        f"Stream interrupted after {delivered} bytes: {error}"
                    ) from error
                raise
        finally:
            response.close()

    def _send(self, method, path, body, params, multipart, stream):
        url = f"{self.config.base_url}{path}"
        options = {
            "headers": build_headers(self.config.api_key, multipart),
            "timeout": (self.config.connect_timeout, self.config.timeout),
            "stream": stream,
        }

        if params:
            options["params"] = {k: v for k, v in params.items() if v is not None}

        if body:
            if multipart:
                options["data"], options["files"] = build_multipart_body(body)
            else:
                options["data"] = json.dumps(compact(body))

        return self.session.request(method, url, **options)

    def _report_error(self, error, method, path, sanitized):
        self.config.trigger(EventType.ERROR, error=error, method=method, path=path,
                            context={"body": sanitized})


def build_headers(api_key: str, multipart: bool = False) -> Dict[str, str]:
    """Build request headers. Content-Type is left to requests for multipart."""
    headers = {
        "xi-api-key": api_key,
        "Accept": "application/json",
    }
    if not multipart:
        headers["Content-Type"] = "application/json"
    return headers


def build_multipart_body(params: Dict[str, Any]):
    """Split multipart params into (form fields, files).

    Returns:
        tuple: (data dict, list of (field name, file) tuples)
    """
    data = {}
    files = []

    for key, value in params.items():
        if value is None:
            continue
        if key == "files":
            items = value if isinstance(value, (list, tuple)) else [value]
            for index, file in enumerate(items):
                files.append((f"files[{index}]", file))
        else:
            data[str(key)] = value if isinstance(value, (str, bytes)) else str(value)

    return data, files


def compact(value):
    """Drop None values from mappings, recursively."""
    if isinstance(value, dict):
        return {k: compact(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [compact(v) for v in value]
    return value


def parse_json(content) -> Any:
    """Parse a response body. Empty or invalid bodies parse to ``{}``."""
    if not content:
        return {}
    try:
        return json.loads(content)
    except ValueError:
        return {}


def handle_response(response: requests.Response):
    """Return the parsed body of a 2xx response, raise for anything else."""
    if _is_success(response):
        return parse_json(response.content)
    return raise_for_error_response(response)


def raise_for_error_response(response: requests.Response):
    """Classify a non-2xx response and raise the matching error."""
    status = response.status_code
    body = parse_json(response.content)
    if not isinstance(body, dict):
        body = {}

    error_class = errors.error_for_status(status)
    kwargs = {
        "http_status": status,
        "response_body": body,
        "error_code": body.get("error_code"),
    }
    if error_class is errors.RateLimitError:
        kwargs["retry_after"] = parse_retry_after(response.headers.get("retry-after"))

    raise error_class(extract_error_message(body), **kwargs)


def parse_retry_after(value) -> Optional[int]:
    """Parse a non-negative integer ``retry-after`` header, ignoring anything else."""
    if value is None:
        return None
    try:
        seconds = int(str(value).strip())
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


def extract_error_message(body: Dict[str, Any]) -> str:
    """Pick the most specific message an error body offers."""
    detail = body.get("detail")
    if isinstance(detail, dict):
        return detail.get("message") or detail.get("status") or str(detail)
    if isinstance(detail, str):
        return detail
    return body.get("message") or body.get("error") or "Unknown error"


def wrap_error(error: Exception) -> errors.ElevenError:
    """Map a failure raised during an attempt onto the error taxonomy."""
    if isinstance(error, requests.Timeout):
        return errors.TimeoutError(str(error))
    if isinstance(error, requests.ConnectionError):
        return errors.ConnectionError(str(error))
    return errors.APIError(str(error))


def stats_key(method: str, path: str) -> str:
    """Latency stats key: the method and the first path segment, so ids never become keys."""
    resource = path.strip("/").split("/", 1)[0]
    return f"{method} /{resource}"


def sanitize_body_for_logging(body):
    """Replace file-like values so raw file bytes never reach handlers or logs."""
    if not isinstance(body, dict):
        return body

    def redact(value):
        if _is_file_like(value):
            return f"[FILE: {getattr(value, 'name', 'upload')}]"
        if isinstance(value, (list, tuple)):
            return [redact(v) for v in value]
        return value

    return {key: redact(value) for key, value in body.items()}


def _is_file_like(value) -> bool:
    return hasattr(value, "read") and callable(value.read)


def _is_success(response) -> bool:
    return 200 <= response.status_code < 300
