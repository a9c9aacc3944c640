"""Infrastructure layer — values handed to the HTTP transport.

Rules
-----
* No network I/O; the transport itself lives outside this package.
* Must expose clean, typed interfaces.
"""

from ytd_formats.infra.http_defaults import (
    build_default_headers,
    build_request_headers,
    default_headers,
)

__all__: list[str] = [
    "build_default_headers",
    "build_request_headers",
    "default_headers",
]
