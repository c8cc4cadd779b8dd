"""Error hierarchy – public re-export surface.

Hierarchy::

    SocketLabsError
    ├── SendError            (send.py)
    ├── MessageBuildError    (send.py)
    ├── TransportError       (transport.py)
    └── ConfigError          (socketlabs_client.config.settings)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError

Configuration errors live beside the settings they describe and are
exported from :mod:`socketlabs_client.config`.
"""

from socketlabs_client.errors.base import SocketLabsError
from socketlabs_client.errors.send import MessageBuildError, SendError
from socketlabs_client.errors.transport import TransportError

__all__ = [
    "MessageBuildError",
    "SendError",
    "SocketLabsError",
    "TransportError",
]
