from .config import (
    ClientConfig as ClientConfig,
    create_client_config as create_client_config,
)
