"""Services shared by the CLI commands."""

from traceforward_cli.services.forwarder_service import (
    create_forwarder as create_forwarder,
    close_forwarder as close_forwarder,
)
