import sys
import platform
from importlib.metadata import version as metadata_version
import typer

from traceforward_core import __version__
from traceforward_cli.console.console import Console


app = typer.Typer()

console = Console()


@app.command()
def version():
    """Print TraceForward version information."""
    try:
        package_version = metadata_version('traceforward')
    except Exception:
        package_version = 'Development version'

    console.highlight('TraceForward. Traces to telemetry.')
    console.newline()

    console.info(f'Version: {package_version}')
    console.muted(f'SDK version: SD: {__version__}')
    console.muted(
        f'Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}'
    )
    console.muted(f'Platform: {platform.platform()}')
