"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the codec service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utf16kit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from utf16kit.config.settings import Utf16Settings
    from utf16kit.services.codec import CodecService
    from utf16kit.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: Utf16Settings) -> None:
        self.settings = settings
        self._codec: CodecService | None = None

        from utf16kit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from utf16kit.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def codec(self) -> CodecService:
        """The codec service (created lazily on first access)."""
        if self._codec is None:
            from utf16kit.services.codec import CodecService

            self._codec = CodecService(self.settings)
        return self._codec

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
