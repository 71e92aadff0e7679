"""CLI for the Companies House client.

Commands:
- lookup: Print the registered office address for a company number

Exit codes:
- 0: address found
- 1: other Companies House API error (server error, network failure, unexpected 4xx)
- 2: invalid command line, including a blank company number
- 3: company not found
- 4: rate limited
- 5: authentication failed
- 6: invalid response from the API
- 7: invalid configuration
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint

from .config import CompaniesHouseConfig
from .config_file import load_client_config_file
from .exceptions import (
    CompaniesHouseApiError,
    CompaniesHouseAuthenticationError,
    CompanyNotFoundError,
    InvalidCompanyNumberError,
    InvalidConfigurationError,
    InvalidResponseError,
    RateLimitExceededError,
)
from .observability import set_log_level
from .protocols import RegisteredAddressLookup
from .types import Address

EXIT_API_ERROR = 1
EXIT_NOT_FOUND = 3
EXIT_RATE_LIMITED = 4
EXIT_AUTHENTICATION_FAILED = 5
EXIT_INVALID_RESPONSE = 6
EXIT_INVALID_CONFIGURATION = 7

ConfigLoader = Callable[[], CompaniesHouseConfig]


class ClientBuilder(Protocol):
    """Protocol for constructing the lookup client."""

    def __call__(self, config: CompaniesHouseConfig) -> RegisteredAddressLookup:
        """Build a client for the given configuration."""
        ...


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config_loader: ConfigLoader
    client_builder: ClientBuilder

    def load_config(self, config_path: Path | None) -> CompaniesHouseConfig:
        config = self.config_loader()
        if config_path is not None:
            config = config.with_file_overrides(load_client_config_file(config_path))
        return config


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the companies-house entry point.")


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _print_address(company_number: str, address: Address) -> None:
    rprint(f"[green]✓ Registered office address for {company_number}:[/green]")
    lines = [
        f"c/o {address.care_of}" if address.care_of else None,
        address.premises,
        address.address_line_1,
        address.address_line_2,
        address.po_box,
        address.locality,
        address.region,
        address.postal_code,
        address.country,
    ]
    for line in lines:
        if line:
            rprint(f"  {line}")


def _fail(message: str, code: int) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=code)


def create_app(
    client_builder: ClientBuilder,
    config_loader: ConfigLoader = CompaniesHouseConfig.from_env,
) -> typer.Typer:
    """Create a Typer app wired with the provided client builder."""
    app = typer.Typer(
        add_completion=False,
        help="Companies House registered office address lookup",
    )

    @app.callback()
    def main(ctx: typer.Context) -> None:
        """Initialise CLI context."""
        ctx.obj = CliContext(config_loader=config_loader, client_builder=client_builder)

    @app.command()
    def lookup(
        ctx: typer.Context,
        company_number: Annotated[str, typer.Argument(help="Company number, e.g. 09370669")],
        as_json: Annotated[
            bool,
            typer.Option("--json", help="Print the address as JSON"),
        ] = False,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="TOML config file overriding base URL and timeouts",
            ),
        ] = None,
        verbose: Annotated[
            bool,
            typer.Option("--verbose", "-v", help="Log request details at DEBUG level"),
        ] = False,
    ) -> None:
        """Look up the registered office address of a company."""
        if verbose:
            set_log_level(logging.DEBUG)
        state = _get_context(ctx)
        try:
            config = state.load_config(config_path)
        except InvalidConfigurationError as exc:
            raise _fail(str(exc), EXIT_INVALID_CONFIGURATION) from exc

        client = state.client_builder(config)
        try:
            address = client.lookup_registered_address(company_number)
        except InvalidCompanyNumberError as exc:
            raise typer.BadParameter(str(exc), param_hint="COMPANY_NUMBER") from exc
        except CompanyNotFoundError as exc:
            raise _fail(str(exc), EXIT_NOT_FOUND) from exc
        except RateLimitExceededError as exc:
            raise _fail(str(exc), EXIT_RATE_LIMITED) from exc
        except CompaniesHouseAuthenticationError as exc:
            raise _fail(str(exc), EXIT_AUTHENTICATION_FAILED) from exc
        except InvalidResponseError as exc:
            raise _fail(str(exc), EXIT_INVALID_RESPONSE) from exc
        except CompaniesHouseApiError as exc:
            raise _fail(str(exc), EXIT_API_ERROR) from exc

        if as_json:
            typer.echo(json.dumps(address.to_dict(), indent=2))
        else:
            _print_address(company_number, address)

    return app
