"""
Quick script to verify DNSimple API credentials
Reads DNSIMPLE_* variables from the environment or .env

Usage:
    python examples/check_dnsimple_connection.py
    python examples/check_dnsimple_connection.py example.com
"""

import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dnsimple_client import (
    ClientConfig,
    CredentialsMissingError,
    DNSimpleError,
    OtpRequiredError,
    create_client
)

console = Console()


def test_authentication(config: ClientConfig) -> bool:
    """List the account's domains to check the credentials"""
    console.print("\n[bold cyan]Testing DNSimple API Authentication...[/bold cyan]\n")

    info_table = Table(show_header=False, box=None)
    info_table.add_row("[cyan]Host:[/cyan]", f"[blue]{config.hostname}[/blue]")
    info_table.add_row("[cyan]Email:[/cyan]", f"[green]{config.email or 'N/A'}[/green]")
    info_table.add_row("[cyan]Timeout:[/cyan]", f"[yellow]{config.timeout} ms[/yellow]")
    console.print(info_table)
    console.print()

    client = create_client(config=config)

    try:
        console.print("[yellow]→ Attempting to fetch account domains...[/yellow]")
        domains, meta = client.domains.list()

    except CredentialsMissingError as e:
        console.print(Panel(
            f"[bold red]❌ Configuration Error[/bold red]\n\n"
            f"{str(e)}\n\n"
            f"[yellow]→ Copy .env.example to .env and set a token, domain token or password[/yellow]",
            title="Error",
            border_style="red"
        ))
        return False

    except OtpRequiredError as e:
        console.print(Panel(
            f"[bold red]❌ Two-factor authentication required[/bold red]\n\n"
            f"{str(e)}\n\n"
            f"[yellow]→ Set DNSIMPLE_TWO_FACTOR_OTP to the current one-time password[/yellow]",
            title="Error",
            border_style="red"
        ))
        return False

    except DNSimpleError as e:
        console.print(Panel(
            f"[bold red]❌ Request Failed[/bold red]\n\n{str(e)}",
            title="Error",
            border_style="red"
        ))
        return False

    console.print(Panel(
        f"[bold green]✅ Authentication Successful![/bold green]\n\n"
        f"Found [cyan]{len(domains)}[/cyan] domain(s) in your account.\n"
        f"Request id: {meta.request_id or 'N/A'}",
        title="Connection Test",
        border_style="green"
    ))

    if meta.two_factor_token:
        console.print(
            "[yellow]Server issued a two-factor exchange token; "
            "set DNSIMPLE_TWO_FACTOR_TOKEN to reuse it.[/yellow]"
        )

    if domains:
        console.print("\n[bold]Your Domains:[/bold]")
        domain_table = Table(show_header=True, header_style="bold magenta")
        domain_table.add_column("Domain", style="cyan")
        domain_table.add_column("State", style="green")
        domain_table.add_column("Expires", style="yellow")

        for domain in domains[:5]:  # Show first 5
            domain_table.add_row(
                domain.get("name", "N/A"),
                domain.get("state", "N/A"),
                str(domain.get("expires_on") or "N/A")
            )

        console.print(domain_table)

    return True


def test_availability(config: ClientConfig, domain: str) -> bool:
    """Check one domain name"""
    client = create_client(config=config)

    try:
        data, meta = client.domains.check(domain)
    except DNSimpleError as e:
        console.print(f"[red]✗ Availability check failed: {str(e)}[/red]")
        return False

    status = (data or {}).get("status", "unknown")
    colour = "green" if status == "available" else "yellow"
    console.print(f"[{colour}]{domain}: {status}[/{colour}] (HTTP {meta.status_code})")
    return True


def main():
    config = ClientConfig()

    ok = test_authentication(config)
    if ok and len(sys.argv) > 1:
        ok = test_availability(config, sys.argv[1])

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
