#!/usr/bin/env python3
"""
DigitalOcean Resource Manager - Demo Script

This script walks through the domain and record commands using the mock
backend, so no API token is needed and nothing changes remotely.
"""

import shlex

from rich.console import Console
from rich.panel import Panel

from do_manager.cli.main import run
from do_manager.services.service_client import ServiceClient

# Initialize rich console
console = Console()

DEMO_CONFIG = {
    "default_backend": "mock",
    "mock": {
        "regions": [
            {"slug": "nyc3", "name": "New York 3", "available": True},
            {"slug": "ams3", "name": "Amsterdam 3", "available": True},
            {"slug": "sfo1", "name": "San Francisco 1", "available": False},
        ]
    },
}

DEMO_COMMANDS = [
    "domain create example.com --ip-address 203.0.113.10",
    "domain list",
    "domain records create example.com --record-type A --record-name www --record-data 203.0.113.11",
    "domain records create example.com --record-type MX --record-name @ --record-data mail.example.com. --record-priority 10",
    "domain records list example.com",
    "domain records update example.com --record-id 2 --record-data 203.0.113.12",
    "domain records delete example.com 3",
    "domain records list example.com --format ID,Type,Name,Data",
    "domain records create example.com --record-name broken",
    "domain get example.com --output json",
    "region list",
]


def display_demo_header():
    """Display the demo header."""
    console.print(
        Panel.fit(
            "[bold blue]DigitalOcean Resource Manager - Demo[/bold blue]\n"
            "[cyan]Domain and record commands against the mock backend[/cyan]",
            border_style="blue",
        )
    )
    console.print()


def run_demo_command(client: ServiceClient, command: str):
    """Run one CLI command against the shared mock client."""
    console.print(f"[bold green]$ do-manager {command}[/bold green]")
    status = run(shlex.split(command), client=client, console=console)
    if status != 0:
        console.print(f"[yellow]exit status {status}[/yellow]")
    console.print()


def main():
    """Main demo function."""
    display_demo_header()

    # One client for all commands so the mock keeps its state between them
    client = ServiceClient(DEMO_CONFIG)

    for command in DEMO_COMMANDS:
        run_demo_command(client, command)

    console.print(
        Panel.fit(
            "[bold green]Demo Summary[/bold green]\n"
            f"✓ {len(DEMO_COMMANDS)} commands run\n"
            f"✓ {len(client.domains.calls)} service calls recorded by the mock\n"
            "✓ No remote changes made",
            border_style="green",
        )
    )


if __name__ == "__main__":
    main()
