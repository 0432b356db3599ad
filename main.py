"""
Material Share developer CLI.

Exercises the client core from a terminal: mask input the way the app
formats keystrokes, run the sign-up validator against the live CEP lookup,
inspect the donation lifecycle, and drive the session and donation board
against a running backend.
"""

import argparse
import asyncio
import inspect
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.table import Table

from clients import AccountClient, DonationClient, PersonClient, ViaCepLookup
from modules.accounts import AccountSession
from modules.donations import Actor, BoardView, DonationBoard, DonationStatus, lifecycle
from modules.formatting import (
    format_date_input,
    format_document,
    format_phone,
    format_postal_code,
)
from modules.validation import SignUpForm, SubmissionValidator
from shared.config import get_settings
from shared.exceptions import MaterialShareError
from shared.http_client import close_api_client
from shared.models import UserType
from shared.session import FileSessionStore, SessionContext

console = Console()

FORMATTERS = {
    "document": format_document,
    "cep": format_postal_code,
    "phone": format_phone,
    "date": format_date_input,
}


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def session_context() -> SessionContext:
    return SessionContext(FileSessionStore(get_settings().session_file))


def cmd_format(args: argparse.Namespace) -> int:
    console.print(FORMATTERS[args.kind](args.value))
    return 0


async def cmd_validate_signup(args: argparse.Namespace) -> int:
    form = SignUpForm(
        name=args.name,
        birth_date=args.birth_date,
        phone=args.phone,
        document=args.document,
        postal_code=args.cep,
        email=args.email,
        password=args.password,
        user_type=UserType(args.user_type) if args.user_type else None,
    )
    validator = SubmissionValidator(ViaCepLookup())
    failure = await validator.validate_sign_up(form)

    if failure is None:
        console.print("[green]Valid[/green]")
        return 0
    console.print(f"[red]{failure.code.value}[/red] ({failure.field}): {failure.message}")
    return 1


def cmd_transitions(args: argparse.Namespace) -> int:
    status = DonationStatus(args.status)
    table = Table(title=f"Allowed from {status.value}")
    table.add_column("Actor")
    table.add_column("Targets")
    for actor in Actor:
        targets = lifecycle.allowed_actions(status, actor)
        table.add_row(actor.value, ", ".join(t.value for t in targets) or "-")
    console.print(table)
    return 0


async def cmd_login(args: argparse.Namespace) -> int:
    accounts = AccountSession(AccountClient(), PersonClient(), session_context())
    record = await accounts.login(args.email, args.password)
    console.print(f"[green]Logged in[/green] as {record.name} ({record.email})")
    console.print(f"[dim]Person: {record.person_id}, type: {record.user_type}[/dim]")
    return 0


def cmd_logout(args: argparse.Namespace) -> int:
    session_context().end()
    console.print("Logged out")
    return 0


async def cmd_donations(args: argparse.Namespace) -> int:
    view = BoardView.REQUESTED if args.requested else BoardView.OWNED
    board = DonationBoard(DonationClient(), session_context(), view=view)
    items = await board.refresh()

    table = Table(title=f"Donations ({view.value})")
    for column in ("ID", "Name", "Qty", "Category", "Status"):
        table.add_column(column)
    for donation in items:
        table.add_row(
            donation.id,
            donation.name,
            str(donation.quantity),
            donation.category_name or donation.category_id,
            donation.status.value,
        )
    console.print(table)
    return 0


async def cmd_withdraw(args: argparse.Namespace) -> int:
    board = DonationBoard(DonationClient(), session_context())
    await board.refresh()
    donation = await board.withdraw(args.donation_id)
    console.print(f"Donation {donation.id} is now [bold]{donation.status.value}[/bold]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Material Share developer CLI")
    commands = parser.add_subparsers(dest="command", required=True)

    fmt = commands.add_parser("format", help="Mask raw input")
    fmt.add_argument("kind", choices=sorted(FORMATTERS))
    fmt.add_argument("value")
    fmt.set_defaults(handler=cmd_format)

    signup = commands.add_parser("validate-signup", help="Run the sign-up validator")
    signup.add_argument("--name", default="")
    signup.add_argument("--birth-date", default="", help="DD/MM/YYYY")
    signup.add_argument("--phone", default="")
    signup.add_argument("--document", default="", help="CPF or CNPJ")
    signup.add_argument("--cep", default="")
    signup.add_argument("--email", default="")
    signup.add_argument("--password", default="")
    signup.add_argument("--user-type", choices=[t.value for t in UserType])
    signup.set_defaults(handler=cmd_validate_signup)

    transitions = commands.add_parser("transitions", help="Show lifecycle edges")
    transitions.add_argument("status", choices=[s.value for s in DonationStatus])
    transitions.set_defaults(handler=cmd_transitions)

    login = commands.add_parser("login", help="Log in and store the session")
    login.add_argument("email")
    login.add_argument("password")
    login.set_defaults(handler=cmd_login)

    logout = commands.add_parser("logout", help="Clear the stored session")
    logout.set_defaults(handler=cmd_logout)

    donations = commands.add_parser("donations", help="List donations for the session")
    donations.add_argument(
        "--requested",
        action="store_true",
        help="Donations I requested as beneficiary",
    )
    donations.set_defaults(handler=cmd_donations)

    withdraw = commands.add_parser("withdraw", help="Withdraw one of my donations")
    withdraw.add_argument("donation_id")
    withdraw.set_defaults(handler=cmd_withdraw)

    return parser


async def _run_async(handler, args: argparse.Namespace) -> int:
    try:
        return await handler(args)
    finally:
        await close_api_client()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        if inspect.iscoroutinefunction(args.handler):
            return asyncio.run(_run_async(args.handler, args))
        return args.handler(args)
    except MaterialShareError as e:
        console.print(f"[red]Error:[/red] {e.user_message or e.message}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
